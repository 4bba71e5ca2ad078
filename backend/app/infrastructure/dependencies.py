"""Dependency wiring — FastAPI providers for the backend, and the feed
session context for the client."""

from collections.abc import AsyncGenerator

import httpx
from fastapi import Depends, HTTPException, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import Settings, get_settings
from app.application.services import (
    ActionDispatcher,
    ArticleService,
    ArticleSubmissionForm,
    FeedAppContext,
    FeedController,
    FeedDocument,
    FeedRenderer,
    ImageAdjustmentEngine,
    ProfileService,
    register_default_actions,
)
from app.domain.entities import FeedStore, Size
from app.infrastructure.database.session import get_db_session
from app.infrastructure.database.repositories import (
    SQLAlchemyArticleRepository,
    SQLAlchemyUserRepository,
)
from app.infrastructure.http import NewsApiClient
from app.infrastructure.imaging import PillowImageRasterizer
from app.infrastructure.storage.local_file_storage import LocalFileStorage

SESSION_USER_KEY = "user_id"


# ── Backend: session identity ───────────────────────────────────────


def get_optional_user_id(request: Request) -> int | None:
    """User id from the signed session cookie, if the auth service set one."""
    user_id = request.session.get(SESSION_USER_KEY)
    return int(user_id) if user_id is not None else None


def get_current_user_id(user_id: int | None = Depends(get_optional_user_id)) -> int:
    if user_id is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Authentication required")
    return user_id


# ── Backend: services ───────────────────────────────────────────────


async def get_article_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[ArticleService, None]:
    """Provides an ArticleService with its repositories and storage wired up."""
    settings = get_settings()
    yield ArticleService(
        repository=SQLAlchemyArticleRepository(session),
        user_repository=SQLAlchemyUserRepository(session),
        storage=LocalFileStorage(upload_dir=settings.upload_dir),
        title_max_length=settings.article_title_max_length,
        body_max_length=settings.article_body_max_length,
        max_image_bytes=settings.max_upload_size_bytes,
    )


async def get_profile_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[ProfileService, None]:
    """Provides a ProfileService instance with its repository wired up."""
    yield ProfileService(SQLAlchemyUserRepository(session))


# ── Client: feed session context ────────────────────────────────────


def build_feed_context(
    settings: Settings | None = None,
    http_client: httpx.AsyncClient | None = None,
    store: FeedStore | None = None,
) -> FeedAppContext:
    """Construct every feed-session collaborator once and wire them together."""
    settings = settings or get_settings()

    api = NewsApiClient(
        base_url=settings.api_base_url,
        http_client=http_client,
        timeout=settings.api_timeout_seconds,
    )
    store = store or FeedStore(
        page_size=settings.feed_page_size,
        desktop_limit=settings.feed_desktop_limit,
    )
    document = FeedDocument()
    renderer = FeedRenderer(document)
    controller = FeedController(
        api=api,
        store=store,
        renderer=renderer,
        mobile_breakpoint_px=settings.feed_mobile_breakpoint_px,
        load_delay_seconds=settings.feed_load_delay_ms / 1000,
        resize_debounce_seconds=settings.feed_resize_debounce_ms / 1000,
    )
    image_engine = ImageAdjustmentEngine(
        rasterizer=PillowImageRasterizer(max_pixels=settings.image_max_pixels),
        viewport=Size(settings.image_viewport_width, settings.image_viewport_height),
        output=Size(settings.image_output_width, settings.image_output_height),
        max_file_bytes=settings.max_upload_size_bytes,
        max_zoom_factor=settings.image_max_zoom_factor,
        jpeg_quality=settings.image_jpeg_quality,
    )
    form = ArticleSubmissionForm(
        api=api,
        controller=controller,
        image_engine=image_engine,
        title_max_length=settings.article_title_max_length,
        body_max_length=settings.article_body_max_length,
    )

    ctx = FeedAppContext(
        api=api,
        store=store,
        document=document,
        renderer=renderer,
        controller=controller,
        image_engine=image_engine,
        form=form,
        dispatcher=ActionDispatcher(),
    )
    register_default_actions(ctx)
    return ctx
