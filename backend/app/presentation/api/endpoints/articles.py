"""Article endpoints — the public feed, a user's own articles, submission."""

import logging

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile, status

from app.application.schemas import (
    ArticleCreate,
    ArticleCreatedResponse,
    ArticleListResponse,
    ArticleResponse,
)
from app.application.services import ArticleService
from app.domain.exceptions import EntityNotFoundError, ValidationError
from app.infrastructure.dependencies import get_article_service, get_current_user_id

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/articles", tags=["Articles"])


@router.get("", response_model=ArticleListResponse)
async def list_articles(
    service: ArticleService = Depends(get_article_service),
) -> ArticleListResponse:
    """Every approved article, newest first."""
    articles = await service.list_feed()
    return ArticleListResponse(
        articles=[ArticleResponse.model_validate(a, from_attributes=True) for a in articles]
    )


@router.get("/my", response_model=ArticleListResponse)
async def list_my_articles(
    user_id: int = Depends(get_current_user_id),
    service: ArticleService = Depends(get_article_service),
) -> ArticleListResponse:
    """The signed-in user's articles, whatever their status."""
    articles = await service.list_user_articles(user_id)
    return ArticleListResponse(
        articles=[ArticleResponse.model_validate(a, from_attributes=True) for a in articles]
    )


@router.post("", response_model=ArticleCreatedResponse)
async def submit_article(
    title: str = Form(""),
    body: str = Form(""),
    tag: str = Form(""),
    image: UploadFile | None = File(None),
    user_id: int = Depends(get_current_user_id),
    service: ArticleService = Depends(get_article_service),
) -> ArticleCreatedResponse:
    """Publish an article with its (already cropped) image."""
    data = ArticleCreate(title=title, body=body, tag=tag)
    content_type = image.content_type if image is not None else None
    try:
        # The upload is already spooled; reject it on its size before reading it in.
        if image is not None and image.size is not None:
            service.validate(data, image.size, content_type)
        content = await image.read() if image is not None else None
        article = await service.submit_article(
            user_id=user_id,
            data=data,
            image=content,
            filename=(image.filename if image is not None else None) or "article-image.jpg",
            content_type=content_type,
        )
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except EntityNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return ArticleCreatedResponse(article=ArticleResponse.model_validate(article, from_attributes=True))
