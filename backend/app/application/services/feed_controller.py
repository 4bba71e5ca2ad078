"""Feed controller — drives fetch → render → scroll → load-more/shuffle.

Runs on a single asyncio event loop. The only suspension points are API
calls, the pacing delay before each infinite-scroll batch and the resize
debounce. ``is_loading`` guarantees at most one scroll load in flight; a
visibility signal that arrives while a load is pending is ignored.
"""

import asyncio
import logging

from app.application.interfaces import NewsApi
from app.application.services.feed_renderer import (
    FeedDocument,
    FeedRenderer,
    FeedState,
    LayoutMode,
)
from app.domain.entities import FeedStore, User
from app.domain.exceptions import NewsApiError

logger = logging.getLogger(__name__)

LOGIN_PATH = "/login"


class FeedController:
    """Connects the news API, the feed store and the renderer."""

    def __init__(
        self,
        api: NewsApi,
        store: FeedStore,
        renderer: FeedRenderer,
        mobile_breakpoint_px: int = 768,
        load_delay_seconds: float = 0.4,
        resize_debounce_seconds: float = 0.2,
    ):
        self._api = api
        self._store = store
        self._renderer = renderer
        self._breakpoint = mobile_breakpoint_px
        self._load_delay = load_delay_seconds
        self._resize_debounce = resize_debounce_seconds

        self.is_loading = False
        self.viewport_width: int | None = None
        self.last_is_mobile: bool | None = None
        self.current_user: User | None = None
        self._started = False
        self._load_task: asyncio.Task | None = None
        self._resize_task: asyncio.Task | None = None

    @property
    def document(self) -> FeedDocument:
        return self._renderer.document

    @property
    def store(self) -> FeedStore:
        return self._store

    # ── Startup ────────────────────────────────────────────────────

    async def start(self, viewport_width: int) -> None:
        """Check auth, fetch every approved article once, draw the first page."""
        self.viewport_width = viewport_width

        if not await self.check_auth_status():
            return

        articles = await self._api.fetch_articles()
        if articles is None:
            self._renderer.render_error_state()
            return

        self._store.load(articles)
        self.last_is_mobile = self.is_mobile_view()
        self.render_content()
        self._started = True

    async def check_auth_status(self) -> bool:
        status = await self._api.auth_status()
        if status.authenticated:
            self.current_user = status.user
            return True
        logger.info("Not authenticated, redirecting to %s", LOGIN_PATH)
        self.document.redirect_to = LOGIN_PATH
        return False

    def is_mobile_view(self, width: int | None = None) -> bool:
        width = self.viewport_width if width is None else width
        return width is not None and width <= self._breakpoint

    # ── Rendering ──────────────────────────────────────────────────

    def render_content(self) -> None:
        """Re-render from scratch for the current layout mode."""
        mobile = self.is_mobile_view()
        self._store.reset_cursor()

        if mobile:
            batch = self._store.next_batch()
        else:
            batch = self._store.first_n()

        mode = LayoutMode.MOBILE if mobile else LayoutMode.DESKTOP
        self._renderer.render_initial_layout(batch, mode)
        self.toggle_infinite_scroll(mobile and self.document.state == FeedState.POPULATED)
        logger.debug("Rendered %s layout with %d articles", mode.value, len(batch))

    def toggle_infinite_scroll(self, enable: bool) -> None:
        self.document.sentinel_observed = enable
        if not enable:
            self._renderer.toggle_loading_indicator(False)

    # ── Infinite scroll ────────────────────────────────────────────

    def on_sentinel_visible(self, is_intersecting: bool = True) -> asyncio.Task | None:
        """Scroll sentinel changed visibility. Returns the scheduled load, if any."""
        if not is_intersecting or not self.document.sentinel_observed:
            return None
        if self.is_loading:
            logger.debug("Load already in flight; ignoring sentinel signal")
            return None
        if len(self._store) == 0:
            return None

        self.is_loading = True
        self._renderer.toggle_loading_indicator(True)
        self._load_task = asyncio.create_task(self._load_next_batch())
        return self._load_task

    async def _load_next_batch(self) -> None:
        try:
            await asyncio.sleep(self._load_delay)
            if not self.document.sentinel_observed:
                # Layout switched to desktop while we were waiting.
                return
            if self._store.is_exhausted:
                logger.info("Reached end of articles; shuffling for infinite scroll")
                self._store.reshuffle()
            batch = self._store.next_batch()
            if batch:
                self._renderer.append_batch(batch)
                logger.debug("Loaded %d more articles (cursor=%d)", len(batch), self._store.cursor)
        finally:
            self._renderer.toggle_loading_indicator(False)
            self.is_loading = False

    # ── Resize ─────────────────────────────────────────────────────

    def on_resize(self, viewport_width: int) -> asyncio.Task:
        """Debounced: only the last resize in a burst is acted upon."""
        self.viewport_width = viewport_width
        if self._resize_task is not None and not self._resize_task.done():
            self._resize_task.cancel()
        self._resize_task = asyncio.create_task(self._apply_resize())
        return self._resize_task

    async def _apply_resize(self) -> None:
        await asyncio.sleep(self._resize_debounce)
        if not self._started:
            return
        current = self.is_mobile_view()
        if current != self.last_is_mobile:
            logger.info(
                "View mode changed from %s to %s; re-rendering",
                "mobile" if self.last_is_mobile else "desktop",
                "mobile" if current else "desktop",
            )
            self.last_is_mobile = current
            self.render_content()

    # ── Refresh after submission ───────────────────────────────────

    async def refresh(self) -> None:
        articles = await self._api.fetch_articles()
        if articles is None:
            return
        self._store.load(articles)
        self.render_content()
        self._started = True

    # ── Profile ────────────────────────────────────────────────────

    async def open_profile(self) -> User | None:
        user = await self._api.fetch_profile()
        if user is None:
            self.document.redirect_to = LOGIN_PATH
            return None
        self.current_user = user
        return user

    async def save_profile(self, name: str, email: str) -> User | None:
        if not name or not email:
            self.document.notify("error", "Name and email are required.")
            return None
        try:
            user = await self._api.update_profile(name, email)
        except NewsApiError as e:
            self.document.notify("error", e.message or "Failed to update profile.")
            return None
        self.current_user = user
        self.document.notify("success", "Profile updated successfully!")
        return user

    async def logout(self) -> bool:
        if await self._api.logout():
            self.current_user = None
            self.document.redirect_to = LOGIN_PATH
            return True
        self.document.notify("error", "Failed to log out.")
        return False

    # ── Lifecycle ──────────────────────────────────────────────────

    async def wait_idle(self) -> None:
        """Wait for any pending scroll load or resize to finish."""
        for task in (self._load_task, self._resize_task):
            if task is not None and not task.done():
                try:
                    await task
                except asyncio.CancelledError:
                    pass

    def close(self) -> None:
        """Page unload: cancel pending timers."""
        for task in (self._load_task, self._resize_task):
            if task is not None and not task.done():
                task.cancel()
        # A load cancelled before it ran never reaches its own cleanup.
        self.is_loading = False
        self._renderer.toggle_loading_indicator(False)
