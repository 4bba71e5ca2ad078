"""Feed renderer — turns article batches into card markup on a headless document.

The renderer knows nothing about the browser. It writes into a
``FeedDocument`` which records what the page should show: a loading, empty,
error or populated state, the ordered card fragments, whether the
"loading more" affordance is visible and whether the scroll sentinel is in
place. Titles, bodies, tags, author names and image paths are user-authored
and are always escaped before they go into markup.
"""

import html
from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from app.domain.entities import Article


class FeedState(str, Enum):
    LOADING = "loading"
    EMPTY = "empty"
    ERROR = "error"
    POPULATED = "populated"


class LayoutMode(str, Enum):
    MOBILE = "mobile"    # single column, infinite scroll
    DESKTOP = "desktop"  # fixed first page, no scrolling loads


@dataclass
class Notice:
    level: str  # "info" | "success" | "error"
    text: str


EMPTY_STATE_HTML = (
    '<div class="no-articles">'
    "<h3>No articles found</h3>"
    "<p>Be the first to submit an article!</p>"
    "</div>"
)

ERROR_STATE_HTML = (
    '<div class="error-state">'
    "<h3>Error loading articles</h3>"
    "<p>Please try refreshing the page.</p>"
    '<button data-action="reload">Refresh</button>'
    "</div>"
)

LOADING_MORE_HTML = '<div class="loading-indicator"><div class="spinner"></div><p>Loading more articles...</p></div>'


@dataclass
class FeedDocument:
    """What the feed page currently shows."""

    state: FeedState = FeedState.LOADING
    layout: LayoutMode | None = None
    cards: list[str] = field(default_factory=list)
    article_ids: list[int | None] = field(default_factory=list)
    status_html: str = ""
    loading_more: bool = False
    sentinel_observed: bool = False
    redirect_to: str | None = None
    notices: list[Notice] = field(default_factory=list)

    def notify(self, level: str, text: str) -> None:
        self.notices.append(Notice(level, text))

    @property
    def last_notice(self) -> Notice | None:
        return self.notices[-1] if self.notices else None


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}{'s' if count != 1 else ''} ago"


def time_ago(created_at: datetime | str, now: datetime | None = None) -> str:
    """Human-readable age of a timestamp, floored to the largest unit.

    Naive datetimes (SQLite returns these) are taken as UTC.
    """
    if isinstance(created_at, str):
        created_at = datetime.fromisoformat(created_at.replace("Z", "+00:00"))
    if created_at.tzinfo is None:
        created_at = created_at.replace(tzinfo=timezone.utc)
    now = now or datetime.now(timezone.utc)

    seconds = int((now - created_at).total_seconds())
    if seconds < 60:
        return "Just now"
    minutes = seconds // 60
    if minutes < 60:
        return _plural(minutes, "minute")
    hours = minutes // 60
    if hours < 24:
        return _plural(hours, "hour")
    return _plural(hours // 24, "day")


def _e(value: object) -> str:
    return html.escape("" if value is None else str(value), quote=True)


class FeedRenderer:
    """Writes feed states and article cards into a FeedDocument."""

    def __init__(self, document: FeedDocument, source_label: str = "Proto"):
        self.document = document
        self._source_label = source_label

    def article_html(self, article: Article, now: datetime | None = None) -> str:
        """Markup for one news card; every user-supplied field is escaped."""
        return (
            '<div class="news-card">'
            '<div class="card-image">'
            f'<img src="{_e(article.image_path)}" alt="{_e(article.title)}" loading="lazy">'
            f'<div class="card-category">{_e(article.tag)}</div>'
            "</div>"
            '<div class="card-content">'
            f'<div class="card-source"><span>{_e(self._source_label)}</span></div>'
            f'<h3 class="card-title">{_e(article.title)}</h3>'
            f'<p class="card-description">{_e(article.body)}</p>'
            '<div class="card-meta">'
            f'<span class="time">{_e(time_ago(article.created_at, now))}</span>'
            f'<span class="author">{_e(article.author_name)}</span>'
            "</div>"
            "</div>"
            "</div>"
        )

    def render_initial_layout(self, batch: Sequence[Article] | None, mode: LayoutMode) -> None:
        """Replace the feed with the first page, or the empty state."""
        doc = self.document
        doc.layout = mode
        doc.loading_more = False
        doc.cards.clear()
        doc.article_ids.clear()

        if not batch:
            self.render_empty_state()
            return

        doc.state = FeedState.POPULATED
        doc.status_html = ""
        self.append_batch(batch)

    def append_batch(self, batch: Sequence[Article]) -> None:
        now = datetime.now(timezone.utc)
        for article in batch:
            self.document.cards.append(self.article_html(article, now))
            self.document.article_ids.append(article.id)

    def render_empty_state(self) -> None:
        self.document.state = FeedState.EMPTY
        self.document.status_html = EMPTY_STATE_HTML

    def render_error_state(self) -> None:
        self.document.state = FeedState.ERROR
        self.document.status_html = ERROR_STATE_HTML
        self.document.cards.clear()
        self.document.article_ids.clear()

    def toggle_loading_indicator(self, show: bool) -> None:
        self.document.loading_more = show

    def loading_indicator_html(self) -> str:
        return LOADING_MORE_HTML if self.document.loading_more else ""
