"""Domain entities — pure Python business objects, no framework dependencies."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum


class ArticleStatus(str, Enum):
    """Moderation status. Only approved articles reach the feed."""

    APPROVED = "approved"
    PENDING = "pending"


# Category labels offered by the submission form; the set is open.
KNOWN_TAGS = ("Campus", "Sports", "Events", "Opinion")


@dataclass
class Article:
    """Core domain entity representing a campus news article."""

    title: str
    body: str
    tag: str
    image_path: str | None = None
    author_name: str = ""
    user_id: int | None = None
    status: ArticleStatus = ArticleStatus.PENDING
    id: int | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def is_approved(self) -> bool:
        return self.status == ArticleStatus.APPROVED
