from .article import Article, ArticleStatus, KNOWN_TAGS
from .user import User, AuthStatus
from .feed_store import FeedStore
from .image_transform import (
    ImageTransform,
    Size,
    cover_scale,
    translation_limits,
    clamp_translation,
    covers_viewport,
)

__all__ = [
    "Article",
    "ArticleStatus",
    "KNOWN_TAGS",
    "User",
    "AuthStatus",
    "FeedStore",
    "ImageTransform",
    "Size",
    "cover_scale",
    "translation_limits",
    "clamp_translation",
    "covers_viewport",
]
