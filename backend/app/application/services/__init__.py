from .article_service import ArticleService
from .profile_service import ProfileService
from .feed_renderer import (
    FeedDocument,
    FeedRenderer,
    FeedState,
    LayoutMode,
    Notice,
    time_ago,
)
from .feed_controller import FeedController
from .image_adjustment_service import (
    AdjustmentState,
    ImageAdjustmentEngine,
    ImageUpload,
)
from .article_form import ArticleSubmissionForm, ArticleDraft
from .action_dispatcher import ActionDispatcher
from .feed_context import FeedAppContext, register_default_actions

__all__ = [
    "ArticleService",
    "ProfileService",
    "FeedDocument",
    "FeedRenderer",
    "FeedState",
    "LayoutMode",
    "Notice",
    "time_ago",
    "FeedController",
    "AdjustmentState",
    "ImageAdjustmentEngine",
    "ImageUpload",
    "ArticleSubmissionForm",
    "ArticleDraft",
    "ActionDispatcher",
    "FeedAppContext",
    "register_default_actions",
]
