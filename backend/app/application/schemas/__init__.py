from .article import (
    ArticleCreate,
    ArticleResponse,
    ArticleListResponse,
    ArticleCreatedResponse,
)
from .profile import (
    UserResponse,
    ProfileUserResponse,
    ProfileResponse,
    ProfileUpdateResponse,
    ProfileUpdate,
    AuthStatusResponse,
    LogoutResponse,
    ErrorResponse,
)

__all__ = [
    "ArticleCreate",
    "ArticleResponse",
    "ArticleListResponse",
    "ArticleCreatedResponse",
    "UserResponse",
    "ProfileUserResponse",
    "ProfileResponse",
    "ProfileUpdateResponse",
    "ProfileUpdate",
    "AuthStatusResponse",
    "LogoutResponse",
    "ErrorResponse",
]
