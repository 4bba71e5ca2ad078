from .user import UserModel
from .article import ArticleModel

__all__ = [
    "UserModel",
    "ArticleModel",
]
