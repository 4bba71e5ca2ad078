from .article_repository import ArticleRepository
from .user_repository import UserRepository
from .news_api import NewsApi
from .image_rasterizer import ImageRasterizer

__all__ = [
    "ArticleRepository",
    "UserRepository",
    "NewsApi",
    "ImageRasterizer",
]
