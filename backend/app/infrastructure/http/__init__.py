"""HTTP client infrastructure package."""

from .news_api_client import NewsApiClient

__all__ = ["NewsApiClient"]
