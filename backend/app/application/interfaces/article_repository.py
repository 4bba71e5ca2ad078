"""Abstract repository interfaces (ports) — define the contract, not the implementation."""

from abc import ABC, abstractmethod

from app.domain.entities import Article, ArticleStatus


class ArticleRepository(ABC):
    """Port for article persistence — implemented in the infrastructure layer."""

    @abstractmethod
    async def list_by_status(self, status: ArticleStatus) -> list[Article]:
        """Retrieve every article with the given status, newest first."""
        ...

    @abstractmethod
    async def list_by_user(self, user_id: int) -> list[Article]:
        """Retrieve every article a user submitted, newest first."""
        ...

    @abstractmethod
    async def create(self, article: Article) -> Article:
        """Persist a new article and return it with the generated ID."""
        ...

    @abstractmethod
    async def count(self) -> int:
        """Total number of stored articles, any status."""
        ...
