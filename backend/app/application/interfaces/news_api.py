"""Abstract interface (port) for the campus news HTTP API, as seen by the client."""

from abc import ABC, abstractmethod

from app.domain.entities import Article, AuthStatus, User


class NewsApi(ABC):
    """Every network call the feed client makes.

    Read calls swallow transport failures and report them as ``None`` /
    ``False`` so the caller can render an error state. Write calls raise
    ``NewsApiError`` carrying the server's message.
    """

    @abstractmethod
    async def fetch_articles(self) -> list[Article] | None:
        """Approved articles, ``[]`` for an unsuccessful payload, ``None`` on error."""
        ...

    @abstractmethod
    async def auth_status(self) -> AuthStatus:
        ...

    @abstractmethod
    async def fetch_profile(self) -> User | None:
        ...

    @abstractmethod
    async def update_profile(self, name: str, email: str) -> User:
        ...

    @abstractmethod
    async def submit_article(
        self,
        title: str,
        body: str,
        tag: str,
        image: bytes,
        filename: str = "article-image.jpg",
    ) -> Article:
        ...

    @abstractmethod
    async def logout(self) -> bool:
        ...

    async def aclose(self) -> None:
        """Release network resources. Nothing to do by default."""
        return None
