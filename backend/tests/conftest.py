"""Shared fakes for the feed client tests."""

import asyncio
from datetime import datetime, timedelta, timezone

import pytest

from app.application.interfaces import NewsApi
from app.domain.entities import Article, ArticleStatus, AuthStatus, User
from app.domain.exceptions import NewsApiError


def make_articles(count: int) -> list[Article]:
    now = datetime.now(timezone.utc)
    return [
        Article(
            id=i,
            title=f"Article {i}",
            body=f"Body {i}",
            tag="Campus",
            image_path=f"/uploads/articles/{i}.jpg",
            author_name="Admin User",
            status=ArticleStatus.APPROVED,
            created_at=now - timedelta(minutes=i),
        )
        for i in range(1, count + 1)
    ]


class FakeNewsApi(NewsApi):
    """In-memory NewsApi that records calls and can be told to fail."""

    def __init__(self, articles: list[Article] | None = None):
        self.articles: list[Article] | None = articles if articles is not None else make_articles(12)
        self.authenticated = True
        self.user = User(id=1, name="Ada", email="ada@campus.edu")
        self.profile_error: NewsApiError | None = None
        self.submit_error: NewsApiError | None = None
        self.submit_delay = 0.0
        self.logout_ok = True
        self.fetch_calls = 0
        self.submitted: list[dict] = []
        self.closed = False

    async def fetch_articles(self) -> list[Article] | None:
        self.fetch_calls += 1
        return None if self.articles is None else list(self.articles)

    async def auth_status(self) -> AuthStatus:
        if not self.authenticated:
            return AuthStatus(authenticated=False)
        return AuthStatus(authenticated=True, user=self.user)

    async def fetch_profile(self) -> User | None:
        return self.user if self.authenticated else None

    async def update_profile(self, name: str, email: str) -> User:
        if self.profile_error is not None:
            raise self.profile_error
        self.user = User(id=self.user.id, name=name, email=email)
        return self.user

    async def submit_article(self, title, body, tag, image, filename="article-image.jpg") -> Article:
        if self.submit_delay:
            await asyncio.sleep(self.submit_delay)
        if self.submit_error is not None:
            raise self.submit_error
        self.submitted.append(
            {"title": title, "body": body, "tag": tag, "image": image, "filename": filename}
        )
        article = Article(
            id=1000 + len(self.submitted),
            title=title,
            body=body,
            tag=tag,
            image_path="/uploads/articles/new.jpg",
            author_name=self.user.name,
            status=ArticleStatus.APPROVED,
        )
        self.articles = [article, *(self.articles or [])]
        return article

    async def logout(self) -> bool:
        return self.logout_ok

    async def aclose(self) -> None:
        self.closed = True


@pytest.fixture
def fake_api() -> FakeNewsApi:
    return FakeNewsApi()


@pytest.fixture
def article_factory():
    return make_articles
