"""Campus news API client — implements the NewsApi port over HTTP.

Talks to the backend's JSON endpoints with ``httpx``. One ``AsyncClient``
is kept for the whole session so the session cookie set by the auth
service travels with every request.
"""

import logging
from datetime import datetime, timezone
from typing import Any

import httpx

from app.application.interfaces import NewsApi
from app.domain.entities import Article, ArticleStatus, AuthStatus, User
from app.domain.exceptions import NewsApiError

logger = logging.getLogger(__name__)


def _parse_datetime(raw: Any) -> datetime:
    if isinstance(raw, str) and raw:
        try:
            value = datetime.fromisoformat(raw.replace("Z", "+00:00"))
        except ValueError:
            logger.warning("Unparseable timestamp %r; using now", raw)
            return datetime.now(timezone.utc)
        return value if value.tzinfo else value.replace(tzinfo=timezone.utc)
    return datetime.now(timezone.utc)


def _to_article(data: dict[str, Any]) -> Article:
    status = data.get("status") or ArticleStatus.APPROVED.value
    try:
        parsed_status = ArticleStatus(status)
    except ValueError:
        parsed_status = ArticleStatus.PENDING
    return Article(
        id=data.get("id"),
        title=data.get("title") or "",
        body=data.get("body") or "",
        tag=data.get("tag") or "",
        image_path=data.get("image_path"),
        author_name=data.get("author_name") or "",
        created_at=_parse_datetime(data.get("created_at")),
        status=parsed_status,
    )


def _to_user(data: dict[str, Any]) -> User:
    return User(
        id=data.get("id"),
        name=data.get("name") or "",
        email=data.get("email") or "",
        created_at=_parse_datetime(data.get("createdAt") or data.get("created_at")),
    )


def _error_message(response: httpx.Response) -> str:
    """The server's ``{"error": ...}`` string, or a generic status line."""
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and isinstance(body.get("error"), str):
        return body["error"]
    return f"HTTP error! status: {response.status_code}"


def _record(response: httpx.Response, key: str) -> dict[str, Any]:
    """The ``key`` object of a 2xx body; a body without one is a failed call."""
    try:
        body = response.json()
    except ValueError:
        body = None
    record = body.get(key) if isinstance(body, dict) else None
    if not isinstance(record, dict):
        logger.error("Malformed response from %s: no %r object", response.request.url, key)
        raise NewsApiError(response.status_code, "")
    return record


class NewsApiClient(NewsApi):
    """Infrastructure adapter — connects to the campus news backend."""

    def __init__(
        self,
        base_url: str = "http://localhost:3000",
        http_client: httpx.AsyncClient | None = None,
        timeout: float = 10.0,
    ):
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._http_client = http_client
        self._owns_client = http_client is None

    def _client(self) -> httpx.AsyncClient:
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(timeout=self._timeout)
        return self._http_client

    def _url(self, path: str) -> str:
        return f"{self._base_url}{path}"

    async def aclose(self) -> None:
        if self._owns_client and self._http_client is not None:
            await self._http_client.aclose()
            self._http_client = None

    # ── Reads ──────────────────────────────────────────────────────

    async def fetch_articles(self) -> list[Article] | None:
        try:
            response = await self._client().get(self._url("/api/articles"))
            response.raise_for_status()
            data = response.json()
        except (httpx.HTTPError, ValueError) as exc:
            logger.error("Error fetching articles: %s", exc)
            return None

        if not isinstance(data, dict) or not data.get("success") or not isinstance(data.get("articles"), list):
            return []
        return [_to_article(item) for item in data["articles"] if isinstance(item, dict)]

    async def auth_status(self) -> AuthStatus:
        try:
            response = await self._client().get(self._url("/api/auth/status"))
            data = response.json()
        except (httpx.HTTPError, ValueError) as exc:
            logger.error("Auth check failed: %s", exc)
            return AuthStatus(authenticated=False)

        if not isinstance(data, dict):
            logger.error("Auth check returned a non-object body")
            return AuthStatus(authenticated=False)
        if data.get("authenticated") and isinstance(data.get("user"), dict):
            return AuthStatus(authenticated=True, user=_to_user(data["user"]))
        return AuthStatus(authenticated=bool(data.get("authenticated")))

    async def fetch_profile(self) -> User | None:
        try:
            response = await self._client().get(self._url("/api/profile"))
            response.raise_for_status()
            data = response.json()
        except (httpx.HTTPError, ValueError) as exc:
            logger.error("Error fetching profile: %s", exc)
            return None

        if isinstance(data, dict) and data.get("success") and isinstance(data.get("user"), dict):
            return _to_user(data["user"])
        return None

    # ── Writes ─────────────────────────────────────────────────────

    async def update_profile(self, name: str, email: str) -> User:
        try:
            response = await self._client().put(
                self._url("/api/profile"),
                json={"name": name, "email": email},
            )
        except httpx.HTTPError as exc:
            logger.error("Error updating profile: %s", exc)
            raise NewsApiError(0, "") from exc

        if response.is_error:
            raise NewsApiError(response.status_code, _error_message(response))
        return _to_user(_record(response, "user"))

    async def submit_article(
        self,
        title: str,
        body: str,
        tag: str,
        image: bytes,
        filename: str = "article-image.jpg",
    ) -> Article:
        try:
            response = await self._client().post(
                self._url("/api/articles"),
                data={"title": title, "body": body, "tag": tag},
                files={"image": (filename, image, "image/jpeg")},
            )
        except httpx.HTTPError as exc:
            logger.error("Error submitting article: %s", exc)
            raise NewsApiError(0, "") from exc

        if response.is_error:
            raise NewsApiError(response.status_code, _error_message(response))
        return _to_article(_record(response, "article"))

    async def logout(self) -> bool:
        try:
            response = await self._client().post(self._url("/api/logout"))
            response.raise_for_status()
        except httpx.HTTPError as exc:
            logger.error("Error logging out: %s", exc)
            return False
        return True
