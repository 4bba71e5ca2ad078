"""Pydantic DTOs (Data Transfer Objects) for the Article feature."""

from datetime import datetime

from pydantic import BaseModel, Field

from app.domain.entities import ArticleStatus


class ArticleCreate(BaseModel):
    """Fields of a submitted article. Limits are enforced by ArticleService."""

    title: str = Field("", examples=["Basketball Team Wins Championship"])
    body: str = Field("", examples=["Our university basketball team secured..."])
    tag: str = Field("", examples=["Sports"])


class ArticleResponse(BaseModel):
    """Schema returned to the client."""

    id: int
    title: str
    body: str
    tag: str
    image_path: str | None
    author_name: str
    created_at: datetime
    status: ArticleStatus

    model_config = {"from_attributes": True}


class ArticleListResponse(BaseModel):
    success: bool = True
    articles: list[ArticleResponse]


class ArticleCreatedResponse(BaseModel):
    success: bool = True
    article: ArticleResponse
