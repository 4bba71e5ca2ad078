"""Concrete repository implementation backed by SQLAlchemy."""

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.application.interfaces import ArticleRepository
from app.domain.entities import Article, ArticleStatus
from app.infrastructure.database.models import ArticleModel


class SQLAlchemyArticleRepository(ArticleRepository):
    """Implements the ArticleRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: ArticleModel, author_name: str | None = None) -> Article:
        """Map ORM model → domain entity. The author must already be loaded."""
        if author_name is None:
            author_name = model.author.name if model.author is not None else ""
        return Article(
            id=model.id,
            title=model.title,
            body=model.body,
            tag=model.tag,
            image_path=model.image_path,
            author_name=author_name,
            user_id=model.user_id,
            status=ArticleStatus(model.status),
            created_at=model.created_at,
        )

    def _to_model(self, entity: Article) -> ArticleModel:
        """Map domain entity → ORM model (for creation)."""
        return ArticleModel(
            user_id=entity.user_id,
            title=entity.title,
            body=entity.body,
            tag=entity.tag,
            image_path=entity.image_path,
            status=entity.status.value,
            created_at=entity.created_at,
        )

    def _select(self):
        return (
            select(ArticleModel)
            .options(selectinload(ArticleModel.author))
            .execution_options(populate_existing=True)
        )

    async def list_by_status(self, status: ArticleStatus) -> list[Article]:
        stmt = (
            self._select()
            .where(ArticleModel.status == status.value)
            .order_by(ArticleModel.created_at.desc(), ArticleModel.id.desc())
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def list_by_user(self, user_id: int) -> list[Article]:
        stmt = (
            self._select()
            .where(ArticleModel.user_id == user_id)
            .order_by(ArticleModel.created_at.desc(), ArticleModel.id.desc())
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def create(self, article: Article) -> Article:
        model = self._to_model(article)
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model, author_name=article.author_name)

    async def count(self) -> int:
        result = await self._session.execute(select(func.count()).select_from(ArticleModel))
        return int(result.scalar_one())
