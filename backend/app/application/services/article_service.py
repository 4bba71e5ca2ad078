"""Application service (use case) for Article operations on the server side."""

from app.application.interfaces import ArticleRepository, UserRepository
from app.application.schemas import ArticleCreate
from app.domain.entities import Article, ArticleStatus
from app.domain.exceptions import (
    ArticleValidationError,
    EntityNotFoundError,
    ImageValidationError,
)
from app.infrastructure.logging.colored_logger import SubmissionLogger, SubmissionStage
from app.infrastructure.storage.local_file_storage import LocalFileStorage

log = SubmissionLogger("ArticleService")

DEFAULT_MAX_IMAGE_BYTES = 5 * 1024 * 1024


class ArticleService:
    """Orchestrates article business logic. Depends on the repository ports (DI)."""

    def __init__(
        self,
        repository: ArticleRepository,
        user_repository: UserRepository,
        storage: LocalFileStorage,
        title_max_length: int = 100,
        body_max_length: int = 450,
        max_image_bytes: int = DEFAULT_MAX_IMAGE_BYTES,
    ):
        self._repository = repository
        self._users = user_repository
        self._storage = storage
        self._title_max = title_max_length
        self._body_max = body_max_length
        self._max_image_bytes = max_image_bytes

    async def list_feed(self) -> list[Article]:
        """Every approved article, newest first."""
        return await self._repository.list_by_status(ArticleStatus.APPROVED)

    async def list_user_articles(self, user_id: int) -> list[Article]:
        return await self._repository.list_by_user(user_id)

    def validate(
        self,
        data: ArticleCreate,
        image_size: int | None,
        content_type: str | None,
    ) -> None:
        """Raise on the first problem, in the order the form reports them.

        Takes the upload's size rather than its bytes so a request can be
        checked before the body is read.
        """
        if not data.title.strip() or not data.body.strip() or not data.tag.strip():
            raise ArticleValidationError("Title, body, and tag are required")
        if not image_size:
            raise ArticleValidationError("Image is required")
        if not (content_type or "").startswith("image/"):
            raise ImageValidationError("Only image files are allowed")
        if image_size > self._max_image_bytes:
            raise ImageValidationError("File size must be less than 5MB")
        if len(data.title) > self._title_max:
            raise ArticleValidationError(f"Title must be {self._title_max} characters or less")
        if len(data.body) > self._body_max:
            raise ArticleValidationError(f"Article body must be {self._body_max} characters or less")

    async def submit_article(
        self,
        user_id: int,
        data: ArticleCreate,
        image: bytes | None,
        filename: str,
        content_type: str | None,
    ) -> Article:
        """Validate, store the image, persist the article as approved."""
        with log.timed_step(SubmissionStage.VALIDATE, "Validating submission", user_id=user_id):
            self.validate(data, len(image) if image else None, content_type)

        user = await self._users.get_by_id(user_id)
        if user is None:
            raise EntityNotFoundError("User", user_id)

        with log.timed_step(SubmissionStage.STORAGE, "Storing image", size=len(image)):
            stored = await self._storage.store_article_image(image, filename)

        article = Article(
            title=data.title,
            body=data.body,
            tag=data.tag,
            image_path=stored.public_path,
            author_name=user.name,
            user_id=user_id,
            status=ArticleStatus.APPROVED,
        )
        try:
            with log.timed_step(SubmissionStage.PERSIST, "Saving article"):
                created = await self._repository.create(article)
        except Exception:
            await self._storage.delete_file(stored.stored_path)
            raise

        log.step_complete(SubmissionStage.COMPLETE, "Article published", article_id=created.id)
        return created
