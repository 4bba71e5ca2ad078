"""Article submission form state and the client-side submit flow."""

from dataclasses import dataclass

from app.application.interfaces import NewsApi
from app.application.services.feed_controller import FeedController
from app.application.services.image_adjustment_service import (
    ImageAdjustmentEngine,
    ImageUpload,
)
from app.domain.entities import Article
from app.domain.exceptions import (
    ArticleValidationError,
    ImageValidationError,
    NewsApiError,
)
from app.infrastructure.logging.colored_logger import SubmissionLogger, SubmissionStage

log = SubmissionLogger("ArticleSubmissionForm")

SUCCESS_MESSAGE = "Article submitted successfully! Your article is now live."


@dataclass
class ArticleDraft:
    title: str = ""
    body: str = ""
    tag: str = ""


class ArticleSubmissionForm:
    """Modal form: fields, character counters, image adjustment and submit."""

    def __init__(
        self,
        api: NewsApi,
        controller: FeedController,
        image_engine: ImageAdjustmentEngine,
        title_max_length: int = 100,
        body_max_length: int = 450,
    ):
        self._api = api
        self._controller = controller
        self.image = image_engine
        self.title_max_length = title_max_length
        self.body_max_length = body_max_length
        self.draft = ArticleDraft()
        self.is_open = False
        self.submitting = False

    # ── Modal ──────────────────────────────────────────────────────

    def open(self) -> None:
        self.is_open = True

    def close(self) -> None:
        self.is_open = False
        self.reset()

    def reset(self) -> None:
        self.draft = ArticleDraft()
        self.submitting = False
        self.image.reset()

    # ── Fields ─────────────────────────────────────────────────────

    def update_field(self, name: str, value: str) -> str:
        """Set a draft field and return its counter label (if it has one)."""
        if name not in ("title", "body", "tag"):
            raise ArticleValidationError(f"Unknown field: {name}")
        setattr(self.draft, name, value)
        return self.char_count(name)

    def char_count(self, name: str) -> str:
        if name == "title":
            return f"{len(self.draft.title)}/{self.title_max_length}"
        if name == "body":
            return f"{len(self.draft.body)}/{self.body_max_length}"
        return ""

    def select_image(self, upload: ImageUpload) -> bool:
        try:
            self.image.select(upload)
        except ImageValidationError as e:
            self._controller.document.notify("error", str(e))
            return False
        return True

    def remove_image(self) -> None:
        self.image.remove()

    # ── Submit ─────────────────────────────────────────────────────

    def validate(self) -> None:
        d = self.draft
        if not d.title or not d.body or not d.tag:
            raise ArticleValidationError("Please fill in all required fields")
        if not self.image.has_image:
            raise ArticleValidationError("Please select an image")
        if len(d.title) > self.title_max_length:
            raise ArticleValidationError(f"Title must be {self.title_max_length} characters or less")
        if len(d.body) > self.body_max_length:
            raise ArticleValidationError(f"Article body must be {self.body_max_length} characters or less")

    async def submit(self) -> Article | None:
        """Validate, export the adjusted image, upload, then refresh the feed.

        Every outcome is reported as a notice on the feed document. A submit
        issued while another is in flight does nothing.
        """
        if self.submitting:
            return None

        notify = self._controller.document.notify
        try:
            self.validate()
        except ArticleValidationError as e:
            notify("error", str(e))
            return None

        self.submitting = True
        try:
            with log.timed_step(SubmissionStage.EXPORT, "Exporting adjusted image"):
                image_bytes = self.image.export()
            if image_bytes is None:
                notify("error", "Please select an image")
                return None

            try:
                with log.timed_step(SubmissionStage.UPLOAD, "Uploading article", size=len(image_bytes)):
                    article = await self._api.submit_article(
                        self.draft.title,
                        self.draft.body,
                        self.draft.tag,
                        image_bytes,
                        "article-image.jpg",
                    )
            except NewsApiError as e:
                notify("error", e.message or "Failed to submit article. Please try again.")
                return None
        finally:
            self.submitting = False

        notify("success", SUCCESS_MESSAGE)
        self.close()
        await self._controller.refresh()
        return article
