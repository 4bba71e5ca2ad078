"""One explicit object owning everything a feed session needs."""

from dataclasses import dataclass

from app.application.interfaces import NewsApi
from app.application.services.action_dispatcher import ActionDispatcher
from app.application.services.article_form import ArticleSubmissionForm
from app.application.services.feed_controller import FeedController
from app.application.services.feed_renderer import FeedDocument, FeedRenderer
from app.application.services.image_adjustment_service import (
    ImageAdjustmentEngine,
    ImageUpload,
)
from app.domain.entities import FeedStore


@dataclass
class FeedAppContext:
    api: NewsApi
    store: FeedStore
    document: FeedDocument
    renderer: FeedRenderer
    controller: FeedController
    image_engine: ImageAdjustmentEngine
    form: ArticleSubmissionForm
    dispatcher: ActionDispatcher

    async def start(self, viewport_width: int) -> None:
        await self.controller.start(viewport_width)

    async def close(self) -> None:
        self.controller.close()
        await self.controller.wait_idle()
        await self.api.aclose()


def register_default_actions(ctx: FeedAppContext) -> ActionDispatcher:
    """Fill the dispatcher with every action the feed page supports."""
    d = ctx.dispatcher
    controller, form, engine = ctx.controller, ctx.form, ctx.image_engine

    d.register("sentinel_visible", controller.on_sentinel_visible)
    d.register("resize", lambda width: controller.on_resize(width))
    d.register("open_profile", controller.open_profile)
    d.register("save_profile", controller.save_profile)
    d.register("logout", controller.logout)

    d.register("open_article_form", form.open)
    d.register("close_article_form", form.close)
    d.register("update_field", form.update_field)
    d.register("update_char_count", form.char_count)
    d.register("submit_article", form.submit)
    d.register(
        "select_image",
        lambda filename, content_type, content: form.select_image(
            ImageUpload(filename=filename, content_type=content_type, content=content)
        ),
    )
    d.register("remove_image", form.remove_image)
    d.register("zoom", lambda percent: engine.set_zoom_percent(percent))
    d.register("pan", engine.pan)
    d.register("drag", lambda x, y: engine.move_to(x, y))
    return d
