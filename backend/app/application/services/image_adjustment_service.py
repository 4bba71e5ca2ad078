"""Image adjustment engine — crop/zoom/pan of the article image before upload.

The user picks an image, zooms with a slider and drags it around inside a
fixed-aspect viewport. Whatever the viewport shows is exported as a
fixed-size JPEG. The image always covers the viewport: scale is never below
the cover scale and the pan is clamped to the overflow on each axis.
"""

import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any

from app.application.interfaces import ImageRasterizer
from app.domain.entities import (
    ImageTransform,
    Size,
    clamp_translation,
    cover_scale,
)
from app.domain.exceptions import ImageValidationError

logger = logging.getLogger(__name__)

MAX_IMAGE_BYTES = 5 * 1024 * 1024


class AdjustmentState(str, Enum):
    EMPTY = "empty"
    SELECTED = "selected"
    ADJUSTING = "adjusting"
    EXPORTED = "exported"


@dataclass
class ImageUpload:
    """A file picked by the user."""

    filename: str
    content_type: str
    content: bytes

    @property
    def size(self) -> int:
        return len(self.content)


class ImageAdjustmentEngine:
    """Holds the selected image and its transform; exports the visible crop."""

    def __init__(
        self,
        rasterizer: ImageRasterizer,
        viewport: Size,
        output: Size = Size(1500, 1100),
        max_file_bytes: int = MAX_IMAGE_BYTES,
        max_zoom_factor: float = 3.0,
        jpeg_quality: int = 92,
        background: tuple[int, int, int] = (0, 0, 0),
    ):
        self._rasterizer = rasterizer
        self._viewport = viewport
        self._output = output
        self._max_file_bytes = max_file_bytes
        self._max_zoom_factor = max_zoom_factor
        self._jpeg_quality = jpeg_quality
        self._background = background
        self._clear()

    def _clear(self) -> None:
        self._state = AdjustmentState.EMPTY
        self._upload: ImageUpload | None = None
        self._handle: Any = None
        self._natural: Size | None = None
        self._min_scale = 1.0
        self._transform = ImageTransform()

    # ── State ──────────────────────────────────────────────────────

    @property
    def state(self) -> AdjustmentState:
        return self._state

    @property
    def has_image(self) -> bool:
        return self._upload is not None

    @property
    def upload(self) -> ImageUpload | None:
        return self._upload

    @property
    def transform(self) -> ImageTransform:
        """A copy of the current transform."""
        return replace(self._transform)

    @property
    def natural_size(self) -> Size | None:
        return self._natural

    @property
    def viewport(self) -> Size:
        return self._viewport

    @property
    def min_scale(self) -> float:
        return self._min_scale

    @property
    def max_scale(self) -> float:
        return self._min_scale * self._max_zoom_factor

    @property
    def zoom_percent(self) -> int:
        """Slider value for the current scale."""
        return round(self._transform.scale * 100)

    # ── Transitions ────────────────────────────────────────────────

    def select(self, upload: ImageUpload) -> None:
        """Validate and decode *upload*, then fit it to cover the viewport.

        A rejected file leaves the engine exactly as it was.
        """
        if not upload.content_type or not upload.content_type.startswith("image/"):
            raise ImageValidationError("Please select a valid image file")
        if upload.size > self._max_file_bytes:
            raise ImageValidationError("File size must be less than 5MB")

        try:
            handle, natural = self._rasterizer.decode(upload.content)
        except ValueError as exc:
            raise ImageValidationError("Please select a valid image file") from exc
        if natural.width <= 0 or natural.height <= 0:
            raise ImageValidationError("Please select a valid image file")

        self._upload = upload
        self._handle = handle
        self._natural = natural
        self._state = AdjustmentState.SELECTED

        self._min_scale = cover_scale(natural, self._viewport)
        self._transform = ImageTransform(scale=self._min_scale)
        self._state = AdjustmentState.ADJUSTING

        logger.debug(
            "Selected %s (%dx%d), cover scale %.4f",
            upload.filename, natural.width, natural.height, self._min_scale,
        )

    def set_scale(self, requested: float) -> ImageTransform:
        """Zoom to *requested*, bounded to [cover scale, max zoom]."""
        if self._natural is None:
            return self.transform
        self._transform.scale = max(self._min_scale, min(self.max_scale, requested))
        self._apply_bounds()
        return self.transform

    def set_zoom_percent(self, value: float) -> ImageTransform:
        return self.set_scale(value / 100)

    def pan(self, dx: float, dy: float) -> ImageTransform:
        return self.move_to(self._transform.translate_x + dx, self._transform.translate_y + dy)

    def move_to(self, x: float, y: float) -> ImageTransform:
        """Set an absolute offset from the viewport centre (drag gesture)."""
        if self._natural is None:
            return self.transform
        self._transform.translate_x = x
        self._transform.translate_y = y
        self._apply_bounds()
        return self.transform

    def set_viewport(self, viewport: Size) -> None:
        """The viewport element was resized: refit the cover scale and pan."""
        self._viewport = viewport
        if self._natural is None:
            return
        self._min_scale = cover_scale(self._natural, viewport)
        self._transform.scale = max(self._min_scale, min(self.max_scale, self._transform.scale))
        self._apply_bounds()

    def export(self, output_width: float | None = None, output_height: float | None = None) -> bytes | None:
        """Rasterize what the viewport shows at the output resolution.

        Returns JPEG bytes, or ``None`` when nothing is selected or drawing fails.
        """
        if self._natural is None or self._handle is None:
            return None

        output = Size(
            output_width or self._output.width,
            output_height or self._output.height,
        )
        k = output.width / self._viewport.width
        t = self._transform
        draw_size = Size(
            self._natural.width * t.scale * k,
            self._natural.height * t.scale * k,
        )
        origin = (
            output.width / 2 - draw_size.width / 2 + t.translate_x * k,
            output.height / 2 - draw_size.height / 2 + t.translate_y * k,
        )

        try:
            data = self._rasterizer.render(
                self._handle,
                output,
                draw_size,
                origin,
                background=self._background,
                quality=self._jpeg_quality,
            )
        except Exception:
            logger.exception("Error creating adjusted image")
            return None

        self._state = AdjustmentState.EXPORTED
        return data

    def remove(self) -> None:
        """Drop the selected image and its transform."""
        self._clear()

    def reset(self) -> None:
        """Form closed — same as removing the image."""
        self._clear()

    # ── Internal ───────────────────────────────────────────────────

    def _apply_bounds(self) -> None:
        t = self._transform
        t.translate_x, t.translate_y = clamp_translation(
            t.translate_x, t.translate_y, self._natural, self._viewport, t.scale
        )
        if self._state == AdjustmentState.EXPORTED:
            self._state = AdjustmentState.ADJUSTING
