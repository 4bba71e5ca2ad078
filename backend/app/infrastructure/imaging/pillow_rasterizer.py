"""Pillow implementation of the ImageRasterizer port."""

import io
import logging

from PIL import Image, ImageOps, UnidentifiedImageError

from app.application.interfaces import ImageRasterizer
from app.domain.entities import Size

logger = logging.getLogger(__name__)

# 40 MP: well above any phone camera, far below Pillow's bomb threshold.
DEFAULT_MAX_PIXELS = 40_000_000


class PillowImageRasterizer(ImageRasterizer):
    """Decodes uploads and draws the visible crop onto a fixed-size JPEG.

    ``max_pixels`` caps the decoded area. A few kilobytes of PNG can declare
    hundreds of megapixels, so the header is checked before any pixel data
    is read.
    """

    def __init__(self, max_pixels: int = DEFAULT_MAX_PIXELS):
        self._max_pixels = max_pixels

    def decode(self, content: bytes) -> tuple[Image.Image, Size]:
        try:
            image = Image.open(io.BytesIO(content))
        except (UnidentifiedImageError, Image.DecompressionBombError, OSError) as exc:
            raise ValueError(f"Unreadable image: {exc}") from exc

        width, height = image.size
        if width * height > self._max_pixels:
            logger.warning("Rejected %dx%d image (limit %d pixels)", width, height, self._max_pixels)
            raise ValueError(f"Image too large: {width}x{height} exceeds {self._max_pixels} pixels")

        try:
            image.load()
        except (Image.DecompressionBombError, OSError) as exc:
            raise ValueError(f"Unreadable image: {exc}") from exc

        # Phone photos carry their rotation in EXIF; browsers honour it.
        image = ImageOps.exif_transpose(image).convert("RGB")
        return image, Size(image.width, image.height)

    def render(
        self,
        handle: Image.Image,
        output: Size,
        draw_size: Size,
        draw_origin: tuple[float, float],
        background: tuple[int, int, int] = (0, 0, 0),
        quality: int = 92,
    ) -> bytes:
        out_w, out_h = int(round(output.width)), int(round(output.height))
        canvas = Image.new("RGB", (out_w, out_h), background)

        origin_x, origin_y = draw_origin
        # Part of the output actually covered by the drawn image.
        left = max(0.0, origin_x)
        top = max(0.0, origin_y)
        right = min(float(out_w), origin_x + draw_size.width)
        bottom = min(float(out_h), origin_y + draw_size.height)

        dest_left, dest_top = int(round(left)), int(round(top))
        dest_w = int(round(right)) - dest_left
        dest_h = int(round(bottom)) - dest_top

        if dest_w > 0 and dest_h > 0:
            sx = handle.width / draw_size.width
            sy = handle.height / draw_size.height
            box = (
                max(0.0, (left - origin_x) * sx),
                max(0.0, (top - origin_y) * sy),
                min(float(handle.width), (right - origin_x) * sx),
                min(float(handle.height), (bottom - origin_y) * sy),
            )
            region = handle.resize((dest_w, dest_h), Image.LANCZOS, box=box)
            canvas.paste(region, (dest_left, dest_top))
        else:
            logger.warning("Image lies entirely outside the output canvas")

        buffer = io.BytesIO()
        canvas.save(buffer, format="JPEG", quality=quality)
        return buffer.getvalue()
