"""Unit tests for the ImageAdjustmentEngine using real Pillow images."""

import io
import struct
import zlib

import pytest
from PIL import Image

from app.application.interfaces import ImageRasterizer
from app.application.services import AdjustmentState, ImageAdjustmentEngine, ImageUpload
from app.domain.entities import Size, covers_viewport
from app.domain.exceptions import ImageValidationError
from app.infrastructure.imaging import PillowImageRasterizer

VIEWPORT = Size(300, 220)


def _split_png(width: int = 600, height: int = 220) -> bytes:
    """Left half red, right half blue."""
    image = Image.new("RGB", (width, height), (0, 0, 255))
    image.paste((255, 0, 0), (0, 0, width // 2, height))
    buffer = io.BytesIO()
    image.save(buffer, format="PNG")
    return buffer.getvalue()


def _upload(content: bytes | None = None, content_type: str = "image/png") -> ImageUpload:
    return ImageUpload(filename="photo.png", content_type=content_type, content=content or _split_png())


@pytest.fixture
def engine() -> ImageAdjustmentEngine:
    return ImageAdjustmentEngine(rasterizer=PillowImageRasterizer(), viewport=VIEWPORT)


def _pixel(data: bytes, xy: tuple[int, int]) -> tuple[int, int, int]:
    return Image.open(io.BytesIO(data)).convert("RGB").getpixel(xy)


# ── Selection ──


def test_select_fits_image_to_cover_viewport(engine: ImageAdjustmentEngine):
    engine.select(_upload())
    assert engine.state == AdjustmentState.ADJUSTING
    assert engine.natural_size == Size(600, 220)
    assert engine.min_scale == pytest.approx(1.0)
    assert engine.max_scale == pytest.approx(3.0)
    assert engine.zoom_percent == 100
    assert covers_viewport(engine.transform, engine.natural_size, VIEWPORT)


def test_rejects_non_image_content_type(engine: ImageAdjustmentEngine):
    with pytest.raises(ImageValidationError, match="Please select a valid image file"):
        engine.select(_upload(content_type="application/pdf"))
    assert engine.state == AdjustmentState.EMPTY
    assert not engine.has_image


def test_rejects_oversized_file(engine: ImageAdjustmentEngine):
    too_big = b"\x00" * (5 * 1024 * 1024 + 1)
    with pytest.raises(ImageValidationError, match="File size must be less than 5MB"):
        engine.select(_upload(content=too_big))
    assert engine.state == AdjustmentState.EMPTY


def test_rejects_undecodable_bytes(engine: ImageAdjustmentEngine):
    with pytest.raises(ImageValidationError):
        engine.select(_upload(content=b"definitely not a png"))
    assert engine.state == AdjustmentState.EMPTY


def _png_header_only(width: int, height: int) -> bytes:
    """A tiny 1-bit PNG whose header declares ``width`` x ``height``."""

    def chunk(kind: bytes, data: bytes) -> bytes:
        return struct.pack(">I", len(data)) + kind + data + struct.pack(">I", zlib.crc32(kind + data))

    ihdr = struct.pack(">IIBBBBB", width, height, 1, 0, 0, 0, 0)
    return (
        b"\x89PNG\r\n\x1a\n"
        + chunk(b"IHDR", ihdr)
        + chunk(b"IDAT", zlib.compress(b"\x00"))
        + chunk(b"IEND", b"")
    )


def test_rejects_decompression_bomb(engine: ImageAdjustmentEngine):
    bomb = _png_header_only(20_000, 20_000)
    assert len(bomb) < 5 * 1024 * 1024
    with pytest.raises(ImageValidationError, match="Please select a valid image file"):
        engine.select(_upload(content=bomb))
    assert engine.state == AdjustmentState.EMPTY
    assert not engine.has_image

    # Pillow's own bomb guard still maps to a decode failure when the cap is lifted.
    with pytest.raises(ValueError):
        PillowImageRasterizer(max_pixels=10**12).decode(bomb)


def test_rejects_image_over_pixel_cap():
    capped = ImageAdjustmentEngine(rasterizer=PillowImageRasterizer(max_pixels=100_000), viewport=VIEWPORT)
    with pytest.raises(ImageValidationError, match="Please select a valid image file"):
        capped.select(_upload(content=_split_png(600, 220)))
    assert capped.state == AdjustmentState.EMPTY

    capped.select(_upload(content=_split_png(300, 220)))
    assert capped.natural_size == Size(300, 220)


def test_rejected_selection_keeps_previous_image(engine: ImageAdjustmentEngine):
    engine.select(_upload())
    engine.move_to(50, 0)
    with pytest.raises(ImageValidationError):
        engine.select(_upload(content_type="text/plain"))
    assert engine.has_image
    assert engine.transform.translate_x == 50


# ── Zoom and pan ──


def test_zoom_is_bounded(engine: ImageAdjustmentEngine):
    engine.select(_upload())
    assert engine.set_zoom_percent(10_000).scale == pytest.approx(engine.max_scale)
    assert engine.set_scale(0.01).scale == pytest.approx(engine.min_scale)


def test_pan_is_clamped_to_overflow(engine: ImageAdjustmentEngine):
    engine.select(_upload())
    t = engine.move_to(1000, 1000)
    assert t.translate_x == pytest.approx(150)
    assert t.translate_y == 0
    t = engine.pan(-5000, 0)
    assert t.translate_x == pytest.approx(-150)


def test_zooming_out_reclamps_translation(engine: ImageAdjustmentEngine):
    engine.select(_upload())
    engine.set_scale(2.0)
    engine.move_to(400, 100)
    t = engine.set_scale(1.0)
    assert t.translate_x == pytest.approx(150)
    assert t.translate_y == 0
    assert covers_viewport(t, engine.natural_size, VIEWPORT)


def test_transform_calls_without_image_are_noops(engine: ImageAdjustmentEngine):
    t = engine.pan(10, 10)
    assert (t.scale, t.translate_x, t.translate_y) == (1.0, 0.0, 0.0)
    assert engine.state == AdjustmentState.EMPTY


def test_set_viewport_refits_cover_scale(engine: ImageAdjustmentEngine):
    engine.select(_upload())
    engine.set_viewport(Size(600, 440))
    assert engine.min_scale == pytest.approx(2.0)
    assert engine.transform.scale == pytest.approx(2.0)


# ── Export ──


def test_export_without_image_returns_none(engine: ImageAdjustmentEngine):
    assert engine.export() is None


def test_export_produces_fixed_size_jpeg(engine: ImageAdjustmentEngine):
    engine.select(_upload())
    data = engine.export()
    assert data is not None
    image = Image.open(io.BytesIO(data))
    assert image.format == "JPEG"
    assert image.size == (1500, 1100)
    assert engine.state == AdjustmentState.EXPORTED


def test_export_shows_what_the_viewport_shows(engine: ImageAdjustmentEngine):
    engine.select(_upload())

    engine.move_to(1000, 0)  # image pushed right: left (red) half visible
    red = _pixel(engine.export(), (750, 550))
    assert red[0] > 200 and red[2] < 60

    engine.move_to(-1000, 0)  # right (blue) half visible
    blue = _pixel(engine.export(), (750, 550))
    assert blue[2] > 200 and blue[0] < 60


def test_adjusting_after_export_returns_to_adjusting(engine: ImageAdjustmentEngine):
    engine.select(_upload())
    engine.export()
    engine.pan(1, 0)
    assert engine.state == AdjustmentState.ADJUSTING


def test_export_failure_returns_none():
    class BrokenRasterizer(ImageRasterizer):
        def decode(self, content):
            return object(), Size(600, 440)

        def render(self, handle, output, draw_size, draw_origin, background=(0, 0, 0), quality=92):
            raise RuntimeError("canvas unavailable")

    engine = ImageAdjustmentEngine(rasterizer=BrokenRasterizer(), viewport=VIEWPORT)
    engine.select(_upload(content=b"anything"))
    assert engine.export() is None
    assert engine.state == AdjustmentState.ADJUSTING


def test_remove_clears_everything(engine: ImageAdjustmentEngine):
    engine.select(_upload())
    engine.remove()
    assert engine.state == AdjustmentState.EMPTY
    assert engine.natural_size is None
    assert engine.export() is None
