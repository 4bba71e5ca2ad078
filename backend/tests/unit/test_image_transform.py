"""Unit tests for the crop geometry helpers."""

import pytest

from app.domain.entities import (
    ImageTransform,
    Size,
    clamp_translation,
    cover_scale,
    covers_viewport,
    translation_limits,
)

VIEWPORT = Size(300, 220)


def test_cover_scale_uses_the_larger_ratio():
    # Wide image: height is the binding axis.
    assert cover_scale(Size(1200, 400), VIEWPORT) == pytest.approx(220 / 400)
    # Tall image: width is the binding axis.
    assert cover_scale(Size(300, 1000), VIEWPORT) == pytest.approx(1.0)
    # Small image is scaled up.
    assert cover_scale(Size(150, 110), VIEWPORT) == pytest.approx(2.0)


def test_translation_limits_are_half_the_overflow():
    image = Size(1200, 400)
    scale = cover_scale(image, VIEWPORT)
    max_x, max_y = translation_limits(image, VIEWPORT, scale)
    assert max_x == pytest.approx((1200 * scale - 300) / 2)
    assert max_y == 0.0


def test_clamp_translation_pulls_back_inside_bounds():
    image = Size(600, 440)
    x, y = clamp_translation(500, -500, image, VIEWPORT, 1.0)
    assert (x, y) == (150.0, -110.0)


def test_clamp_translation_leaves_in_range_values_alone():
    x, y = clamp_translation(10, -20, Size(600, 440), VIEWPORT, 1.0)
    assert (x, y) == (10, -20)


def test_covers_viewport_at_cover_scale_and_extremes():
    image = Size(600, 440)
    scale = cover_scale(image, VIEWPORT)
    assert covers_viewport(ImageTransform(scale=scale), image, VIEWPORT)

    max_x, max_y = translation_limits(image, VIEWPORT, 1.0)
    assert covers_viewport(ImageTransform(1.0, max_x, -max_y), image, VIEWPORT)
    assert not covers_viewport(ImageTransform(1.0, max_x + 1, 0), image, VIEWPORT)
    assert not covers_viewport(ImageTransform(scale * 0.9), image, VIEWPORT)
