"""Crop/zoom/pan geometry for fitting an image into a fixed viewport.

All offsets are in viewport pixels and measured from the viewport centre:
a translation of (0, 0) centres the scaled image in the viewport.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Size:
    width: float
    height: float


@dataclass
class ImageTransform:
    """Current scale and pan applied to the selected image."""

    scale: float = 1.0
    translate_x: float = 0.0
    translate_y: float = 0.0


def cover_scale(image: Size, viewport: Size) -> float:
    """Smallest scale at which *image* fills *viewport* with no margins."""
    return max(viewport.width / image.width, viewport.height / image.height)


def _axis_limit(scaled: float, viewport: float) -> float:
    if scaled <= viewport:
        return 0.0
    return (scaled - viewport) / 2


def translation_limits(image: Size, viewport: Size, scale: float) -> tuple[float, float]:
    """Maximum |translate_x| and |translate_y| that keep the viewport covered."""
    return (
        _axis_limit(image.width * scale, viewport.width),
        _axis_limit(image.height * scale, viewport.height),
    )


def clamp_translation(
    x: float, y: float, image: Size, viewport: Size, scale: float
) -> tuple[float, float]:
    """Pull a requested translation back inside the covering range."""
    max_x, max_y = translation_limits(image, viewport, scale)
    return (
        max(-max_x, min(max_x, x)),
        max(-max_y, min(max_y, y)),
    )


def covers_viewport(transform: ImageTransform, image: Size, viewport: Size) -> bool:
    """True when the transformed image leaves no part of the viewport bare."""
    scaled_w = image.width * transform.scale
    scaled_h = image.height * transform.scale
    # A tiny tolerance absorbs float rounding at exact cover scale.
    eps = 1e-6
    left = viewport.width / 2 + transform.translate_x - scaled_w / 2
    top = viewport.height / 2 + transform.translate_y - scaled_h / 2
    return (
        left <= eps
        and top <= eps
        and left + scaled_w >= viewport.width - eps
        and top + scaled_h >= viewport.height - eps
    )
