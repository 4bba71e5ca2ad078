"""Imaging infrastructure package."""

from .pillow_rasterizer import PillowImageRasterizer

__all__ = ["PillowImageRasterizer"]
