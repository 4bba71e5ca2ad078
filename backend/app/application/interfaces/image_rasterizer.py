"""Abstract interface (port) for decoding and rasterizing images."""

from abc import ABC, abstractmethod
from typing import Any

from app.domain.entities import Size


class ImageRasterizer(ABC):
    """Pixel work behind the image adjustment engine."""

    @abstractmethod
    def decode(self, content: bytes) -> tuple[Any, Size]:
        """Decode encoded image bytes.

        Returns an opaque handle understood by ``render`` and the natural
        size. Raises ``ValueError`` when the bytes are not a readable image.
        """
        ...

    @abstractmethod
    def render(
        self,
        handle: Any,
        output: Size,
        draw_size: Size,
        draw_origin: tuple[float, float],
        background: tuple[int, int, int] = (0, 0, 0),
        quality: int = 92,
    ) -> bytes:
        """Draw the image at ``draw_origin`` with ``draw_size`` onto an
        ``output``-sized canvas filled with ``background``; return JPEG bytes.
        """
        ...
