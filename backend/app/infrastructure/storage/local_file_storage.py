"""Local filesystem storage for uploaded article images.

Storage layout:
    <upload_dir>/articles/article-<epoch_ms>-<random><ext>

The upload directory is mounted as static files under ``/uploads``, so a
stored image is reachable at ``/uploads/articles/<filename>``.
"""

import logging
import mimetypes
import random
import re
import time
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

_ARTICLES_SUBDIR = "articles"


@dataclass
class StoredFile:
    """Result of storing a single file on disk."""

    stored_path: str
    public_path: str
    filename: str
    file_size: int
    mime_type: str


def _unique_suffix() -> str:
    """Millisecond timestamp plus a random 9-digit number: ``<ms>-<rand>``."""
    return f"{int(time.time() * 1000)}-{random.randint(0, 999_999_999)}"


def _safe_extension(filename: str) -> str:
    suffix = Path(filename).suffix.lower()
    if re.fullmatch(r"\.[a-z0-9]{1,5}", suffix):
        return suffix
    return ".jpg"


class LocalFileStorage:
    """Infrastructure adapter for local file storage."""

    def __init__(self, upload_dir: str, public_prefix: str = "/uploads"):
        self._upload_dir = Path(upload_dir)
        self._upload_dir.mkdir(parents=True, exist_ok=True)
        self._public_prefix = public_prefix.rstrip("/")

    @property
    def upload_dir(self) -> Path:
        return self._upload_dir

    async def store_article_image(self, content: bytes, filename: str) -> StoredFile:
        """Store an article image as ``article-<ms>-<rand><ext>``."""
        articles_dir = self._upload_dir / _ARTICLES_SUBDIR
        articles_dir.mkdir(parents=True, exist_ok=True)

        stored_name = f"article-{_unique_suffix()}{_safe_extension(filename)}"
        dest_path = articles_dir / stored_name
        dest_path.write_bytes(content)

        mime_type = mimetypes.guess_type(stored_name)[0] or "application/octet-stream"

        logger.info("Stored article image: %s (%d bytes)", dest_path, len(content))

        return StoredFile(
            stored_path=str(dest_path),
            public_path=f"{self._public_prefix}/{_ARTICLES_SUBDIR}/{stored_name}",
            filename=stored_name,
            file_size=len(content),
            mime_type=mime_type,
        )

    async def delete_file(self, stored_path: str) -> bool:
        """Delete a stored file from disk.

        Returns True if successfully deleted, False if not found.
        """
        file_path = Path(stored_path)
        if not file_path.exists():
            return False

        file_path.unlink(missing_ok=True)
        logger.info("Deleted file from disk: %s", stored_path)
        return True
