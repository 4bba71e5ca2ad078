"""Colored submission logger for the article upload path.

Each step of a submission (validate, export, upload, store, persist) gets
its own color so a single article can be followed through the terminal on
both sides of the wire.

    VALIDATE  yellow
    EXPORT    magenta   (client, image crop)
    UPLOAD    green     (client, multipart POST)
    STORAGE   green     (server, image file)
    PERSIST   blue      (server, database row)
    failures  red
"""

import logging
import time
from contextlib import contextmanager
from typing import Any, NamedTuple

_RESET = "\033[0m"
_BOLD = "\033[1m"
_DIM = "\033[2m"
_RED = "\033[91m"
_GREEN = "\033[92m"
_YELLOW = "\033[93m"
_BLUE = "\033[94m"
_MAGENTA = "\033[95m"
_GRAY = "\033[90m"


class Stage(NamedTuple):
    label: str
    color: str
    icon: str


class SubmissionStage:
    VALIDATE = Stage("VALIDATE", _YELLOW, "🔎")
    EXPORT = Stage("EXPORT", _MAGENTA, "🖼️")
    UPLOAD = Stage("UPLOAD", _GREEN, "📤")
    STORAGE = Stage("STORAGE", _GREEN, "💾")
    PERSIST = Stage("PERSIST", _BLUE, "🗄️")
    COMPLETE = Stage("COMPLETE", _GREEN, "✅")


def _details(fields: dict[str, Any]) -> str:
    if not fields:
        return ""
    joined = " | ".join(f"{key}={value}" for key, value in fields.items())
    return f" {_GRAY}({joined}){_RESET}"


class SubmissionLogger:
    """Stage-colored wrapper around a named stdlib logger.

    Usage:
        log = SubmissionLogger("ArticleService")
        with log.timed_step(SubmissionStage.STORAGE, "Storing image", size=2048):
            stored = await storage.store_article_image(...)
    """

    def __init__(self, component_name: str):
        self._logger = logging.getLogger(component_name)

    def step_start(self, stage: Stage, message: str, **fields: Any) -> None:
        self._logger.info(
            "%s%s%s [%s]%s %s%s",
            stage.color, _BOLD, stage.icon, stage.label, _RESET, message, _details(fields),
        )

    def step_complete(self, stage: Stage, message: str, **fields: Any) -> None:
        self._logger.info(
            "%s%s [%s]%s %s✓ %s%s%s",
            stage.color, stage.icon, stage.label, _RESET, _GREEN, message, _RESET, _details(fields),
        )

    def step_error(self, stage: Stage, message: str, error: Exception | None = None) -> None:
        """Rejected input (a ValueError) is a WARNING; anything else is an ERROR."""
        cause = f" {_DIM}→ {type(error).__name__}: {error}{_RESET}" if error else ""
        level = logging.WARNING if isinstance(error, ValueError) else logging.ERROR
        self._logger.log(
            level,
            "%s%s❌ [%s]%s %s%s%s%s",
            _RED, _BOLD, stage.label, _RESET, _RED, message, _RESET, cause,
        )

    @contextmanager
    def timed_step(self, stage: Stage, message: str, **fields: Any):
        """Log start, then completion or failure with the elapsed time."""
        self.step_start(stage, message, **fields)
        started = time.perf_counter()
        try:
            yield
        except Exception as exc:
            self.step_error(stage, f"{message} failed after {time.perf_counter() - started:.2f}s", error=exc)
            raise
        self.step_complete(stage, f"{message} ({time.perf_counter() - started:.2f}s)")
