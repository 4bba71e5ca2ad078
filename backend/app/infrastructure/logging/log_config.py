"""Logging setup: one root level plus a level per logger category.

Categories let SQL statements or outbound HTTP chatter be turned up or
silenced independently of the feed and submission logs.

Usage:
    from app.infrastructure.logging.log_config import setup_logging
    setup_logging()   # once, from the FastAPI lifespan or a client entry point
"""

import logging
import sys

from app.config import Settings, get_settings

# Settings field -> logger names it controls.
LOG_CATEGORIES: dict[str, tuple[str, ...]] = {
    "log_level_sql": ("sqlalchemy.engine", "sqlalchemy.pool", "aiosqlite"),
    "log_level_http": ("httpx", "httpcore"),
    "log_level_uvicorn": ("uvicorn", "uvicorn.access", "uvicorn.error"),
    "log_level_feed": (
        "app.domain.entities.feed_store",
        "app.application.services.feed_controller",
        "app.application.services.action_dispatcher",
        "app.infrastructure.http",
    ),
    "log_level_submission": (
        "ArticleService",
        "ArticleSubmissionForm",
        "app.application.services.image_adjustment_service",
        "app.infrastructure.imaging",
        "app.infrastructure.storage",
    ),
}

_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def _level(name: str) -> int:
    value = logging.getLevelName(name.upper())
    return value if isinstance(value, int) else logging.INFO


def setup_logging(settings: Settings | None = None) -> dict[str, int]:
    """Apply the configured levels. Returns the level set for each category."""
    settings = settings or get_settings()

    root = logging.getLogger()
    root.setLevel(_level(settings.log_level))
    # uvicorn installs its own handlers; tests and scripts do not.
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_FORMAT))
        root.addHandler(handler)

    applied: dict[str, int] = {}
    for field_name, logger_names in LOG_CATEGORIES.items():
        level = _level(getattr(settings, field_name))
        for logger_name in logger_names:
            logging.getLogger(logger_name).setLevel(level)
        applied[field_name] = level

    logging.getLogger(__name__).debug(
        "Logging configured: root=%s %s",
        settings.log_level,
        " ".join(f"{k.removeprefix('log_level_')}={logging.getLevelName(v)}" for k, v in applied.items()),
    )
    return applied
