from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings

_BACKEND_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _BACKEND_DIR / ".env",
    ".env",
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "Campus News API"
    app_version: str = "0.1.0"
    app_env: str = "development"
    database_url: str = "sqlite:///./campus_news.db"
    cors_origins: list[str] = ["http://localhost:3000", "http://127.0.0.1:3000"]

    # Session cookie (set by the external auth collaborator, read here)
    session_secret: str = "campus-news-dev-secret"
    session_max_age_seconds: int = 24 * 60 * 60

    # File upload & storage
    upload_dir: str = "uploads"
    max_upload_size_mb: int = 5

    # Article limits
    article_title_max_length: int = 100
    article_body_max_length: int = 450

    # Feed / infinite scroll
    feed_page_size: int = 5
    feed_desktop_limit: int = 9
    feed_mobile_breakpoint_px: int = 768
    feed_load_delay_ms: int = 400
    feed_resize_debounce_ms: int = 200

    # Image adjustment
    image_viewport_width: int = 300
    image_viewport_height: int = 220
    image_output_width: int = 1500
    image_output_height: int = 1100
    image_jpeg_quality: int = 92
    image_max_zoom_factor: float = 3.0
    image_max_pixels: int = 40_000_000

    # Client side: where the news API lives
    api_base_url: str = "http://localhost:3000"
    api_timeout_seconds: float = 10.0

    # Logging: per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_sql: str = "WARNING"           # sqlalchemy.engine SQL queries
    log_level_http: str = "WARNING"          # httpx / httpcore outbound HTTP
    log_level_uvicorn: str = "INFO"          # uvicorn.access / uvicorn.error
    log_level_feed: str = "INFO"             # feed controller / store
    log_level_submission: str = "INFO"       # article upload pipeline

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
    }

    @property
    def max_upload_size_bytes(self) -> int:
        return self.max_upload_size_mb * 1024 * 1024


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance — reads .env once."""
    return Settings()
