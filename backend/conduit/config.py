import logging
from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings

_config_logger = logging.getLogger(__name__)

_BACKEND_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _BACKEND_DIR / ".env",
    ".env",
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "Conduit"
    app_version: str = "0.1.0"
    app_env: str = "development"
    database_url: str = "sqlite:///./conduit.db"

    # Article listing
    default_page_size: int = 20
    max_page_size: int = 100

    # Logging — per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_sql: str = "WARNING"           # sqlalchemy.engine — SQL queries
    log_level_services: str = "INFO"         # Application services

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
    }

    def model_post_init(self, __context: object) -> None:
        """Keep the page size bounds consistent."""
        if self.default_page_size > self.max_page_size:
            _config_logger.warning(
                "default_page_size=%d exceeds max_page_size=%d; clamping",
                self.default_page_size,
                self.max_page_size,
            )
            object.__setattr__(self, "default_page_size", self.max_page_size)


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance — reads .env once."""
    return Settings()
