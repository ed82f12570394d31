from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings

_PROJECT_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _PROJECT_DIR / ".env",
    ".env",
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "Document Manager"
    app_version: str = "0.1.0"
    app_env: str = "development"

    # Record store
    store_lock_stripes: int = 16

    # Pagination for list_documents
    default_page_size: int = 100
    max_page_size: int = 1000

    # Logging — per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_store: str = "WARNING"         # Record store + repository adapters
    log_level_service: str = "INFO"          # DocumentService use cases

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
    }


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance — reads .env once."""
    return Settings()
