from pathlib import Path

from pydantic_settings import BaseSettings
from functools import lru_cache

_PROJECT_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _PROJECT_DIR / ".env",
    ".env",
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "Insight Search API"
    app_version: str = "0.1.0"
    app_env: str = "development"

    # CORS
    cors_origins: list[str] = ["*"]
    cors_allow_methods: list[str] = ["GET", "HEAD", "PUT", "PATCH", "POST", "DELETE"]
    cors_allow_headers: list[str] = ["Content-Type", "Authorization"]

    # MongoDB connection
    mongodb_uri: str = "mongodb://localhost:27017"
    mongodb_database: str = "expense-tracker"
    mongodb_collection: str = "jsondata"
    mongodb_server_selection_timeout_ms: int = 5000

    # Pagination for /api/search
    default_page_limit: int = 20
    max_page_limit: int = 1000

    # Logging — per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_mongo: str = "WARNING"         # pymongo driver
    log_level_uvicorn: str = "INFO"          # uvicorn.access / uvicorn.error
    log_level_service: str = "INFO"          # ArticleService / repositories

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
    }


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance — reads .env once."""
    return Settings()
