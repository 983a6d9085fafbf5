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

    app_title: str = "Admin Panel"
    app_version: str = "0.1.0"
    app_env: str = "development"
    database_url: str = "sqlite:///./admin.db"

    # Signed session cookie (flash messages + CSRF tokens)
    secret_key: str = "change-me-in-production"
    session_cookie: str = "admin_session"

    # Fixture generation
    fixture_locale: str = "fr_FR"
    fixture_category_count: int = 10
    fixture_article_count: int = 30

    # Logging — per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_sql: str = "WARNING"           # sqlalchemy.engine — SQL queries
    log_level_uvicorn: str = "INFO"          # uvicorn.access / uvicorn.error
    log_level_fixtures: str = "INFO"         # app.fixtures — data seeding

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
    }


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance — reads .env once."""
    return Settings()
