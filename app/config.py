"""
Application configuration using Pydantic Settings.

All configuration is loaded from environment variables, with an optional .env file
as a fallback. Pydantic Settings resolves values in this order:
  1. Environment variables (highest priority)
  2. .env file values
  3. Defaults defined here (lowest priority)

Usage:
    from app.config import settings
    print(settings.DATABASE_URL)
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Central configuration for the Payment API."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # --- Application ---
    APP_NAME: str = "Payment API"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False

    # --- Database ---
    # SQLite for local use; any async SQLAlchemy URL works (e.g. postgresql+asyncpg://)
    DATABASE_URL: str = "sqlite+aiosqlite:///./payments.db"

    # --- HTTP surface ---
    # Payment detail routes are mounted at {API_PREFIX}/payment-detail
    API_PREFIX: str = "/api"

    # Swagger UI and the OpenAPI document; turn off outside development
    DOCS_ENABLED: bool = True

    # Redirect plain HTTP requests to HTTPS
    HTTPS_REDIRECT: bool = False

    # --- CORS ---
    ALLOWED_ORIGINS: list[str] = ["*"]

    # --- Logging ---
    LOG_LEVEL: str = "INFO"
    LOG_FILE_PATH: str | None = None


# Singleton: import this instance everywhere instead of creating new Settings()
settings = Settings()
