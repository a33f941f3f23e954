import os
import sys

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _should_load_env_file() -> str | None:
    """Determine if .env should be loaded.

    Local development picks up `backend/.env` automatically. Do NOT auto-load
    `.env` when running under pytest or in CI so tests see only the
    environment they set up themselves.
    """
    if any("pytest" in str(x) for x in sys.argv if x):
        return None
    if os.environ.get("CI") in ("1", "true", "True"):
        return None
    return ".env"


class Settings(BaseSettings):
    # Environment configuration
    ENVIRONMENT: str = Field(
        default="development",
        description="Environment: 'development', 'staging', or 'production'",
    )

    CORS_ALLOWED_ORIGIN: str = Field(
        default="http://localhost:8899",
        description="The single origin allowed to call the contact endpoint",
    )

    # Server settings (used when running `python main.py`)
    HOST: str = Field(default="0.0.0.0", description="Interface to bind")
    PORT: int = Field(default=80, description="Port to listen on")

    # Logging
    LOG_DIR: str = Field(
        default="logs",
        description="Directory for the rotating application log file",
    )

    # Performance settings
    SLOW_REQUEST_THRESHOLD: float = Field(
        default=1.0,
        description="Log warning for requests slower than this (seconds)",
    )

    @field_validator("CORS_ALLOWED_ORIGIN")
    @classmethod
    def strip_origin(cls, v: str) -> str:
        """Browsers send the origin without a trailing slash."""
        v = v.strip().rstrip("/")
        if not v:
            raise ValueError("CORS_ALLOWED_ORIGIN must not be empty")
        return v

    model_config = SettingsConfigDict(
        env_file=_should_load_env_file(),
        env_file_encoding="utf-8",
        extra="ignore",  # Allow extra env vars (e.g., SENTRY_DSN) without validation errors
    )


settings = Settings()


def get_settings() -> Settings:
    """Get the settings instance (for dependency injection)."""
    return settings
