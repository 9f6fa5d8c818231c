"""Application settings loaded from environment variables via Pydantic."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class AppSettings(BaseSettings):
    """Central configuration for the Todo Platform API."""

    model_config = {"env_prefix": "APP_", "case_sensitive": False}

    # Database
    database_url: str = "sqlite:///./todo_platform.db"
    database_echo: bool = False
    database_busy_timeout: float = 15.0

    # JWT
    jwt_secret_key: str = "change-me-in-production"
    jwt_issuer: str = "todo-platform"
    jwt_audience: str = "todo-platform-clients"
    jwt_algorithm: str = "HS256"
    jwt_access_token_minutes: int = 60

    # Seed data
    seed_system_themes: bool = True

    # Logging
    log_level: str = "INFO"

    # CORS
    cors_origins: str = "*"


def get_settings() -> AppSettings:
    """Return the application settings singleton."""
    return AppSettings()
