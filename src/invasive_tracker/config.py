"""
Application settings.

Values come from environment variables prefixed with ``TRACKER_`` (or a local
``.env`` file), e.g. ``TRACKER_BASE_URL=https://tracker.example.org/``.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration for the tracker client."""

    model_config = SettingsConfigDict(env_prefix="TRACKER_", env_file=".env", extra="ignore")

    app_name: str = "invasive-species-tracker"
    app_env: str = "development"
    debug: bool = False

    base_url: str = Field(
        default="http://localhost:8000/",
        description="Root URL the table endpoints are resolved against",
    )
    request_timeout: float = Field(default=30, gt=0, description="Seconds")
    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings, loaded once."""
    return Settings()
