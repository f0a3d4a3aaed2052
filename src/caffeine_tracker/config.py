"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    storage_path: str | None = "~/.caffeine_tracker/store.json"
    timezone: str | None = None
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_prefix="CAFFEINE_",
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_storage_path(raw: str | None) -> str | None:
    """Return the store path, or None to keep data in memory only."""
    if raw is None:
        return None
    cleaned = raw.strip()
    if cleaned.lower() in {"", ":memory:", "none"}:
        return None
    return cleaned
