"""Runtime settings, read from ``CATALOG_*`` environment variables or ``.env``."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):

    # Storage
    data_dir: Path = Path("data")

    # Organization registry
    organization_registry_url: str = "http://localhost:8081"
    organization_registry_timeout: float = 5.0

    # Logging
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="CATALOG_",
        env_file=".env",
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()
