"""Runtime settings, read from ``AGRIPOS_*`` environment variables or ``.env``."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="AGRIPOS_", env_file=".env", extra="ignore")

    # REST store; ignored when store_file is set
    store_url: str = "http://localhost:3000"
    store_file: Path | None = None
    store_timeout: float = 10.0

    low_stock_threshold: int = 5
    low_stock_limit: int = 10

    log_level: str = "WARNING"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
