# questionfeed/core/config.py
from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    app_name: str = "Question Feed API"
    host: str = "0.0.0.0"
    port: int = 5000

    # Store
    mongodb_uri: str = "mongodb://localhost:27017"
    mongodb_db: str = "questionfeed"
    store: Literal["mongo", "memory"] = "mongo"
    ttl_index: bool = False

    # Bounded collection
    capacity: int = 10_000
    retention_hours: int = 24
    cleanup_interval_seconds: float = 3600
    cleanup_enabled: bool = True

    # HTTP / logs
    cors_allow_origins: str = "*"
    log_level: str = "INFO"

    model_config = SettingsConfigDict(env_prefix="QF_", env_file=".env", extra="ignore")


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
