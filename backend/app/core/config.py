"""
Application configuration using pydantic-settings.
All config is loaded from environment variables with sensible defaults.
"""

from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    # Application
    APP_NAME: str = "Ring Availability API"
    APP_VERSION: str = "1.0.0"
    ENVIRONMENT: str = "development"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Ring provider: "memory" or "redis"
    RING_PROVIDER: str = "memory"

    # Hall layout, numbered from 1
    HALL_COUNT: int = 3
    RINGS_PER_HALL: int = 4

    # Occupied rings for the in-memory provider, as "<hall>:<ring>"
    OCCUPIED_RINGS: list[str] = []

    # Redis
    REDIS_URL: str = "redis://localhost:6379/0"
    RING_OCCUPIED_KEY: str = "rings:occupied"

    model_config = {
        "env_file": ".env",
        "case_sensitive": True,
    }


@lru_cache()
def get_settings() -> Settings:
    return Settings()
