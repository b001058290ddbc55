"""Application configuration using pydantic settings."""
from typing import List, Literal, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Configuration values for the service."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    PROJECT_NAME: str = "Team Roster Service"
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"

    STORE_BACKEND: Literal["memory", "sql"] = "memory"
    DATABASE_URL: str = "sqlite+pysqlite:///:memory:"

    # Caching is disabled unless a Redis URL is configured
    REDIS_URL: Optional[str] = None
    CACHE_TTL_SECONDS: int = 1800

    SEED_ON_STARTUP: bool = True

    HOST: str = "127.0.0.1"
    PORT: int = 8000

    ALLOWED_ORIGINS: List[str] = [
        "http://localhost:5173",
        "http://localhost:3000",
    ]


settings = Settings()
