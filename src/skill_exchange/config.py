"""Configuration settings for Skill Exchange."""

from functools import lru_cache
from typing import Literal, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # Storage
    storage_backend: Literal["database", "memory"] = "database"
    database_url: Optional[str] = None
    db_pool_size: int = 5
    db_max_overflow: int = 10
    db_pool_timeout: int = 10
    db_echo: bool = False

    # API
    api_host: str = "0.0.0.0"
    api_port: int = 5000
    debug: bool = False
    log_level: str = "INFO"
    cors_origins: list[str] = ["*"]

    # Service
    service_name: str = "skill-exchange"
    service_version: str = "0.1.0"

    @property
    def async_database_url(self) -> Optional[str]:
        """Database URL with an asyncio driver selected for PostgreSQL."""
        if not self.database_url:
            return None
        for prefix in ("postgresql://", "postgres://"):
            if self.database_url.startswith(prefix):
                return "postgresql+asyncpg://" + self.database_url[len(prefix):]
        return self.database_url


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
