"""
Environment-based configuration using pydantic-settings.

Values come from the process environment first, then from a ``.env`` file.
"""

from functools import lru_cache
from typing import List, Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Database; CONNECTION_STRING is accepted for older deployments
    database_url: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("DATABASE_URL", "CONNECTION_STRING")
    )
    db_echo: bool = False
    db_pool_size: int = 5
    db_max_overflow: int = 10
    db_create_tables: bool = False

    # Logging
    log_level: str = "INFO"

    # API
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    cors_origins: str = "*"

    @property
    def cors_origin_list(self) -> List[str]:
        """Comma separated CORS_ORIGINS as a list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()

if not settings.database_url:
    raise RuntimeError(
        "Connection string not found. Set DATABASE_URL (or CONNECTION_STRING) in the environment or .env"
    )

DATABASE_URL: str = settings.database_url
DB_ECHO = settings.db_echo
DB_POOL_SIZE = settings.db_pool_size
DB_MAX_OVERFLOW = settings.db_max_overflow
DB_CREATE_TABLES = settings.db_create_tables

LOG_LEVEL = settings.log_level.upper()

API_HOST = settings.api_host
API_PORT = settings.api_port

CORS_ORIGINS: List[str] = settings.cors_origin_list
