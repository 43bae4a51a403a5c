"""Configuration settings for Hall of Fame service."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # Database
    database_url: str = "sqlite+aiosqlite:///./hall_of_fame.db"
    database_echo: bool = False

    # Logging
    log_level: str = "INFO"
    log_file: str | None = None

    # API
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    debug: bool = False
    docs_enabled: bool = True
    cors_origins: list[str] = ["*"]

    # Service
    service_name: str = "hall-of-fame"
    service_version: str = "0.1.0"

    @property
    def is_sqlite(self) -> bool:
        """Whether the configured store is SQLite."""
        return self.database_url.startswith("sqlite")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
