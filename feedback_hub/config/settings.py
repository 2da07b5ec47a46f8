"""Application settings using Pydantic Settings for environment-based configuration."""

from functools import lru_cache
from typing import Literal
from urllib.parse import quote

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Central configuration for the feedback-hub application.

    All settings can be overridden via environment variables.
    Prefix is not used to allow standard env var names (e.g., DATABASE_URL).
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Environment
    environment: Literal["development", "staging", "production"] = "development"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    debug: bool = False

    # PostgreSQL. Credentials come from the environment; host and database
    # name are fixed for the deployment unless DATABASE_URL overrides them.
    database_url: str | None = None
    database_user: str = "postgres"
    database_password: str = "postgres"
    database_host: str = "localhost:5432"
    database_name: str = "feedback"
    db_pool_min_size: int = Field(default=1, ge=1)
    db_pool_max_size: int = Field(default=10, ge=1)

    # API server
    api_host: str = "0.0.0.0"
    api_port: int = 5000
    cors_origins: str = "*"
    cors_allow_credentials: bool = False

    # API client
    api_base_url: str = "http://localhost:5000"
    client_timeout_seconds: float = Field(default=10.0, gt=0.0, le=120.0)

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    @property
    def database_dsn(self) -> str:
        """Connection URL, built from the credential parts unless DATABASE_URL is set."""
        if self.database_url:
            return self.database_url
        user = quote(self.database_user, safe="")
        password = quote(self.database_password, safe="")
        return f"postgresql://{user}:{password}@{self.database_host}/{self.database_name}"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are loaded only once.
    Clear cache with get_settings.cache_clear() if needed.
    """
    return Settings()
