"""Application configuration using Pydantic Settings."""

from functools import lru_cache
from typing import List, Literal, Optional

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings can be overridden via environment variables
    or a .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "eosb-calculator"
    app_version: str = "1.0.0"
    environment: Literal["development", "test", "production"] = "development"
    debug: bool = False

    # Server
    host: str = "0.0.0.0"
    port: int = 3001

    # CORS
    cors_origins: List[str] = ["http://localhost:3000"]

    # Rate limiting (per client address, on /api/eosb routes)
    rate_limit_enabled: bool = True
    rate_limit: str = "100/15minutes"

    # Metrics
    metrics_enabled: bool = True

    # Security headers
    security_headers_enabled: bool = True

    # Logging
    log_level: Optional[str] = None  # ERROR in production, DEBUG otherwise
    log_format: Literal["json", "console"] = "json"

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @model_validator(mode="after")
    def default_log_level(self) -> "Settings":
        if self.log_level is None:
            self.log_level = "ERROR" if self.is_production else "DEBUG"
        return self


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
