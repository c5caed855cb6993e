"""Configuration management using Pydantic Settings.

Loads configuration from environment variables with validation.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Package settings loaded from ``THIS_IS_FINE_*`` environment variables."""

    # Diagnostics
    diagnostic_max_length: int = Field(
        default=0,
        ge=0,
        description="Maximum length of a payload repr in unwrap diagnostics (0 = unlimited)",
    )

    # Logging
    log_level: str = Field(
        default="WARNING", description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )

    model_config = SettingsConfigDict(
        env_prefix="THIS_IS_FINE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """Get package settings (singleton).

    Returns:
        Package settings
    """
    return Settings()
