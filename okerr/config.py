"""Configuration management using Pydantic Settings.

Loads configuration from ``OKERR_*`` environment variables with validation.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library settings loaded from environment variables."""

    # Payload rendering (error messages)
    render_indent: int | None = Field(
        default=None, ge=0, le=8, description="JSON indent for rendered payloads (None = compact)"
    )
    render_max_length: int = Field(
        default=0,
        ge=0,
        description="Truncate rendered payloads longer than this (in characters, 0=never truncate)",
    )

    # Logging
    log_level: str = Field(
        default="INFO", description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )

    model_config = SettingsConfigDict(
        env_prefix="OKERR_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """Get library settings (singleton).

    Returns:
        Library settings
    """
    return Settings()
