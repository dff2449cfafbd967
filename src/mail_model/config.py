"""Configuration management for Mail Model.

This module handles package configuration using Pydantic settings.
Configuration can be loaded from environment variables or .env files.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Package settings with environment variable support.

    All settings can be overridden via environment variables with
    the MAIL_MODEL_ prefix (e.g., MAIL_MODEL_DEFAULT_ENCODING).
    """

    model_config = SettingsConfigDict(
        env_prefix="MAIL_MODEL_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Message Configuration
    default_encoding: str = Field(
        default="UTF-8",
        description="Character encoding for body parts created without one",
    )

    # Application Configuration
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode; forces DEBUG logging",
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached package settings.

    Returns:
        Settings: Package settings instance.
    """
    return Settings()
