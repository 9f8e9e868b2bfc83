"""
Configuration management using pydantic-settings.
Loads configuration from environment variables and .env file.
"""

from functools import lru_cache
from typing import Literal, Optional
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="MISSING_VALIDATORS_",
        case_sensitive=False,
        extra="ignore"
    )

    # Logging
    DEBUG: bool = False
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    LOG_FILE: Optional[str] = Field(default=None, description="Also write logs to this file")

    # Messages
    LOCALE: str = Field(default="en", description="Locale root used for catalog lookups")
    MESSAGES_PATH: Optional[str] = Field(
        default=None,
        description="YAML message catalog; defaults to the packaged locale file"
    )

    # Declared rules
    RULES_PATH: Optional[str] = Field(
        default=None,
        description="Default validation rules YAML used by ValidationEngine"
    )


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.
    Uses lru_cache to ensure settings are loaded only once.
    """
    return Settings()


settings = get_settings()
