"""Central settings: loads from environment variables and an optional .env file."""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ticklist.config.constants import DEFAULT_DATE_FORMAT, DEFAULT_LOG_LEVEL, ENV_PREFIX


class Settings(BaseSettings):
    """All ticklist configuration in one place.

    Priority (highest → lowest):
      1. Environment variables (TICKLIST_ prefix)
      2. .env file
      3. Defaults defined here
    """

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = DEFAULT_LOG_LEVEL
    date_format: str = DEFAULT_DATE_FORMAT  # display only; input is always ISO-8601
    show_banner: bool = True

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level


@lru_cache
def get_settings() -> Settings:
    """Singleton settings instance."""
    return Settings()
