"""
sessionlog Configuration Module.

Settings are loaded from the environment and from .env files chosen by
`SL_ENV` (later files override earlier ones):
    1. .env
    2. .env.local
    3. .env.{environment}
    4. .env.{environment}.local

Usage:
    from sessionlog.config import settings

    settings.logging.dir
    settings.logging.disabled_levels
"""

from functools import cached_property

from pydantic_settings import BaseSettings, SettingsConfigDict

from .environment import get_env_files
from .logging import LoggingSettings


class Settings(BaseSettings):
    """Composite settings, one sub-settings object per concern."""

    model_config = SettingsConfigDict(
        env_file=get_env_files(),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @cached_property
    def logging(self) -> LoggingSettings:
        # Cascade follows SL_ENV at first access, not at import.
        return LoggingSettings(_env_file=get_env_files())


# Singleton instance
settings = Settings()

__all__ = [
    "Settings",
    "settings",
    "LoggingSettings",
    "get_env_files",
]
