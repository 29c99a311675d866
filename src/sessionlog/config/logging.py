"""
Logging Configuration.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .environment import get_env_files


class LoggingSettings(BaseSettings):
    """Session logger configuration."""

    model_config = SettingsConfigDict(
        env_prefix="SL_LOG_",
        env_file=get_env_files(),
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    dir: str | None = Field(default=None, description="Directory for the per-run log file (unset: no file)")
    disabled: str = Field(default="", description="Comma-separated level names to discard (info, warn, error)")
    timestamp_format: str = Field(default="%Y/%m/%d %H:%M:%S", description="Per-line timestamp format")
    utc: bool = Field(default=False, description="Use UTC for per-line timestamps")
    caller: bool = Field(default=True, description="Include file:line of the caller in each line")
    file_name_format: str = Field(
        default="m%m-d%d-t%H%M%S",
        description="strftime format of the log file name (UTC process start time, '.log' appended)",
    )

    @property
    def disabled_levels(self) -> list[str]:
        return [name.strip() for name in self.disabled.split(",") if name.strip()]
