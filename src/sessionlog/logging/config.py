"""
Per-level writer configuration.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Any

from sessionlog.exceptions import InvalidLevelError

from .levels import Level
from .sinks import DISCARD, FanOutSink, Sink, default_sink

if TYPE_CHECKING:
    from sessionlog.config import LoggingSettings


@dataclass
class LoggerConfig:
    """Output configuration for loggers.

    The default instance writes INFO and WARN to stdout, ERROR to stderr,
    with every level enabled. Either fill the fields directly or use the
    chaining helpers::

        config = LoggerConfig().disable(Level.INFO).writer(Level.ERROR, sys.stderr, log_file)

    Loggers capture their resolved writers when they are built, so changing a
    config afterwards does not affect loggers created before the change.
    """

    disabled: list[bool] = field(default_factory=lambda: [False, False, False])
    writers: list[Sink | None] = field(default_factory=lambda: [None, None, None])
    timestamp_format: str = "%Y/%m/%d %H:%M:%S"
    utc: bool = False
    caller: bool = True

    def disable(self, level: Any) -> LoggerConfig:
        """Mark a level as disabled. Raises InvalidLevelError for an unknown level."""
        self.disabled[Level.coerce(level)] = True
        return self

    def writer(self, level: Any, *sinks: Sink) -> LoggerConfig:
        """Combine ``sinks`` into one fan-out and use it as the output of ``level``."""
        self.writers[Level.coerce(level)] = FanOutSink(*sinks)
        return self

    def get_writer(self, level: Any) -> Sink:
        """Effective sink of ``level``.

        Never raises: an unknown level gets the INFO default.
        """
        try:
            lvl = Level.coerce(level)
        except InvalidLevelError:
            return default_sink(Level.INFO)
        if self.disabled[lvl]:
            return DISCARD
        writer = self.writers[lvl]
        if writer is None:
            return default_sink(lvl)
        return writer

    def copy(self) -> LoggerConfig:
        return replace(self, disabled=list(self.disabled), writers=list(self.writers))

    @classmethod
    def from_settings(cls, settings: LoggingSettings) -> LoggerConfig:
        config = cls(
            timestamp_format=settings.timestamp_format,
            utc=settings.utc,
            caller=settings.caller,
        )
        for name in settings.disabled_levels:
            config.disable(name)
        return config
