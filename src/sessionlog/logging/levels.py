"""
Severity levels.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Any

from sessionlog.exceptions import InvalidLevelError


class Level(IntEnum):
    INFO = 0
    WARN = 1
    ERROR = 2

    @property
    def tag(self) -> str:
        """Four-column tag opening every line of this level."""
        return _TAGS[self]

    @property
    def method(self) -> str:
        """Name of the structlog method used to emit at this level."""
        return _METHODS[self]

    @classmethod
    def coerce(cls, value: Any) -> Level:
        """Turn a Level, an int or a level name into a Level.

        Raises InvalidLevelError for anything else.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return _NAMES[value.strip().lower()]
            except KeyError:
                raise InvalidLevelError(level=value) from None
        if isinstance(value, int) and not isinstance(value, bool):
            try:
                return cls(value)
            except ValueError:
                raise InvalidLevelError(level=value) from None
        raise InvalidLevelError(level=value)


_TAGS = {
    Level.INFO: "INFO",
    Level.WARN: "WARN",
    Level.ERROR: " ERR",
}

_METHODS = {
    Level.INFO: "info",
    Level.WARN: "warning",
    Level.ERROR: "error",
}

_NAMES = {
    "info": Level.INFO,
    "warn": Level.WARN,
    "warning": Level.WARN,
    "err": Level.ERROR,
    "error": Level.ERROR,
}
