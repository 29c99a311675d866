"""
Line rendering for session loggers.
"""

from __future__ import annotations

from typing import Any

import orjson
from structlog.typing import EventDict, WrappedLogger

# Keys the channel processors write. Kept private so user context with the
# same public names (timestamp=, filename=, lineno=) is rendered untouched.
TIMESTAMP_KEY = "_ts"
FILENAME_KEY = "_filename"
LINENO_KEY = "_lineno"

_CALLSITE_KEYS = ("filename", "lineno")
_STASH_PREFIX = "_user_"


def orjson_dumps(v: Any, *, default: Any = None) -> str:
    """Fast JSON serialization using orjson."""
    return orjson.dumps(v, default=default, option=orjson.OPT_UTC_Z | orjson.OPT_NAIVE_UTC).decode()


def _render_value(value: Any) -> str:
    if isinstance(value, (dict, list, tuple)):
        return orjson_dumps(value, default=str)
    return str(value)


def stash_callsite_keys(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    """Move user ``filename``/``lineno`` out of the way of CallsiteParameterAdder."""
    for key in _CALLSITE_KEYS:
        if key in event_dict:
            event_dict[_STASH_PREFIX + key] = event_dict.pop(key)
    return event_dict


def claim_callsite_keys(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    """Rename the callsite keys to their private names and restore user values."""
    event_dict[FILENAME_KEY] = event_dict.pop("filename", None)
    event_dict[LINENO_KEY] = event_dict.pop("lineno", None)
    for key in _CALLSITE_KEYS:
        stashed = _STASH_PREFIX + key
        if stashed in event_dict:
            event_dict[key] = event_dict.pop(stashed)
    return event_dict


class LineRenderer:
    """structlog processor producing the final text line.

    Layout::

        <head>: <timestamp> <file>:<line>: <message> key=value ...

    ``head`` is the level tag followed by the logger prefix, e.g. ``INFO`` or
    `` ERR@orders:3xk9Pqa0``. The caller location is present only when the
    callsite processors ran.
    """

    EXCLUDED_KEYS = {"event", TIMESTAMP_KEY, FILENAME_KEY, LINENO_KEY}

    def __init__(self, head: str):
        self._head = head

    def __call__(self, logger: WrappedLogger, method_name: str, event_dict: EventDict) -> str:
        parts = [f"{self._head}:"]

        timestamp = event_dict.get(TIMESTAMP_KEY)
        if timestamp:
            parts.append(str(timestamp))

        filename = event_dict.get(FILENAME_KEY)
        if filename:
            parts.append(f"{filename}:{event_dict.get(LINENO_KEY) or 0}:")

        message = event_dict.get("event")
        parts.append("" if message is None else str(message))

        extras = [f"{k}={_render_value(v)}" for k, v in event_dict.items() if k not in self.EXCLUDED_KEYS]
        if extras:
            parts.append(" ".join(extras))

        return " ".join(parts)
