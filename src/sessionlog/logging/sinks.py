"""
Sink abstractions and concrete implementations.

A sink is anything with ``write(str)`` and ``flush()``: a text stream, an
open file, or one of the combinators below.
"""

from __future__ import annotations

import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Protocol, TextIO, runtime_checkable

from sessionlog.exceptions import LogFileError

from .levels import Level


@runtime_checkable
class Sink(Protocol):
    """Destination for rendered log lines."""

    def write(self, s: str) -> int: ...

    def flush(self) -> None: ...


# =============================================================================
# Combinators
# =============================================================================


class DiscardSink:
    """Accepts every write and drops it."""

    def write(self, s: str) -> int:
        return len(s)

    def flush(self) -> None:
        pass

    def __repr__(self) -> str:
        return "DISCARD"


DISCARD = DiscardSink()


class FanOutSink:
    """Duplicates every write to all of its children, in order.

    The set of children is fixed at construction. Nested fan-outs are
    flattened.
    """

    def __init__(self, *sinks: Sink):
        children: list[Sink] = []
        for sink in sinks:
            if isinstance(sink, FanOutSink):
                children.extend(sink.sinks)
            else:
                children.append(sink)
        self._sinks = tuple(children)

    @property
    def sinks(self) -> tuple[Sink, ...]:
        return self._sinks

    def write(self, s: str) -> int:
        for sink in self._sinks:
            sink.write(s)
        return len(s)

    def flush(self) -> None:
        for sink in self._sinks:
            sink.flush()

    def __repr__(self) -> str:
        return f"FanOutSink({', '.join(repr(s) for s in self._sinks)})"


# =============================================================================
# Defaults
# =============================================================================


def default_sink(level: Level) -> TextIO:
    """Built-in destination of a level: stderr for ERROR, stdout otherwise.

    Looked up on every call so a replaced ``sys.stdout`` is honoured.
    """
    if level is Level.ERROR:
        return sys.stderr
    return sys.stdout


# =============================================================================
# Log File
# =============================================================================


def log_file_name(started_at: datetime, fmt: str = "m%m-d%d-t%H%M%S") -> str:
    """Name of the log file for a process started at ``started_at`` (UTC)."""
    if started_at.tzinfo is not None:
        started_at = started_at.astimezone(timezone.utc)
    return started_at.strftime(fmt) + ".log"


def create_log_file(
    logdir: str | Path,
    *,
    now: datetime | None = None,
    name_format: str = "m%m-d%d-t%H%M%S",
) -> TextIO:
    """Ensure ``logdir`` exists and open a new timestamped log file inside it.

    The file is opened for appending, line buffered. Filesystem failures are
    raised as LogFileError.
    """
    directory = Path(logdir)
    path = directory / log_file_name(now or datetime.now(timezone.utc), name_format)
    try:
        directory.mkdir(mode=0o775, parents=True, exist_ok=True)
        return open(path, "a", encoding="utf-8", buffering=1)
    except OSError as exc:
        raise LogFileError(path=str(path), reason=exc.strerror or str(exc)) from exc
