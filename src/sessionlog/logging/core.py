"""
Logger construction and process-wide logging context.
"""

from __future__ import annotations

import threading
from pathlib import Path
from typing import TYPE_CHECKING, Any, TextIO

import structlog
from structlog.processors import CallsiteParameter, CallsiteParameterAdder, TimeStamper

from sessionlog.exceptions import AlreadyInitializedError, SessionLogError

from .config import LoggerConfig
from .formatters import TIMESTAMP_KEY, LineRenderer, claim_callsite_keys, stash_callsite_keys
from .ids import IdService, get_id_service
from .levels import Level
from .sinks import Sink, create_log_file, default_sink

if TYPE_CHECKING:
    from sessionlog.config import LoggingSettings

MASTER = "MASTER"

# Channels never filter: disabling a level is done by giving it a discard sink.
_Unfiltered = structlog.make_filtering_bound_logger(0)


def get_logger(name: str | None = None) -> structlog.typing.FilteringBoundLogger:
    """Get a structured logger for sessionlog's own diagnostics."""
    return structlog.get_logger(logger_name=name or "sessionlog")


_logger = get_logger(__name__)


# =============================================================================
# Channels & Loggers
# =============================================================================


class Channel:
    """One level's output: renders lines and writes them to a fixed sink.

    Call it like a logging method::

        log.info("order %s accepted", order_id, total=12.5)
    """

    def __init__(self, level: Level, sink: Sink, prefix: str, config: LoggerConfig):
        self.level = level
        self.sink = sink
        processors: list[Any] = [TimeStamper(fmt=config.timestamp_format, utc=config.utc, key=TIMESTAMP_KEY)]
        if config.caller:
            processors += [
                stash_callsite_keys,
                CallsiteParameterAdder(
                    [CallsiteParameter.FILENAME, CallsiteParameter.LINENO],
                    additional_ignores=["sessionlog"],
                ),
                claim_callsite_keys,
            ]
        processors.append(LineRenderer(level.tag + prefix))
        self._log = structlog.wrap_logger(
            structlog.WriteLogger(sink),
            processors=processors,
            wrapper_class=_Unfiltered,
            context_class=dict,
        )
        self._emit = getattr(self._log, level.method)

    def __call__(self, message: Any = "", *args: Any, **context: Any) -> None:
        self._emit(str(message), *args, **context)

    def __repr__(self) -> str:
        return f"Channel({self.level.name}, {self.sink!r})"


class Logger:
    """Three level channels bound to one identity.

    ``identity`` is ``"MASTER"`` for master loggers and ``@endpoint:id`` for
    session loggers. The channels are fixed for the logger's lifetime.
    """

    def __init__(self, identity: str, info: Channel, warn: Channel, error: Channel):
        self.identity = identity
        self.info = info
        self.warn = warn
        self.error = error

    @property
    def warning(self) -> Channel:
        return self.warn

    def channel(self, level: Any) -> Channel:
        return (self.info, self.warn, self.error)[Level.coerce(level)]

    def __repr__(self) -> str:
        return f"Logger({self.identity!r})"


def _build_logger(config: LoggerConfig, identity: str, prefix: str) -> Logger:
    return Logger(
        identity,
        *(Channel(level, config.get_writer(level), prefix, config) for level in Level),
    )


# =============================================================================
# Logging Context
# =============================================================================


class LoggingContext:
    """Everything loggers of one setup share: config, ID service, log file."""

    def __init__(
        self,
        config: LoggerConfig | None = None,
        *,
        id_service: IdService | None = None,
        log_file: TextIO | None = None,
    ):
        self.config = (config or LoggerConfig()).copy()
        self.id_service = id_service or get_id_service()
        self.log_file = log_file

    def close(self) -> None:
        """Close the log file, if this context opened one."""
        if self.log_file is not None and not self.log_file.closed:
            self.log_file.close()

    def master(self) -> Logger:
        return _build_logger(self.config, MASTER, "")

    def session(self, endpoint: str) -> Logger:
        return _session(self.config, endpoint, self.id_service.next_id())

    async def session_async(self, endpoint: str) -> Logger:
        return _session(self.config, endpoint, await self.id_service.next_id_async())


def _session(config: LoggerConfig, endpoint: str, session_id: str) -> Logger:
    identity = f"@{endpoint}:{session_id}"
    logger = _build_logger(config, identity, identity)
    # Blank line marks the start of the session's transcript in shared sinks.
    logger.info()
    return logger


_context: LoggingContext | None = None
_initialized = False
_context_lock = threading.Lock()


def get_context() -> LoggingContext:
    """The process-wide context.

    Without a prior ``initialize_logging`` call a stdout/stderr-only context
    is created; it does not count as initialization.
    """
    global _context
    if _context is None:
        with _context_lock:
            if _context is None:
                from sessionlog.config import settings

                _context = LoggingContext(LoggerConfig.from_settings(settings.logging))
    return _context


def initialize_logging(
    logdir: str | Path | None = None,
    *,
    settings: LoggingSettings | None = None,
) -> LoggingContext:
    """Set up the process-wide logging context. May only be called once.

    With a ``logdir`` (or ``SL_LOG_DIR``) a new timestamped log file is
    created there; INFO and WARN then go to the file and stdout, ERROR to the
    file and stderr. Without one only the standard streams are used.

    Raises:
        AlreadyInitializedError: on any call after the first successful one.
        LogFileError: if the directory or file cannot be created.
    """
    global _context, _initialized

    if settings is None:
        from sessionlog.config import settings as app_settings

        settings = app_settings.logging
    if logdir is None:
        logdir = settings.dir

    with _context_lock:
        if _initialized:
            raise AlreadyInitializedError()

        config = LoggerConfig.from_settings(settings)
        log_file = None
        if logdir:
            log_file = create_log_file(logdir, name_format=settings.file_name_format)
            config.writer(Level.INFO, log_file, default_sink(Level.INFO))
            config.writer(Level.WARN, log_file, default_sink(Level.WARN))
            config.writer(Level.ERROR, log_file, default_sink(Level.ERROR))

        _context = LoggingContext(config, log_file=log_file)
        _initialized = True

    _logger.debug("Session logging initialized", log_file=getattr(log_file, "name", None))
    return _context


def must_initialize_logging(
    logdir: str | Path | None = None,
    *,
    settings: LoggingSettings | None = None,
) -> LoggingContext:
    """``initialize_logging`` that exits the process on failure."""
    try:
        return initialize_logging(logdir, settings=settings)
    except SessionLogError as exc:
        _logger.critical("Logger initialization failed", code=exc.code, error=str(exc))
        raise SystemExit(f"Logger initialization failed: {exc}") from exc


# =============================================================================
# Factory
# =============================================================================


def new_master_logger(config: LoggerConfig | None = None) -> Logger:
    """Logger without prefix or session ID.

    Uses the process-wide context when ``config`` is omitted.
    """
    if config is None:
        return get_context().master()
    return _build_logger(config, MASTER, "")


def new_session_logger(
    endpoint: str,
    config: LoggerConfig | None = None,
    *,
    id_service: IdService | None = None,
) -> Logger:
    """Logger prefixing every line with ``@endpoint:<unique id>``.

    Waits for the next ID from the ID service and writes one blank INFO line
    to mark the start of the session.
    """
    if config is None:
        context = get_context()
        config = context.config
        id_service = id_service or context.id_service
    service = id_service or get_id_service()
    return _session(config, endpoint, service.next_id())


async def new_session_logger_async(
    endpoint: str,
    config: LoggerConfig | None = None,
    *,
    id_service: IdService | None = None,
) -> Logger:
    """``new_session_logger`` for asyncio handlers; waits for the ID without blocking the loop."""
    if config is None:
        context = get_context()
        config = context.config
        id_service = id_service or context.id_service
    service = id_service or get_id_service()
    return _session(config, endpoint, await service.next_id_async())
