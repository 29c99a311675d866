"""
Session Logging.

Loggers with three levels (INFO, WARN, ERROR) whose lines carry a prefix and
a unique per-session ID, so output from concurrent request handlers sharing a
log file can be told apart:

    INFO@orders:0a3Xk9Pq1: 2026/10/19 14:03:11 handlers.py:42: order accepted

Library: structlog renders and writes each line; orjson encodes structured
context values.
"""

from .config import LoggerConfig
from .core import (
    MASTER,
    Channel,
    Logger,
    LoggingContext,
    get_context,
    get_logger,
    initialize_logging,
    must_initialize_logging,
    new_master_logger,
    new_session_logger,
    new_session_logger_async,
)
from .ids import IdService, ShortIdGenerator, get_id_service
from .levels import Level
from .sinks import DISCARD, DiscardSink, FanOutSink, Sink, create_log_file

__all__ = [
    "MASTER",
    "Channel",
    "DISCARD",
    "DiscardSink",
    "FanOutSink",
    "IdService",
    "Level",
    "Logger",
    "LoggerConfig",
    "LoggingContext",
    "ShortIdGenerator",
    "Sink",
    "create_log_file",
    "get_context",
    "get_id_service",
    "get_logger",
    "initialize_logging",
    "must_initialize_logging",
    "new_master_logger",
    "new_session_logger",
    "new_session_logger_async",
]
