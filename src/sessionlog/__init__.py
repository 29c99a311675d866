from sessionlog.logging import (
    Level,
    Logger,
    LoggerConfig,
    initialize_logging,
    must_initialize_logging,
    new_master_logger,
    new_session_logger,
    new_session_logger_async,
)

__all__ = [
    "Level",
    "Logger",
    "LoggerConfig",
    "initialize_logging",
    "must_initialize_logging",
    "new_master_logger",
    "new_session_logger",
    "new_session_logger_async",
]
