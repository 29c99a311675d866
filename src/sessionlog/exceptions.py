"""
sessionlog exception hierarchy.

Errors are split along three axes: validation (bad caller input),
infrastructure (filesystem, ID generation) and state (process-wide setup
performed twice). Every error carries a stable ``code`` and a ``details``
dict so callers can react without parsing messages.
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class SessionLogError(Exception):
    """Root of all sessionlog errors."""

    def __init__(
        self,
        message: str,
        *,
        code: str,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.details = details or {}


# ================================
# Validation Error
# ================================


class ValidationError(SessionLogError):
    """Caller passed a value outside what an operation accepts."""

    pass


class InvalidLevelError(ValidationError):
    """Raised by mutating config operations for a level outside INFO/WARN/ERROR."""

    def __init__(self, *, level: Any) -> None:
        message = f"Log level {level!r} is out of range, use Level.INFO, Level.WARN or Level.ERROR"
        super().__init__(message, code="INVALID_LEVEL", details={"level": repr(level)})


# ================================
# Infrastructure Error
# ================================


class InfrastructureError(SessionLogError):
    """Failure of something the logger depends on."""

    pass


class LogFileError(InfrastructureError):
    """The log directory or log file could not be created."""

    def __init__(self, *, path: str, reason: str) -> None:
        message = f"Could not set up log file at '{path}': {reason}"
        super().__init__(message, code="LOG_FILE_ERROR", details={"path": path, "reason": reason})


class IdGenerationError(InfrastructureError):
    """The ID generator was misconfigured. Only raised at service startup."""

    def __init__(self, *, reason: str) -> None:
        message = f"ID generator cannot start: {reason}"
        super().__init__(message, code="ID_GENERATION_ERROR", details={"reason": reason})


class IdServiceTimeout(InfrastructureError):
    """No ID was handed out within the requested timeout."""

    def __init__(self, *, timeout: float) -> None:
        message = f"No session ID available after {timeout}s"
        super().__init__(message, code="ID_SERVICE_TIMEOUT", details={"timeout": timeout})


# ================================
# State Error
# ================================


class StateError(SessionLogError):
    """Process-wide state is not in the state an operation requires."""

    pass


class AlreadyInitializedError(StateError):
    """``initialize_logging`` was called more than once."""

    def __init__(self) -> None:
        super().__init__(
            "Logging system was already initialized",
            code="ALREADY_INITIALIZED",
        )
