import io

import pytest

from sessionlog.config import LoggingSettings
from sessionlog.logging import core


class StubIdService:
    """Hands out a fixed sequence of IDs."""

    def __init__(self, *ids: str):
        self._ids = iter(ids)

    def next_id(self, timeout=None) -> str:
        return next(self._ids)

    async def next_id_async(self, timeout=None) -> str:
        return next(self._ids)


@pytest.fixture(autouse=True)
def reset_logging_context(monkeypatch):
    """
    Gives every test a fresh process-wide logging context.
    initialize_logging() may only run once per process, so the module globals
    backing it are patched back to their pristine state.
    """
    monkeypatch.setattr(core, "_context", None)
    monkeypatch.setattr(core, "_initialized", False)
    yield
    if core._context is not None:
        core._context.close()


@pytest.fixture
def log_settings() -> LoggingSettings:
    """Settings isolated from the environment and .env files."""
    return LoggingSettings(_env_file=None, dir=None, disabled="", caller=True)


@pytest.fixture
def recorder() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def stub_ids():
    return StubIdService
