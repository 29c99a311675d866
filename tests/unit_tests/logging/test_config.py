"""
LoggerConfig writer resolution tests.
"""

from __future__ import annotations

import io
import sys

import pytest

from sessionlog.config import LoggingSettings
from sessionlog.exceptions import InvalidLevelError
from sessionlog.logging import DISCARD, FanOutSink, Level, LoggerConfig


class TestDefaults:
    def test_untouched_config_uses_standard_streams(self) -> None:
        config = LoggerConfig()

        assert config.get_writer(Level.INFO) is sys.stdout
        assert config.get_writer(Level.WARN) is sys.stdout
        assert config.get_writer(Level.ERROR) is sys.stderr

    @pytest.mark.parametrize("level", [-1, 3, 42, "trace", None])
    def test_invalid_level_falls_back_to_info_default(self, level) -> None:
        config = LoggerConfig()

        assert config.get_writer(level) is config.get_writer(Level.INFO)

    def test_invalid_level_ignores_configured_info_writer(self, recorder) -> None:
        config = LoggerConfig().writer(Level.INFO, recorder)

        assert config.get_writer(7) is sys.stdout


class TestDisable:
    @pytest.mark.parametrize("level", list(Level))
    def test_disabled_level_discards_writes(self, level, recorder) -> None:
        config = LoggerConfig().writer(level, recorder).disable(level)

        sink = config.get_writer(level)
        sink.write("dropped\n")

        assert sink is DISCARD
        assert recorder.getvalue() == ""

    def test_disable_leaves_other_levels_alone(self) -> None:
        config = LoggerConfig().disable(Level.WARN)

        assert config.get_writer(Level.INFO) is sys.stdout
        assert config.get_writer(Level.ERROR) is sys.stderr

    @pytest.mark.parametrize("level", [-1, 3, "fatal"])
    def test_disable_rejects_invalid_level(self, level) -> None:
        with pytest.raises(InvalidLevelError):
            LoggerConfig().disable(level)


class TestWriter:
    def test_writer_installs_fan_out(self) -> None:
        first, second = io.StringIO(), io.StringIO()
        config = LoggerConfig().writer(Level.ERROR, first, second)

        sink = config.get_writer(Level.ERROR)
        sink.write("boom\n")

        assert isinstance(sink, FanOutSink)
        assert first.getvalue() == "boom\n"
        assert second.getvalue() == "boom\n"

    def test_writer_accepts_level_names(self, recorder) -> None:
        config = LoggerConfig().writer("warn", recorder)

        assert config.get_writer(Level.WARN).sinks == (recorder,)

    def test_writer_rejects_invalid_level(self, recorder) -> None:
        with pytest.raises(InvalidLevelError):
            LoggerConfig().writer(5, recorder)


def test_copy_is_independent(recorder) -> None:
    original = LoggerConfig()
    clone = original.copy()

    clone.disable(Level.INFO).writer(Level.ERROR, recorder)

    assert original.get_writer(Level.INFO) is sys.stdout
    assert original.get_writer(Level.ERROR) is sys.stderr


def test_from_settings() -> None:
    settings = LoggingSettings(
        _env_file=None,
        disabled="info, warning",
        timestamp_format="%H:%M:%S",
        utc=True,
        caller=False,
    )

    config = LoggerConfig.from_settings(settings)

    assert config.get_writer(Level.INFO) is DISCARD
    assert config.get_writer(Level.WARN) is DISCARD
    assert config.get_writer(Level.ERROR) is sys.stderr
    assert config.timestamp_format == "%H:%M:%S"
    assert config.utc is True
    assert config.caller is False
