from __future__ import annotations

import pytest

from sessionlog.config import Settings, get_env_files


@pytest.fixture
def env_dir(tmp_path, monkeypatch):
    """Empty working directory with SL_ENV=testing and no SL_LOG_* overrides."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("SL_ENV", "testing")
    for name in ("DIR", "DISABLED", "CALLER", "UTC", "TIMESTAMP_FORMAT", "FILE_NAME_FORMAT"):
        monkeypatch.delenv(f"SL_LOG_{name}", raising=False)
    return tmp_path


def test_env_files_follow_sl_env(env_dir) -> None:
    assert get_env_files() == (".env", ".env.local", ".env.testing", ".env.testing.local")


def test_logging_settings_read_every_env_file(env_dir) -> None:
    (env_dir / ".env").write_text("SL_LOG_UTC=true\n")
    (env_dir / ".env.local").write_text("SL_LOG_DISABLED=info\n")
    (env_dir / ".env.testing").write_text("SL_LOG_CALLER=false\n")

    logging = Settings().logging

    assert logging.utc is True
    assert logging.disabled_levels == ["info"]
    assert logging.caller is False


def test_later_env_files_take_precedence(env_dir) -> None:
    (env_dir / ".env").write_text("SL_LOG_DISABLED=error\n")
    (env_dir / ".env.local").write_text("SL_LOG_DISABLED=info\n")
    (env_dir / ".env.testing.local").write_text("SL_LOG_DISABLED=warn\n")

    assert Settings().logging.disabled_levels == ["warn"]


def test_process_environment_beats_env_files(env_dir, monkeypatch) -> None:
    (env_dir / ".env.testing").write_text("SL_LOG_DIR=from-file\n")
    monkeypatch.setenv("SL_LOG_DIR", "from-env")

    assert Settings().logging.dir == "from-env"
