# tests/test_config.py

from __future__ import annotations

from pathlib import Path

import pytest

from taskkeeper import config
from taskkeeper.config import ENV_PREFIX, Settings, get_settings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in ("APP_NAME", "LOG_LEVEL", "SEED_SAMPLE_TASKS", "CONSOLE_ENABLED", "DATA_DIR"):
        monkeypatch.delenv(f"{ENV_PREFIX}_{key}", raising=False)


def test_defaults() -> None:
    s = Settings.from_env()
    assert s.app_name == "Task Manager"
    assert s.log_level == "INFO"
    assert s.seed_sample_tasks is True
    assert s.console_enabled is True
    assert s.data_dir == Path(".local/taskkeeper")
    assert s.log_file == Path(".local/taskkeeper/taskkeeper.log")


def test_env_overrides(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("TASKKEEPER_APP_NAME", "Chores")
    monkeypatch.setenv("TASKKEEPER_LOG_LEVEL", "debug")
    monkeypatch.setenv("TASKKEEPER_SEED_SAMPLE_TASKS", "no")
    monkeypatch.setenv("TASKKEEPER_CONSOLE_ENABLED", "0")
    monkeypatch.setenv("TASKKEEPER_DATA_DIR", str(tmp_path))

    s = Settings.from_env()
    assert s.app_name == "Chores"
    assert s.log_level == "DEBUG"
    assert s.seed_sample_tasks is False
    assert s.console_enabled is False
    assert s.data_dir == tmp_path


def test_malformed_values_fall_back(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TASKKEEPER_SEED_SAMPLE_TASKS", "maybe")
    monkeypatch.setenv("TASKKEEPER_APP_NAME", "   ")
    monkeypatch.setenv("TASKKEEPER_DATA_DIR", "")

    s = Settings.from_env()
    assert s.seed_sample_tasks is True
    assert s.app_name == "Task Manager"
    assert s.data_dir == Path(".local/taskkeeper")


@pytest.fixture()
def isolated_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """
    Empty working directory and a fresh settings cache.

    Keys loaded from .env land in os.environ directly, so each one is
    registered with monkeypatch first to be restored afterwards.
    """
    for key in ("APP_NAME", "LOG_LEVEL", "SEED_SAMPLE_TASKS", "CONSOLE_ENABLED", "DATA_DIR"):
        monkeypatch.setenv(f"{ENV_PREFIX}_{key}", "")
        monkeypatch.delenv(f"{ENV_PREFIX}_{key}")
    monkeypatch.setattr(config, "_SETTINGS", None)
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_get_settings_reads_dotenv_and_caches(isolated_settings: Path) -> None:
    (isolated_settings / ".env").write_text(
        "TASKKEEPER_APP_NAME=FromDotenv\nTASKKEEPER_SEED_SAMPLE_TASKS=false\n", "utf-8"
    )

    first = get_settings(reload=True)
    assert first.app_name == "FromDotenv"
    assert first.seed_sample_tasks is False
    assert get_settings() is first


def test_real_env_wins_over_dotenv(isolated_settings: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    (isolated_settings / ".env").write_text(
        "TASKKEEPER_APP_NAME=FromDotenv\nTASKKEEPER_LOG_LEVEL=error\n", "utf-8"
    )
    monkeypatch.setenv("TASKKEEPER_APP_NAME", "FromEnv")

    s = get_settings(reload=True)
    assert s.app_name == "FromEnv"
    assert s.log_level == "ERROR"


def test_get_settings_without_dotenv_uses_defaults(isolated_settings: Path) -> None:
    s = get_settings(reload=True)
    assert s.app_name == "Task Manager"
    assert s.console_enabled is True
