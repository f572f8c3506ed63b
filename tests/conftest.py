# tests/conftest.py

from __future__ import annotations

from pathlib import Path

import pytest

from taskkeeper.config import Settings
from taskkeeper.core.state import AppState
from taskkeeper.tasks.task_store import TaskStore

from .fakes import RecordingListener


@pytest.fixture()
def settings(tmp_path: Path) -> Settings:
    """Settings built directly, so tests ignore the environment and any local .env."""
    return Settings(
        app_name="Task Manager",
        log_level="INFO",
        seed_sample_tasks=True,
        console_enabled=True,
        data_dir=tmp_path / "data",
    )


@pytest.fixture()
def store() -> TaskStore:
    """Store seeded with the four sample tasks (ids "1".."4")."""
    return TaskStore.with_sample_tasks()


@pytest.fixture()
def empty_store() -> TaskStore:
    return TaskStore()


@pytest.fixture()
def listener(store: TaskStore) -> RecordingListener:
    rec = RecordingListener()
    rec.unsubscribe = store.subscribe(rec)
    return rec


@pytest.fixture()
def state(settings: Settings, store: TaskStore) -> AppState:
    return AppState(settings=settings, task_store=store)
