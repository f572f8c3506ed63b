# src/taskkeeper/core/ports.py

"""
Ports (interfaces) used by the presentation layer.

Commands and connectors depend on these Protocols rather than on TaskStore,
so a fake store can stand in during tests.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from ..tasks.task_models import Task, TaskChange


class TaskListener(Protocol):
    def __call__(self, change: TaskChange) -> None: ...


class Unsubscribe(Protocol):
    def __call__(self) -> None: ...


class TaskRepo(Protocol):
    """Observable task collection as seen by a UI."""

    def snapshot(self) -> Sequence[Task]: ...
    def get(self, task_id: str) -> Task | None: ...
    def add(self, title: str) -> Task | None: ...
    def toggle_completion(self, task_id: str) -> bool: ...
    def delete(self, task_id: str) -> bool: ...
    def subscribe(self, listener: TaskListener) -> Unsubscribe: ...
