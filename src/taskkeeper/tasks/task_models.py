# src/taskkeeper/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import StrEnum


class ChangeKind(StrEnum):
    """What a store mutation did to a task."""

    ADDED = "added"
    TOGGLED = "toggled"
    DELETED = "deleted"


@dataclass(frozen=True, slots=True)
class Task:
    id: str
    title: str
    is_completed: bool = False

    def toggled(self) -> Task:
        return replace(self, is_completed=not self.is_completed)


@dataclass(frozen=True, slots=True)
class TaskChange:
    """
    Payload delivered to store listeners.

    For TOGGLED the task is the new value, for DELETED it is the removed one.
    """

    kind: ChangeKind
    task: Task


SEED_TASKS: tuple[Task, ...] = (
    Task(id="1", title="Buy groceries", is_completed=False),
    Task(id="2", title="Finish project", is_completed=True),
    Task(id="3", title="Call mom", is_completed=False),
    Task(id="4", title="Go for a run", is_completed=False),
)
