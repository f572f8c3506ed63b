# tests/fakes.py

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field

from taskkeeper.tasks.task_models import ChangeKind, TaskChange


@dataclass(slots=True)
class RecordingListener:
    """
    Store listener that captures every change for assertions.
    """

    changes: list[TaskChange] = field(default_factory=list)
    unsubscribe: Callable[[], None] | None = None

    def __call__(self, change: TaskChange) -> None:
        self.changes.append(change)

    @property
    def count(self) -> int:
        return len(self.changes)

    @property
    def kinds(self) -> list[ChangeKind]:
        return [c.kind for c in self.changes]


class ScriptedInput:
    """
    Replacement for builtins.input: returns scripted lines, then raises EOFError.
    """

    def __init__(self, lines: Iterable[str]) -> None:
        self._lines = list(lines)
        self.prompts: list[str] = []

    def __call__(self, prompt: str = "") -> str:
        self.prompts.append(prompt)
        if not self._lines:
            raise EOFError
        return self._lines.pop(0)
