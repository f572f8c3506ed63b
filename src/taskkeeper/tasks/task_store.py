# src/taskkeeper/tasks/task_store.py

from __future__ import annotations

import itertools
import logging
import threading
from collections.abc import Iterable, Iterator

from .task_models import SEED_TASKS, ChangeKind, Task, TaskChange
from ..core.ports import TaskListener, Unsubscribe

logger = logging.getLogger(__name__)


class TaskStore:
    """
    In-memory, observable task store.

    The store owns every Task it holds: callers only ever see immutable
    snapshots. Invalid input (blank title, unknown id) is absorbed as a no-op
    and never raises.

    Notification:
    - listeners are called synchronously, in registration order,
      once per mutation that actually changed state
    - no-op calls do not notify

    Thread-safety:
    - a single RLock serializes all operations; listeners run under it
      and may call back into the store
    """

    def __init__(self, seed: Iterable[Task] | None = None) -> None:
        self._lock = threading.RLock()
        self._tasks: list[Task] = []
        self._issued_ids: set[str] = set()
        self._listeners: dict[int, TaskListener] = {}
        self._listener_seq = itertools.count(1)

        for task in seed or ():
            title = task.title.strip()
            if not title:
                logger.warning("Skipping seed task with blank title id=%s", task.id)
                continue
            if task.id in self._issued_ids:
                logger.warning("Skipping seed task with duplicate id=%s", task.id)
                continue
            self._tasks.append(Task(id=task.id, title=title, is_completed=task.is_completed))
            self._issued_ids.add(task.id)

        self._id_counter = itertools.count(self._highest_numeric_id() + 1)

        logger.info("TaskStore ready total=%d", len(self._tasks))

    @classmethod
    def with_sample_tasks(cls) -> TaskStore:
        return cls(SEED_TASKS)

    # ---- read side ----

    def snapshot(self) -> tuple[Task, ...]:
        """Point-in-time copy of all tasks in insertion order."""
        with self._lock:
            return tuple(self._tasks)

    def get(self, task_id: str) -> Task | None:
        with self._lock:
            idx = self._index_of(task_id)
            return None if idx < 0 else self._tasks[idx]

    def __len__(self) -> int:
        with self._lock:
            return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self.snapshot())

    # ---- mutations ----

    def add(self, title: str) -> Task | None:
        """
        Append a new task with the trimmed title.

        Returns the created Task, or None when the title is blank.
        """
        clean = (title or "").strip()
        if not clean:
            logger.debug("add ignored: blank title")
            return None

        with self._lock:
            task = Task(id=self._next_id(), title=clean)
            self._tasks.append(task)
            logger.debug("Task added id=%s title=%r", task.id, task.title)
            self._notify(TaskChange(ChangeKind.ADDED, task))
            return task

    def toggle_completion(self, task_id: str) -> bool:
        with self._lock:
            idx = self._index_of(task_id)
            if idx < 0:
                logger.debug("toggle ignored: unknown id=%s", task_id)
                return False
            task = self._tasks[idx].toggled()
            self._tasks[idx] = task
            logger.debug("Task toggled id=%s completed=%s", task.id, task.is_completed)
            self._notify(TaskChange(ChangeKind.TOGGLED, task))
            return True

    def delete(self, task_id: str) -> bool:
        with self._lock:
            idx = self._index_of(task_id)
            if idx < 0:
                logger.debug("delete ignored: unknown id=%s", task_id)
                return False
            task = self._tasks.pop(idx)
            logger.debug("Task deleted id=%s", task.id)
            self._notify(TaskChange(ChangeKind.DELETED, task))
            return True

    # ---- subscriptions ----

    def subscribe(self, listener: TaskListener) -> Unsubscribe:
        """
        Register `listener` for change notifications.

        Returns a handle that deregisters it; calling the handle twice is harmless.
        """
        with self._lock:
            key = next(self._listener_seq)
            self._listeners[key] = listener
            logger.debug("Listener subscribed key=%d total=%d", key, len(self._listeners))

        def _unsubscribe() -> None:
            with self._lock:
                if self._listeners.pop(key, None) is not None:
                    logger.debug("Listener unsubscribed key=%d", key)

        return _unsubscribe

    @property
    def listener_count(self) -> int:
        with self._lock:
            return len(self._listeners)

    # ---- internals ----

    def _index_of(self, task_id: str) -> int:
        for i, task in enumerate(self._tasks):
            if task.id == task_id:
                return i
        return -1

    def _highest_numeric_id(self) -> int:
        highest = 0
        for task_id in self._issued_ids:
            # isdigit() also accepts "²"; only plain ASCII decimals count.
            if not (task_id.isascii() and task_id.isdecimal()):
                continue
            try:
                value = int(task_id)
            except ValueError:
                logger.warning("Seed id too long to use as a counter base (%d digits)", len(task_id))
                continue
            highest = max(highest, value)
        return highest

    def _next_id(self) -> str:
        # Ids of deleted tasks stay reserved for the whole session.
        while True:
            candidate = str(next(self._id_counter))
            if candidate not in self._issued_ids:
                self._issued_ids.add(candidate)
                return candidate

    def _notify(self, change: TaskChange) -> None:
        # Copy: listeners may (un)subscribe while being notified.
        for listener in list(self._listeners.values()):
            try:
                listener(change)
            except Exception:
                logger.exception("Task listener failed on %s id=%s", change.kind, change.task.id)
