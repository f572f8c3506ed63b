# src/taskkeeper/cli/commands.py

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable, Sequence
from typing import cast

from ..core.state import VIEWS, AppState
from ..tasks.task_models import Task

CommandEmitter = Callable[[str], None]
CommandHandler2 = Callable[[AppState, str], str]
CommandHandler3 = Callable[[AppState, str, CommandEmitter | None], str]
CommandHandler = CommandHandler2 | CommandHandler3

logger = logging.getLogger(__name__)

EMPTY_LIST_TEXT = "No tasks yet! Add one using /add <title>."
ID_PREFIX = "id:"


class CommandRegistry:
    """Slash-command registry used by the console connector (/help, /add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(
        self,
        state: AppState,
        line: str,
        emit: CommandEmitter | None = None,
    ) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        name, _, arg = line[1:].strip().partition(" ")
        if not name:
            return "Empty command. Use /help to list available commands."

        name = name.lower()
        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            nparams = len(inspect.signature(handler).parameters)
        except (TypeError, ValueError):
            nparams = 3

        if nparams >= 3:
            h3 = cast(CommandHandler3, handler)
            return h3(state, arg.strip(), emit)

        h2 = cast(CommandHandler2, handler)
        return h2(state, arg.strip())

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


# ---- rendering ----


def render_task(position: int, task: Task) -> str:
    mark = "x" if task.is_completed else " "
    return f"{position}. [{mark}] {task.title}  (id {task.id})"


def render_tasks(tasks: Sequence[Task]) -> str:
    if not tasks:
        return EMPTY_LIST_TEXT
    return "\n".join(render_task(i, t) for i, t in enumerate(tasks, start=1))


def resolve_task(tasks: Sequence[Task], ref: str) -> Task | None:
    """
    Resolve a user reference to a task.

    "id:<id>" matches by id; a bare number is a 1-based position in the list.
    """
    ref = ref.strip()
    if ref.lower().startswith(ID_PREFIX):
        wanted = ref[len(ID_PREFIX) :].strip()
        return next((t for t in tasks if t.id == wanted), None)
    if ref.isdigit():
        pos = int(ref)
        if 1 <= pos <= len(tasks):
            return tasks[pos - 1]
    return None


# ---- handlers ----


def _emit_choices(state: AppState, emit: CommandEmitter | None) -> None:
    """Show the list so the user can pick a position for the next try."""
    if emit is not None:
        emit(render_tasks(state.task_store.snapshot()))


def cmd_help(state: AppState, arg: str) -> str:
    return registry.build_help()


def cmd_list(state: AppState, arg: str) -> str:
    return render_tasks(state.task_store.snapshot())


def cmd_add(state: AppState, arg: str) -> str:
    task = state.task_store.add(arg)
    if task is None:
        return "Usage: /add <title> (title must not be blank)."
    return f'Added task "{task.title}".'


def cmd_toggle(state: AppState, arg: str, emit: CommandEmitter | None = None) -> str:
    if not arg:
        _emit_choices(state, emit)
        return "Usage: /done <n> or /done id:<id>."
    task = resolve_task(state.task_store.snapshot(), arg)
    if task is None or not state.task_store.toggle_completion(task.id):
        return f"No task matches {arg!r}."
    updated = state.task_store.get(task.id)
    done = updated.is_completed if updated is not None else not task.is_completed
    return f'Task "{task.title}" marked {"done" if done else "not done"}.'


def cmd_delete(state: AppState, arg: str, emit: CommandEmitter | None = None) -> str:
    if not arg:
        _emit_choices(state, emit)
        return "Usage: /del <n> or /del id:<id>."
    task = resolve_task(state.task_store.snapshot(), arg)
    if task is None or not state.task_store.delete(task.id):
        return f"No task matches {arg!r}."
    return f'Task "{task.title}" deleted'


def cmd_view(state: AppState, arg: str) -> str:
    """
    /view           -> show current view
    /view tasks     -> task list
    /view settings  -> settings page
    """
    if not arg:
        return f"Current view: {state.selected_view}. Use /view tasks or /view settings."

    view = arg.lower()
    if view not in VIEWS:
        return "Usage: /view tasks or /view settings."

    state.selected_view = view  # type: ignore[assignment]
    if view == "settings":
        return cmd_status(state, "")
    return render_tasks(state.task_store.snapshot())


def cmd_status(state: AppState, arg: str) -> str:
    tasks = state.task_store.snapshot()
    done = sum(1 for t in tasks if t.is_completed)
    app_name = state.settings.app_name
    return (
        "Status:\n"
        f"  App: {app_name}\n"
        f"  View: {state.selected_view}\n"
        f"  Tasks: {len(tasks)} ({done} done, {len(tasks) - done} open)"
    )


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("list", cmd_list, help_text="Show all tasks.", aliases=["ls"])
registry.register("add", cmd_add, help_text="Add a task: /add <title>. Plain text also adds.")
registry.register(
    "done", cmd_toggle, help_text="Toggle completion: /done <n> | /done id:<id>.", aliases=["toggle"]
)
registry.register("del", cmd_delete, help_text="Delete a task: /del <n> | /del id:<id>.", aliases=["rm"])
registry.register("view", cmd_view, help_text="Switch view: /view tasks | /view settings.")
registry.register("status", cmd_status, help_text="Show task counts and current view.")
