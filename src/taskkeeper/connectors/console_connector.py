# src/taskkeeper/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime

from ..cli.commands import CommandRegistry, render_tasks
from ..cli.commands import registry as command_registry
from ..core.state import AppState
from ..tasks.task_models import TaskChange

logger = logging.getLogger(__name__)

InputFn = Callable[[str], str]


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


def _print_ts(text: str) -> None:
    print(f"[{_ts_local()}] {text}", flush=True)


def run_console_loop(
    state: AppState,
    *,
    input_fn: InputFn = input,
    commands: CommandRegistry | None = None,
) -> None:
    """
    Interactive task list.

    Subscribes to the store for the lifetime of the loop and re-renders the
    list after every change while the "tasks" view is selected.
    """
    commands = commands or command_registry
    app_name = state.settings.app_name

    def on_change(change: TaskChange) -> None:
        logger.debug("Store changed: %s id=%s", change.kind, change.task.id)
        if state.selected_view == "tasks":
            print(render_tasks(state.task_store.snapshot()), flush=True)

    unsubscribe = state.task_store.subscribe(on_change)
    logger.info("Console connector started.")

    _print_ts(f"[{app_name}] Type a title to add a task. Use /help for commands. Use /exit to quit.")
    print(render_tasks(state.task_store.snapshot()), flush=True)

    try:
        while True:
            try:
                line = input_fn(">>> ").strip()
            except EOFError:
                logger.info("Console EOF received, exiting.")
                break
            except KeyboardInterrupt:
                logger.info("Console KeyboardInterrupt, exiting.")
                print()
                break

            if not line:
                continue

            if line.lower() in ("/exit", "/quit"):
                logger.info("Console exit command received.")
                break

            if not line.startswith("/"):
                line = f"/add {line}"

            try:
                reply = commands.handle(state, line, emit=_print_ts)
            except Exception:
                logger.exception("Command handler crashed.")
                reply = "Internal error while handling a command."

            if reply is not None:
                _print_ts(reply)
    finally:
        unsubscribe()
        logger.info("Console connector finished.")
