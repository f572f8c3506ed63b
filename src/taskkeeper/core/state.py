# src/taskkeeper/core/state.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from ..config import Settings
from .ports import TaskRepo

View = Literal["tasks", "settings"]
VIEWS: tuple[View, ...] = ("tasks", "settings")


@dataclass
class AppState:
    # Store Settings on the state for easy access in commands.
    settings: Settings

    task_store: TaskRepo

    # Presentation-local state; the store knows nothing about it.
    selected_view: View = "tasks"
