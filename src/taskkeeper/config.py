# src/taskkeeper/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Nothing required at import time; every key has a default.
- Malformed values fall back to defaults instead of failing startup.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

ENV_PREFIX = "TASKKEEPER"

_TRUE = {"1", "true", "yes", "y", "on"}
_FALSE = {"0", "false", "no", "n", "off"}


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None or v.strip() == "" else v.strip()


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    val = raw.strip().lower()
    if val in _TRUE:
        return True
    if val in _FALSE:
        return False
    return default


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str

    # ---- Store ----
    seed_sample_tasks: bool

    # ---- Presentation ----
    console_enabled: bool

    # ---- Local data paths (ignored by git) ----
    data_dir: Path

    @property
    def log_file(self) -> Path:
        return self.data_dir / "taskkeeper.log"

    @staticmethod
    def from_env() -> Settings:
        return Settings(
            app_name=_env(_k("APP_NAME"), "Task Manager"),
            log_level=_env(_k("LOG_LEVEL"), "INFO").upper(),
            seed_sample_tasks=_env_bool(_k("SEED_SAMPLE_TASKS"), True),
            console_enabled=_env_bool(_k("CONSOLE_ENABLED"), True),
            data_dir=_env_path(_k("DATA_DIR"), Path(".local/taskkeeper")),
        )


_SETTINGS: Settings | None = None


def get_settings(*, reload: bool = False) -> Settings:
    """
    Return the process-wide Settings, loading .env on first use.

    .env is searched from the working directory upwards; real env vars win over it.
    """
    global _SETTINGS
    if _SETTINGS is None or reload:
        load_dotenv(find_dotenv(usecwd=True), override=False)
        _SETTINGS = Settings.from_env()
    return _SETTINGS
