# src/todo_manager/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Command-line flags override a copy (dataclasses.replace), never the globals.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

ENV_PREFIX = "TODO"

load_dotenv(override=False)


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _first_env(*names: str, default: str | None = None) -> str | None:
    for n in names:
        v = os.getenv(n)
        if v is not None and v.strip() != "":
            return v
    return default


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_path(name: str, default: Optional[Path]) -> Optional[Path]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- Task file ----
    todo_file: Path
    backup: bool

    # ---- External programs ----
    editor: str
    finder: str

    # ---- Views ----
    quick_days: int

    # ---- Logging ----
    log_level: str
    log_dir: Optional[Path]

    @staticmethod
    def from_env() -> "Settings":
        todo_file = _env_path(_k("FILE"), Path("todo.txt")) or Path("todo.txt")
        backup = _env_bool(_k("BACKUP"), True)

        # Same lookup order as git and friends: explicit override, then VISUAL, then EDITOR.
        editor = _first_env(_k("EDITOR"), "VISUAL", "EDITOR", default="editor") or "editor"
        finder = _env(_k("FINDER"), "fzf")

        quick_days = max(1, _env_int(_k("QUICK_DAYS"), 7))

        log_level = _env(_k("LOG_LEVEL"), "WARNING")
        log_dir = _env_path(_k("LOG_DIR"), None)

        return Settings(
            todo_file=todo_file,
            backup=backup,
            editor=editor,
            finder=finder,
            quick_days=quick_days,
            log_level=log_level,
            log_dir=log_dir,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
