# tests/conftest.py

from __future__ import annotations

from datetime import date
from pathlib import Path
from types import SimpleNamespace

import pytest

from todo_manager.core.state import AppState
from todo_manager.tasks.task_store import TodoFile

from .fakes import FakeEditor, FakeFinder

TODAY = date(2020, 8, 11)


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the commands.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment.
    """
    return SimpleNamespace(
        todo_file=tmp_path / "todo.txt",
        backup=True,
        editor="editor",
        finder="fzf",
        quick_days=7,
        log_level="WARNING",
        log_dir=None,
    )


@pytest.fixture()
def todo_file(settings: SimpleNamespace) -> Path:
    path: Path = settings.todo_file
    path.write_text(
        "(A) 2020-08-01 call mom due:2020-08-12\n"
        "2020-08-01 pay rent +home due:2020-08-09\n"
        "x 2020-08-10 2020-08-01 file taxes due:2020-08-10\n"
        "read a book\n",
        "utf-8",
    )
    return path


@pytest.fixture()
def state(settings: SimpleNamespace, todo_file: Path) -> AppState:
    """
    AppState wired with deterministic fakes and a fixed "today".

    NOTE: We keep the real TodoFile here because its on-disk format is part
    of what we want to test.
    """
    store = TodoFile(settings.todo_file)
    return AppState(
        settings=settings,
        store=store,
        editor=FakeEditor(),
        finder=FakeFinder(),
        backup=True,
        today=TODAY,
        tasks=store.load(),
    )
