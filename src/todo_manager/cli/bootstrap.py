# src/todo_manager/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- takes the settings once,
- wires the task file, editor and finder into AppState,
- loads the task list.
"""

from __future__ import annotations

import logging
from datetime import date

from ..config import get_settings
from ..connectors.editor import ExternalEditor
from ..connectors.finder import FzfFinder
from ..core.state import AppState
from ..tasks.task_store import TodoFile

logger = logging.getLogger(__name__)


def create_initial_state(
    *,
    settings=None,
    today: date | None = None,
    missing_ok: bool = False,
) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    store = TodoFile(settings.todo_file)
    state = AppState(
        settings=settings,
        store=store,
        editor=ExternalEditor(settings.editor),
        finder=FzfFinder(settings.finder),
        backup=bool(settings.backup),
        today=today or date.today(),
    )

    state.tasks = store.load(missing_ok=missing_ok)
    logger.debug("Loaded %d tasks from %s", len(state.tasks), store.path)
    return state
