# src/todo_manager/core/state.py

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

from ..tasks.task_models import Task
from ..tasks.task_store import TodoFile
from .ports import TaskEditor, TaskFinder


@dataclass
class AppState:
    # Settings are stored on the state so commands never read globals.
    settings: object

    store: TodoFile
    editor: TaskEditor
    finder: TaskFinder

    backup: bool = True
    today: date = field(default_factory=date.today)

    # Parse order of the file; task numbers shown to the user index into this.
    tasks: list[Task] = field(default_factory=list)
