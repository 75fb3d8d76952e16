# src/todo_manager/tasks/task_sort.py

"""
Date ordering for task lists.

Tasks sort by due date (undated first). A marker task, whose description
starts with SEPARATOR, always goes last among tasks due the same day, so a
view can be split at a date boundary with a single sort.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date

from .task_models import SEPARATOR, Task, format_date, parse_task

MARKER_GLYPHS = "+=" * 40 + "+"


def is_separator(task: Task) -> bool:
    return task.description.startswith(SEPARATOR)


def make_marker(due: date) -> Task:
    return parse_task(f"{MARKER_GLYPHS} due:{format_date(due)}")


def _date_key(task: Task) -> tuple[date, bool]:
    return (task.due_date or date.min, is_separator(task))


def sort_by_date(tasks: Iterable[Task], *, in_place: bool = False) -> list[Task]:
    """
    Order tasks by due date.

    in_place=False returns a new list and leaves `tasks` alone (numbering based
    on the original order stays valid). in_place=True reorders the given list.
    Both are stable.
    """
    if in_place:
        if not isinstance(tasks, list):
            raise TypeError("in_place sorting requires a list")
        tasks.sort(key=_date_key)
        return tasks
    return sorted(tasks, key=_date_key)
