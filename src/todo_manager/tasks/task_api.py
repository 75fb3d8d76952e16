# src/todo_manager/tasks/task_api.py

from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import date, timedelta

from ..core.state import AppState
from .task_dates import rewrite_relative_dates
from .task_models import Task, new_task, parse_task
from .task_sort import is_separator, make_marker, sort_by_date

logger = logging.getLogger(__name__)


class TaskLookupError(LookupError):
    """A task number or hash does not refer to a task in the current list."""


def format_numbered(number: int, task: Task) -> str:
    return f"{number:03d} {task.to_text()}"


def list_tasks(tasks: Sequence[Task]) -> str:
    """Numbered listing, one task per line, numbers starting at 1."""
    return "".join(f"{format_numbered(i + 1, t)}\n" for i, t in enumerate(tasks))


def numbers_to_tasks(raw_numbers: str, tasks: Sequence[Task]) -> tuple[list[Task], list[int]]:
    """
    Resolve a string of 1-based task numbers ("1 2 6").

    Returns the tasks and their 0-based indexes, in the order given.
    """
    selected: list[Task] = []
    indexes: list[int] = []
    for raw in raw_numbers.split():
        try:
            index = int(raw) - 1
        except ValueError as e:
            raise TaskLookupError(f"Not a task number: {raw!r}") from e
        if index < 0 or index >= len(tasks):
            raise TaskLookupError(f"Cannot find task with number {index + 1}")
        selected.append(tasks[index])
        indexes.append(index)
    return selected, indexes


def hash_to_task(tasks: Sequence[Task], needle: str) -> tuple[int, Task]:
    for i, task in enumerate(tasks):
        if task.hash == needle:
            return i, task
    raise TaskLookupError(f"No task found with hash {needle}")


def quick_view(tasks: Sequence[Task], today: date, window_days: int = 7) -> str:
    """
    Incomplete tasks due within `window_days` on either side of today.

    A marker due yesterday is sorted in with the tasks: overdue work lands
    above it, today and later below. Numbers refer to the unsorted list.
    """
    lower = today - timedelta(days=window_days)
    upper = today + timedelta(days=window_days)

    numbered = [*tasks, make_marker(today - timedelta(days=1))]

    lines: list[str] = []
    for task in sort_by_date(numbered):
        if is_separator(task):
            lines.append(task.to_text())
            continue
        if task.due_date is None or task.completed:
            continue
        if not (lower < task.due_date <= upper):
            continue
        number, _ = hash_to_task(numbered, task.hash)
        lines.append(format_numbered(number + 1, task))
    return "".join(f"{line}\n" for line in lines)


# ---- operations on the loaded task file ----


def _backup(state: AppState) -> None:
    if state.backup:
        state.store.backup()


def _save(state: AppState) -> None:
    state.store.save(state.tasks)


def add_task(state: AppState, text: str) -> Task:
    text = text.strip()
    if not text:
        raise ValueError("You must specify a task")

    task = new_task(rewrite_relative_dates(text, state.today), state.today)

    _backup(state)
    state.tasks.append(task)
    _save(state)

    logger.info("Successfully added task %s", task)
    return task


def mark_tasks(state: AppState, raw_numbers: str, complete: bool) -> str:
    _, indexes = numbers_to_tasks(raw_numbers, state.tasks)
    if not indexes:
        raise TaskLookupError("You must provide at least one task number")

    _backup(state)
    for index in indexes:
        task = state.tasks[index]
        task.completed = complete
        task.rehash()
    _save(state)

    logger.info(
        "Marked %d task(s) as %s", len(indexes), "complete" if complete else "incomplete"
    )
    return "".join(f"{format_numbered(i + 1, state.tasks[i])}\n" for i in indexes)


def remove_tasks(state: AppState, raw_numbers: str) -> str:
    selected, indexes = numbers_to_tasks(raw_numbers, state.tasks)
    if not indexes:
        raise TaskLookupError("You must provide at least one task number")

    _backup(state)
    # Logical delete keeps the numbering of the other tasks intact until the file is rewritten.
    for index in indexes:
        state.tasks[index].deleted = True
    _save(state)

    logger.info("Removed %d task(s)", len(indexes))
    return "".join(f"{format_numbered(i + 1, t)}\n" for i, t in zip(indexes, selected))


def archive_tasks(state: AppState) -> list[Task]:
    """Move completed tasks to the -done file; returns the archived tasks."""
    archive = state.store.archive_file()
    archived = archive.load(missing_ok=True)

    _backup(state)

    moved = [t for t in state.tasks if t.completed and not t.deleted]
    remaining = [t for t in state.tasks if not t.completed]

    archive.save([*archived, *moved])
    state.tasks = remaining
    _save(state)

    for task in moved:
        logger.info("Archived %s", task)
    return moved


def edit_tasks(state: AppState, raw_numbers: str) -> list[Task]:
    _, indexes = numbers_to_tasks(raw_numbers, state.tasks)
    if not indexes:
        raise TaskLookupError("You must provide at least one task number")

    _backup(state)

    edited: list[Task] = []
    for n, index in enumerate(indexes, start=1):
        logger.info(
            "Editing task %d/%d (%d): %s", n, len(indexes), index + 1, state.tasks[index]
        )
        text = state.editor.edit(state.tasks[index].to_text())
        task = parse_task(text)
        if not task.description:
            logger.warning("Edited task %d is empty; keeping the original.", index + 1)
            continue
        logger.info("New contents of task %d: %s", index + 1, task)
        state.tasks[index] = task
        edited.append(task)

    _save(state)
    return edited


def find_tasks(state: AppState) -> str:
    indexes = state.finder.present(list_tasks(state.tasks))

    lines: list[str] = []
    for index in indexes:
        if index < 0 or index >= len(state.tasks):
            raise TaskLookupError(f"Cannot find task with number {index + 1}")
        lines.append(format_numbered(index + 1, state.tasks[index]))

    selected = " ".join(str(i + 1) for i in indexes)
    return "".join(f"{line}\n" for line in lines) + f"Selected: {selected}"
