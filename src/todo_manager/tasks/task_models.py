# src/todo_manager/tasks/task_models.py

"""
Task record and the todo.txt line format.

Canonical layout of one line:

    [x ][(A) ][COMPLETION_DATE ][CREATION_DATE ]description +tag @ctx due:YYYY-MM-DD

Parsing never fails: anything that does not look like a marker, priority or
date simply stays in the description.
"""

from __future__ import annotations

import hashlib
import re
from dataclasses import dataclass, replace
from datetime import date, datetime

SEPARATOR = "+=+=+=+=+="

_DATE_FORMAT = "%Y-%m-%d"
_DATE_RE = re.compile(r"^([0-9]{4}-[0-9]{2}-[0-9]{2})(?:\s|$)")
_DUE_RE = re.compile(r"due:([0-9]{4}-[0-9]{2}-[0-9]{2})")
_PRIORITY_RE = re.compile(r"\(([A-Z])\)")


def _parse_date(raw: str) -> date | None:
    try:
        parsed = datetime.strptime(raw, _DATE_FORMAT).date()
    except ValueError:
        return None
    # Years below 1000 would be written back with fewer than four digits.
    if parsed.year < 1000:
        return None
    return parsed


def format_date(d: date) -> str:
    return f"{d.year}-{d.month:02d}-{d.day:02d}"


@dataclass(slots=True)
class Task:
    completed: bool = False
    priority: str = ""
    completion_date: date | None = None
    creation_date: date | None = None
    description: str = ""
    due_date: date | None = None
    deleted: bool = False
    hash: str = ""

    def to_text(self) -> str:
        parts: list[str] = []
        if self.completed:
            parts.append("x ")
        if self.priority:
            parts.append(f"({self.priority}) ")
        if self.completion_date is not None:
            parts.append(format_date(self.completion_date) + " ")
        if self.creation_date is not None:
            parts.append(format_date(self.creation_date) + " ")

        description = self.description
        # Marker tasks carry a due tag only for sorting; drop it on output.
        if description.startswith(SEPARATOR):
            description = description.split()[0]
        parts.append(description)
        return "".join(parts)

    def rehash(self) -> Task:
        self.hash = compute_hash(self.to_text())
        return self

    def __str__(self) -> str:
        return self.to_text()


def compute_hash(text: str) -> str:
    return hashlib.sha256(text.encode("utf-8")).hexdigest()


def parse_task(raw: str) -> Task:
    """
    Parse one todo.txt line into a Task.

    Blank input yields an empty Task (description ""), which callers treat as
    "no task".
    """
    task = Task()
    if not raw.strip():
        return task

    if raw.startswith("x "):
        task.completed = True
        raw = raw[2:]

    fields = raw.split()
    if fields:
        m = _PRIORITY_RE.fullmatch(fields[0])
        if m and raw.startswith(fields[0]):
            task.priority = m.group(1)
            raw = raw[len(fields[0]) + 1 :]

    found: list[date] = []
    for _ in range(2):
        m = _DATE_RE.match(raw)
        if not m:
            break
        parsed = _parse_date(m.group(1))
        if parsed is None:
            break
        found.append(parsed)
        raw = raw[len(m.group(1)) + 1 :]

    # A lone leading date is the creation date.
    if len(found) == 1:
        task.creation_date = found[0]
    elif len(found) == 2:
        task.completion_date, task.creation_date = found

    task.description = raw

    due = _DUE_RE.search(raw)
    if due:
        task.due_date = _parse_date(due.group(1))

    return task.rehash()


def parse_all(contents: str) -> list[Task]:
    """Parse a whole file; blank lines are dropped, order is preserved."""
    contents = contents.replace("\r", "")
    tasks: list[Task] = []
    for line in contents.split("\n"):
        task = parse_task(line)
        if task.description:
            tasks.append(task)
    return tasks


def new_task(text: str, today: date) -> Task:
    """Parse user-supplied text as a fresh task created on `today`."""
    task = parse_task(text)
    return replace(task, creation_date=today).rehash()
