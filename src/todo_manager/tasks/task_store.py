# src/todo_manager/tasks/task_store.py

from __future__ import annotations

import logging
import os
import shutil
from collections.abc import Iterable
from pathlib import Path

from .task_models import Task, parse_all

logger = logging.getLogger(__name__)


def render_tasks(tasks: Iterable[Task]) -> str:
    """File contents for `tasks`: one canonical line each, deleted tasks omitted."""
    return "".join(f"{t.to_text()}\n" for t in tasks if not t.deleted)


class TodoFile:
    """
    A todo.txt file on disk.

    Each call reads or writes the whole file; nothing is cached between calls.
    """

    def __init__(self, path: str | Path = "todo.txt") -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self, *, missing_ok: bool = False) -> list[Task]:
        try:
            raw = self._path.read_text("utf-8")
        except FileNotFoundError:
            if not missing_ok:
                raise
            logger.debug("Task file %s does not exist yet.", self._path)
            raw = ""
        tasks = parse_all(raw)
        logger.debug("Loaded %d tasks from %s", len(tasks), self._path)
        return tasks

    def save(self, tasks: Iterable[Task]) -> None:
        contents = render_tasks(tasks)
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self._path.with_name(self._path.name + ".tmp")
        tmp.write_text(contents, "utf-8")
        os.replace(tmp, self._path)
        logger.debug("Wrote %d lines to %s", contents.count("\n"), self._path)

    def backup(self) -> Path | None:
        """Copy the file to <name>.bak. Returns None if there is nothing to back up."""
        if not self._path.exists():
            return None
        dest = self._path.with_name(self._path.name + ".bak")
        shutil.copyfile(self._path, dest)
        logger.info("Backed up original file %s as %s", self._path, dest)
        return dest

    def archive_file(self) -> TodoFile:
        """Sibling file that receives archived (completed) tasks: todo.txt -> todo-done.txt."""
        name = self._path.name
        if name.endswith(".txt"):
            name = name[: -len(".txt")] + "-done.txt"
        else:
            name = name + "-done"
        return TodoFile(self._path.with_name(name))
