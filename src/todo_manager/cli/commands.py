# src/todo_manager/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..core.state import AppState
from ..tasks.task_api import (
    add_task,
    archive_tasks,
    edit_tasks,
    find_tasks,
    list_tasks,
    mark_tasks,
    quick_view,
    remove_tasks,
)

CommandHandler = Callable[[AppState, list[str]], str]

logger = logging.getLogger(__name__)


class UnknownCommandError(LookupError):
    pass


class CommandRegistry:
    """Subcommand registry: name + short aliases + one line of help each."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, tuple[list[str], str]] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = (aliases, help_text)
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def names(self) -> list[str]:
        return list(self._handlers)

    def handle(self, state: AppState, name: str, args: list[str]) -> str:
        """Run a command by name or alias and return its output text."""
        handler = self._handlers.get(name.lower())
        if handler is None:
            raise UnknownCommandError(f"Unknown subcommand {name}")
        logger.debug("Running command %s args=%s", name, args)
        return handler(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, (aliases, help_text) in self._help.items():
            label = name if not aliases else f"{name} ({', '.join(aliases)})"
            lines.append(f"  {label:<16} {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_quick(state: AppState, args: list[str]) -> str:
    days = int(getattr(state.settings, "quick_days", 7))
    return quick_view(state.tasks, state.today, window_days=days)


def cmd_list(state: AppState, args: list[str]) -> str:
    return list_tasks(state.tasks)


def cmd_find(state: AppState, args: list[str]) -> str:
    return find_tasks(state)


def cmd_add(state: AppState, args: list[str]) -> str:
    task = add_task(state, " ".join(args))
    return f"Added task {len(state.tasks):03d} {task}"


def cmd_do(state: AppState, args: list[str]) -> str:
    listing = mark_tasks(state, " ".join(args), complete=True)
    return "Marked the following tasks as complete:\n" + listing


def cmd_undo(state: AppState, args: list[str]) -> str:
    listing = mark_tasks(state, " ".join(args), complete=False)
    return "Marked the following tasks as incomplete:\n" + listing


def cmd_rm(state: AppState, args: list[str]) -> str:
    listing = remove_tasks(state, " ".join(args))
    return "Removed the following tasks:\n" + listing


def cmd_archive(state: AppState, args: list[str]) -> str:
    moved = archive_tasks(state)
    if not moved:
        return "No completed tasks to archive."
    lines = ["Archived the following tasks:"]
    lines.extend(t.to_text() for t in moved)
    return "\n".join(lines)


def cmd_edit(state: AppState, args: list[str]) -> str:
    edited = edit_tasks(state, " ".join(args))
    return "\n".join(f"Edited: {t}" for t in edited)


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h"])
registry.register(
    "quick",
    cmd_quick,
    help_text="List tasks due in the previous and next seven days. Default action.",
    aliases=["q"],
)
registry.register("list", cmd_list, help_text="List all tasks.", aliases=["l"])
registry.register("find", cmd_find, help_text="Interactively find task(s) with fzf.", aliases=["f"])
registry.register("add", cmd_add, help_text="Add a new task.", aliases=["a"])
registry.register("do", cmd_do, help_text="Mark the task(s) as complete.", aliases=["d"])
registry.register("undo", cmd_undo, help_text="Mark the task(s) as incomplete.", aliases=["u"])
registry.register("rm", cmd_rm, help_text="Permanently delete the task(s).", aliases=["r"])
registry.register(
    "archive",
    cmd_archive,
    help_text="Move all completed tasks to FILENAME-done.txt.",
    aliases=["ar"],
)
registry.register(
    "edit", cmd_edit, help_text="Edit the task(s) in the default editor.", aliases=["e"]
)
