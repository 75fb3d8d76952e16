# src/todo_manager/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the task commands.

Interactive editing and fuzzy finding are external processes. Commands depend
on these Protocols instead, so tests can plug in fakes.
"""

from typing import Protocol


class ConnectorError(RuntimeError):
    """An external editor/finder could not be run or exited with an error."""


class TaskEditor(Protocol):
    """Lets the user rewrite one task line; returns the new single-line text."""
    def edit(self, text: str) -> str: ...


class TaskFinder(Protocol):
    """
    Shows a numbered listing ("001 task...") and returns the 0-based indexes the
    user picked. An empty list means nothing was selected.
    """
    def present(self, listing: str) -> list[int]: ...
