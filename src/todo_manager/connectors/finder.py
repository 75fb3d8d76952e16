# src/todo_manager/connectors/finder.py

from __future__ import annotations

import logging
import shlex
import subprocess

from ..core.ports import ConnectorError

logger = logging.getLogger(__name__)

# fzf: 1 = no match, 130 = interrupted with Ctrl-C / Esc.
_FZF_CANCEL_CODES = (1, 130)


def parse_selection(output: str) -> list[int]:
    """
    Turn finder output ("003 task...\\n007 task...") into 0-based indexes.

    Raises ConnectorError for a line that does not start with a number.
    """
    numbers: list[int] = []
    for line in output.splitlines():
        fields = line.split()
        if not fields:
            continue
        try:
            numbers.append(int(fields[0]) - 1)
        except ValueError as e:
            raise ConnectorError(f"Unable to convert {fields[0]!r} to a task number") from e
    return numbers


class FzfFinder:
    """TaskFinder that pipes the numbered listing through fzf in multi-select mode."""

    def __init__(self, command: str = "fzf") -> None:
        self._argv = [*(shlex.split(command) or ["fzf"]), "-m", "--tac"]

    def present(self, listing: str) -> list[int]:
        logger.debug("Running finder: %s", self._argv)
        try:
            proc = subprocess.run(
                self._argv,
                input=listing,
                stdout=subprocess.PIPE,
                text=True,
                encoding="utf-8",
            )
        except FileNotFoundError as e:
            raise ConnectorError(f"Unable to start {self._argv[0]!r}") from e

        if proc.returncode in _FZF_CANCEL_CODES:
            logger.info("Finder closed without a selection.")
            return []
        if proc.returncode != 0:
            raise ConnectorError(f"{self._argv[0]!r} exited with status {proc.returncode}")

        return parse_selection(proc.stdout)
