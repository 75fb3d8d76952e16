# src/todo_manager/connectors/editor.py

from __future__ import annotations

import contextlib
import logging
import os
import shlex
import subprocess
import tempfile
from pathlib import Path

from ..core.ports import ConnectorError

logger = logging.getLogger(__name__)


class ExternalEditor:
    """
    TaskEditor backed by an interactive editor process.

    The task text is written to a private temp file, the editor runs attached
    to the current terminal, and the saved file is read back. Newlines in the
    result are folded into spaces so a task stays on one line.
    """

    def __init__(self, command: str = "editor") -> None:
        self._argv = shlex.split(command) or ["editor"]

    def edit(self, text: str) -> str:
        fd, name = tempfile.mkstemp(prefix="task.", suffix=".txt")
        tmp = Path(name)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(text)

            argv = [*self._argv, str(tmp)]
            logger.debug("Running editor: %s", argv)
            try:
                subprocess.run(argv, check=True)
            except FileNotFoundError as e:
                raise ConnectorError(f"Unable to execute editor {self._argv[0]!r}") from e
            except subprocess.CalledProcessError as e:
                raise ConnectorError(
                    f"Editor {self._argv[0]!r} exited with status {e.returncode}"
                ) from e

            raw = tmp.read_text("utf-8")
        finally:
            with contextlib.suppress(FileNotFoundError):
                tmp.unlink()

        return " ".join(raw.splitlines()).strip()
