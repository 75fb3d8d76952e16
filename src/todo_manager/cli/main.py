# src/todo_manager/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState for the selected todo.txt file, runs one
subcommand and prints its output to stdout. Diagnostics go to stderr.
"""

from __future__ import annotations

import argparse
import dataclasses
import logging
import sys
from pathlib import Path

from ..cli.bootstrap import create_initial_state
from ..cli.commands import UnknownCommandError, registry
from ..config import get_settings
from ..core.ports import ConnectorError
from ..logging_setup import setup_logging
from ..tasks.task_api import TaskLookupError

logger = logging.getLogger(__name__)

# Commands that may run before the task file exists.
_CREATES_FILE = {"add", "a", "help", "h"}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="todo", description="Manage a todo.txt task list.")
    parser.add_argument("-f", dest="filename", help="Input filename (default: todo.txt)")
    parser.add_argument(
        "-b",
        dest="no_backup",
        action="store_true",
        help="Disables automatic backup. (dangerous!)",
    )
    parser.add_argument("-v", dest="verbose", action="count", default=0, help="More logging.")
    parser.add_argument("command", nargs="?", default="quick", help="Subcommand (see 'help').")
    parser.add_argument("args", nargs=argparse.REMAINDER, help="Subcommand arguments.")
    return parser


def main(argv: list[str] | None = None) -> int:
    opts = build_parser().parse_args(argv)
    settings = get_settings()

    overrides: dict[str, object] = {}
    if opts.filename:
        overrides["todo_file"] = Path(opts.filename)
    if opts.no_backup:
        overrides["backup"] = False
    if overrides:
        settings = dataclasses.replace(settings, **overrides)

    level_name = str(getattr(settings, "log_level", "WARNING")).upper()
    console_level = getattr(logging, level_name, logging.WARNING)
    if opts.verbose:
        console_level = logging.INFO if opts.verbose == 1 else logging.DEBUG
    setup_logging(log_dir=settings.log_dir, console_level=console_level)

    command = opts.command.lower()
    try:
        state = create_initial_state(settings=settings, missing_ok=command in _CREATES_FILE)
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Unable to open %s: %s", settings.todo_file, e)
        return 1

    try:
        output = registry.handle(state, command, list(opts.args))
    except UnknownCommandError:
        logger.error("Unknown subcommand %s", opts.command)
        print(registry.build_help(), file=sys.stderr)
        return 2
    except (TaskLookupError, ValueError) as e:
        logger.error("Error: %s", e)
        return 1
    except ConnectorError as e:
        logger.error("%s", e)
        return 1
    except OSError:
        logger.exception("Unable to update %s", settings.todo_file)
        return 1

    if output:
        print(output.rstrip("\n"))
    return 0


if __name__ == "__main__":
    sys.exit(main())
