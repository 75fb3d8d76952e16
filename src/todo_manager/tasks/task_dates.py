# src/todo_manager/tasks/task_dates.py

from __future__ import annotations

import logging
import re
from datetime import date, timedelta

from .task_models import format_date

logger = logging.getLogger(__name__)

_RELATIVE_DUE_RE = re.compile(r"\bdue:([A-Za-z]+)\b")

WEEKDAYS = ("monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday")


def resolve_relative_date(word: str, reference_date: date) -> date | None:
    """
    Map a relative date word to a concrete date.

    today -> reference_date, tomorrow/tom -> +1 day, weekday names (or a prefix
    of at least 3 letters) -> the next such day strictly after reference_date.
    Unknown words return None.
    """
    word = word.lower()
    if word == "today":
        return reference_date
    if word in ("tomorrow", "tom"):
        return reference_date + timedelta(days=1)
    if len(word) < 3:
        return None

    for weekday, name in enumerate(WEEKDAYS):
        if name.startswith(word):
            ahead = (weekday - reference_date.weekday()) % 7 or 7
            return reference_date + timedelta(days=ahead)
    return None


def rewrite_relative_dates(text: str, reference_date: date) -> str:
    """Replace due:today / due:tomorrow / due:<weekday> with due:YYYY-MM-DD."""

    def _sub(m: re.Match[str]) -> str:
        resolved = resolve_relative_date(m.group(1), reference_date)
        if resolved is None:
            return m.group(0)
        return f"due:{format_date(resolved)}"

    rewritten = _RELATIVE_DUE_RE.sub(_sub, text)
    if rewritten != text:
        logger.info('Rewrote task from "%s" to "%s"', text, rewritten)
    return rewritten
