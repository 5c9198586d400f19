"""Data models for todolist."""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from datetime import date


@dataclass(frozen=True)
class Todo:
    """A single task record.

    Records are immutable; every change produces a new ``Todo`` carrying the
    same ``id``.
    """

    id: int
    task: str
    category: str
    deadline: date
    completed: bool = False

    def complete(self) -> Todo:
        """Return a copy of this todo marked as completed."""
        return replace(self, completed=True)


DATE_FORMAT = "yyyy-MM-dd"
DATE_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")
ID_RE = re.compile(r"[+-]?[0-9]+")


def parse_deadline(text: str) -> date | None:
    """Parse a ``yyyy-MM-dd`` date, returning None if it is not valid."""
    if not DATE_RE.fullmatch(text):
        return None
    try:
        return date.fromisoformat(text)
    except ValueError:
        return None


def parse_id(text: str) -> int:
    """Parse a todo id typed by the user.

    Anything that is not a plain ASCII integer maps to -1, which never
    matches a stored todo.
    """
    text = text.strip()
    if not ID_RE.fullmatch(text):
        return -1
    return int(text)
