"""Persistence for todolist.

The store is a plain text file with one todo per line:

    id,task,category,deadline,completed

``deadline`` is written as ``yyyy-MM-dd`` and ``completed`` as ``true`` or
``false``. Fields are not escaped, so a comma inside a task or category
breaks that record on the next load.
"""

from __future__ import annotations

import os
import tempfile
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path

from todolist.models import ID_RE, Todo, parse_deadline

FIELD_SEPARATOR = ","
FIELD_COUNT = 5


@dataclass
class SkippedLine:
    """A line from the store that could not be parsed."""

    lineno: int
    text: str


@dataclass
class LoadResult:
    """Outcome of reading the store."""

    todos: tuple[Todo, ...] = ()
    found: bool = True
    skipped: list[SkippedLine] = field(default_factory=list)


def format_line(todo: Todo) -> str:
    """Serialise a todo to a single store line (without newline)."""
    return FIELD_SEPARATOR.join(
        [
            str(todo.id),
            todo.task,
            todo.category,
            todo.deadline.isoformat(),
            "true" if todo.completed else "false",
        ]
    )


def parse_line(line: str) -> Todo | None:
    """Parse a store line into a todo.

    Returns None unless the line has exactly five fields and each of the id,
    deadline and completed fields converts cleanly.
    """
    fields = line.split(FIELD_SEPARATOR)
    if len(fields) != FIELD_COUNT:
        return None

    raw_id, task, category, raw_deadline, raw_completed = fields

    if not ID_RE.fullmatch(raw_id):
        return None

    deadline = parse_deadline(raw_deadline)
    if deadline is None:
        return None

    completed = _parse_bool(raw_completed)
    if completed is None:
        return None

    return Todo(
        id=int(raw_id),
        task=task,
        category=category,
        deadline=deadline,
        completed=completed,
    )


def _parse_bool(text: str) -> bool | None:
    lowered = text.lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    return None


def load_todos(path: Path) -> LoadResult:
    """Load todos from the store.

    A missing file yields an empty collection with ``found`` set to False.
    Lines that fail to decode as UTF-8 or to parse are left out of ``todos``
    and listed in ``skipped``; they never abort the load.
    """
    if not path.exists():
        return LoadResult(found=False)

    todos: list[Todo] = []
    skipped: list[SkippedLine] = []

    with open(path, "rb") as f:
        for lineno, raw in enumerate(f, start=1):
            try:
                line = raw.decode("utf-8").rstrip("\r\n")
            except UnicodeDecodeError:
                text = raw.decode("utf-8", errors="replace").rstrip("\r\n")
                skipped.append(SkippedLine(lineno, text))
                continue
            todo = parse_line(line)
            if todo is None:
                skipped.append(SkippedLine(lineno, line))
            else:
                todos.append(todo)

    return LoadResult(todos=tuple(todos), found=True, skipped=skipped)


def save_todos(todos: Sequence[Todo], path: Path) -> None:
    """Rewrite the store with the given todos.

    The content is written to a temporary file next to ``path`` and then
    renamed over it, so an interrupted save leaves the old file intact.
    Raises OSError if the location is not writable.
    """
    directory = path.parent
    directory.mkdir(parents=True, exist_ok=True)

    fd, tmp_name = tempfile.mkstemp(dir=directory, prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as f:
            for todo in todos:
                f.write(format_line(todo) + "\n")
        os.replace(tmp_name, path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise
