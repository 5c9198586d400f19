"""Rendering of todos to the console."""

from __future__ import annotations

from collections.abc import Sequence

from rich.console import Console
from rich.text import Text

from todolist.models import Todo

EMPTY_MESSAGE = "No todos to display."
COMPLETED_STYLE = "green"
PENDING_STYLE = "yellow"


def format_todo(todo: Todo) -> str:
    """Return the display line for a single todo."""
    completed = "true" if todo.completed else "false"
    return (
        f"ID: {todo.id}, Task: {todo.task}, Category: {todo.category}, "
        f"Deadline: {todo.deadline.isoformat()}, Completed: {completed}"
    )


def display_todos(todos: Sequence[Todo], console: Console, color: bool = True) -> None:
    """Print todos one per line, never wrapped at the console width.

    With ``color`` enabled, completed todos are shown in green and pending
    ones (and the empty notice) in yellow.
    """
    if not todos:
        console.print(Text(EMPTY_MESSAGE, style=PENDING_STYLE if color else ""), soft_wrap=True)
        return

    for todo in todos:
        style = ""
        if color:
            style = COMPLETED_STYLE if todo.completed else PENDING_STYLE
        console.print(Text(format_todo(todo), style=style), soft_wrap=True)
