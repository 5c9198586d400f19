"""Collection operations for todolist (pure functions, no I/O).

Every function takes the current collection and returns a new tuple; the
input sequence is never modified.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import replace
from datetime import date

from todolist.models import Todo

Todos = tuple[Todo, ...]


def next_id(todos: Sequence[Todo]) -> int:
    """Return the id for the next todo: highest existing id plus one."""
    return max((t.id for t in todos), default=0) + 1


def find_todo(todos: Sequence[Todo], todo_id: int) -> Todo | None:
    """Get a todo by ID."""
    for todo in todos:
        if todo.id == todo_id:
            return todo
    return None


def has_todo(todos: Sequence[Todo], todo_id: int) -> bool:
    """Check whether a todo with the given ID exists."""
    return find_todo(todos, todo_id) is not None


def add_todo(todos: Sequence[Todo], task: str, category: str, deadline: date) -> Todos:
    """Append a new pending todo."""
    return (*todos, Todo(next_id(todos), task, category, deadline))


def update_todo(
    todos: Sequence[Todo],
    todo_id: int,
    task: str,
    category: str,
    deadline: date,
) -> Todos:
    """Replace task, category and deadline of the matching todo.

    The id and completion flag are kept. An unknown id leaves the
    collection unchanged.
    """
    return tuple(
        replace(t, task=task, category=category, deadline=deadline) if t.id == todo_id else t
        for t in todos
    )


def delete_todo(todos: Sequence[Todo], todo_id: int) -> Todos:
    """Remove the matching todo, keeping the order of the rest."""
    return tuple(t for t in todos if t.id != todo_id)


def complete_todo(todos: Sequence[Todo], todo_id: int) -> Todos:
    """Mark the matching todo as completed."""
    return tuple(t.complete() if t.id == todo_id else t for t in todos)


def filter_by_category(todos: Sequence[Todo], category: str) -> Todos:
    """Return todos whose category matches exactly (case-sensitive)."""
    return tuple(t for t in todos if t.category == category)


def filter_by_deadline(todos: Sequence[Todo], deadline: date) -> Todos:
    """Return todos due on the given date."""
    return tuple(t for t in todos if t.deadline == deadline)


def search_todos(todos: Sequence[Todo], query: str) -> Todos:
    """Return todos whose task or category contains ``query``."""
    return tuple(t for t in todos if query in t.task or query in t.category)
