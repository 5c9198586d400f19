"""Interactive menu loop for todolist.

The loop is a two-state machine (running / terminated) carrying the current
collection as its only data. Each command reads its own input, calls one of
the pure operations in ``todolist.operations`` and hands the resulting
collection to the next iteration.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import date
from enum import Enum
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from todolist import operations
from todolist.config import TodoConfig
from todolist.display import display_todos
from todolist.models import DATE_FORMAT, parse_deadline, parse_id
from todolist.operations import Todos
from todolist.storage import load_todos

MENU_TITLE = "To-Do List Management"

INVALID_DATE_MESSAGE = f"Invalid date format. Please enter the date in {DATE_FORMAT} format."
NOT_FOUND_MESSAGE = "To-do ID not found."
INVALID_CHOICE_MESSAGE = "Invalid choice. Please try again."
EXIT_MESSAGE = "Exiting..."


class LoopState(Enum):
    """Control state of the menu loop."""

    RUNNING = "running"
    TERMINATED = "terminated"


class TodoApp:
    """Numbered-menu front end over a todo collection.

    Input is read through ``read_line`` (a callable taking the prompt and
    returning the typed line), which defaults to ``console.input``.
    """

    def __init__(
        self,
        console: Console,
        read_line: Callable[[str], str] | None = None,
        color: bool = True,
    ) -> None:
        self.console = console
        self.color = color
        self._read_line = read_line or console.input
        self._commands: dict[str, tuple[str, Callable[[Todos], Todos] | None]] = {
            "1": ("Add a new to-do", self._add),
            "2": ("Display all to-dos", self._display_all),
            "3": ("Mark to-do as completed", self._complete),
            "4": ("Update to-do", self._update),
            "5": ("Delete to-do", self._delete),
            "6": ("Filter to-dos by category", self._filter_category),
            "7": ("Filter to-dos by deadline", self._filter_deadline),
            "8": ("Search to-dos", self._search),
            "9": ("Exit", None),
        }

    def run(self, todos: Todos) -> Todos:
        """Run the menu until the user exits; return the final collection.

        End of input or Ctrl-C is treated like choosing Exit.
        """
        state = LoopState.RUNNING
        while state is LoopState.RUNNING:
            self.show_menu()
            try:
                choice = self._ask("Choose an option: ")
                state, todos = self.step(todos, choice)
            except (EOFError, KeyboardInterrupt):
                self._say()
                self._say(EXIT_MESSAGE)
                state = LoopState.TERMINATED
        return todos

    def step(self, todos: Todos, choice: str) -> tuple[LoopState, Todos]:
        """Apply one menu choice and return the next state and collection."""
        command = self._commands.get(choice.strip())
        if command is None:
            self._say(INVALID_CHOICE_MESSAGE)
            return LoopState.RUNNING, todos

        _, handler = command
        if handler is None:
            self._say(EXIT_MESSAGE)
            return LoopState.TERMINATED, todos

        return LoopState.RUNNING, handler(todos)

    def show_menu(self) -> None:
        """Print the numbered menu."""
        self._say()
        self._say(MENU_TITLE, style="bold" if self.color else "")
        for key, (label, _) in self._commands.items():
            self._say(f"{key}. {label}")

    # -------------------- input helpers --------------------
    def _ask(self, prompt: str) -> str:
        return self._read_line(prompt)

    def _ask_id(self, prompt: str) -> int:
        return parse_id(self._ask(prompt))

    def _ask_deadline(self, prompt: str) -> date | None:
        deadline = parse_deadline(self._ask(prompt).strip())
        if deadline is None:
            self._say(INVALID_DATE_MESSAGE)
        return deadline

    def _say(self, message: str = "", style: str = "") -> None:
        self.console.print(message, style=style, markup=False, highlight=False)

    def _show(self, todos: Todos) -> None:
        display_todos(todos, self.console, color=self.color)

    # -------------------- commands --------------------
    def _add(self, todos: Todos) -> Todos:
        task = self._ask("Enter task: ")
        category = self._ask("Enter category: ")
        deadline = self._ask_deadline(f"Enter deadline ({DATE_FORMAT}): ")
        if deadline is None:
            return todos
        return operations.add_todo(todos, task, category, deadline)

    def _display_all(self, todos: Todos) -> Todos:
        self._show(todos)
        return todos

    def _complete(self, todos: Todos) -> Todos:
        todo_id = self._ask_id("Enter to-do ID to mark as completed: ")
        if not operations.has_todo(todos, todo_id):
            self._say(NOT_FOUND_MESSAGE)
            return todos
        return operations.complete_todo(todos, todo_id)

    def _update(self, todos: Todos) -> Todos:
        todo_id = self._ask_id("Enter to-do ID to update: ")
        if not operations.has_todo(todos, todo_id):
            self._say(NOT_FOUND_MESSAGE)
            return todos
        task = self._ask("Enter new task: ")
        category = self._ask("Enter new category: ")
        deadline = self._ask_deadline(f"Enter new deadline ({DATE_FORMAT}): ")
        if deadline is None:
            return todos
        return operations.update_todo(todos, todo_id, task, category, deadline)

    def _delete(self, todos: Todos) -> Todos:
        todo_id = self._ask_id("Enter to-do ID to delete: ")
        if not operations.has_todo(todos, todo_id):
            self._say(NOT_FOUND_MESSAGE)
            return todos
        return operations.delete_todo(todos, todo_id)

    def _filter_category(self, todos: Todos) -> Todos:
        category = self._ask("Enter category to filter by: ")
        self._show(operations.filter_by_category(todos, category))
        return todos

    def _filter_deadline(self, todos: Todos) -> Todos:
        deadline = self._ask_deadline(f"Enter deadline to filter by ({DATE_FORMAT}): ")
        if deadline is not None:
            self._show(operations.filter_by_deadline(todos, deadline))
        return todos

    def _search(self, todos: Todos) -> Todos:
        query = self._ask("Enter search query: ")
        self._show(operations.search_todos(todos, query))
        return todos


def load_session_todos(config: TodoConfig, console: Console) -> Todos:
    """Load the store named by ``config``, reporting what was found.

    Raises OSError if the store exists but cannot be read.
    """
    path: Path = config.store_path
    result = load_todos(path)

    if not result.found:
        console.print(
            f"[dim]No saved to-dos found at {escape(str(path))}. "
            "Starting with an empty list.[/dim]"
        )

    if config.verbose and result.skipped:
        console.print(
            f"[dim]Skipped {len(result.skipped)} unreadable line(s) in {escape(str(path))}:[/dim]"
        )
        for skipped in result.skipped:
            console.print(f"[dim]  line {skipped.lineno}: {escape(skipped.text)}[/dim]")

    return result.todos

