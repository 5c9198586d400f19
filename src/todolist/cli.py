"""CLI interface for todolist."""

from __future__ import annotations

import json

import click
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from todolist import __version__
from todolist.config import CONFIG_FILE, TodoConfig
from todolist.models import Todo

console = Console(highlight=False)


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="todolist")
@click.option("--file", "-f", "store_file", help="Path to the todo store file")
@click.option("--color/--no-color", default=None, help="Colour todos by completion state")
@click.option("--verbose", "-v", is_flag=True, help="Report unreadable lines in the store")
@click.pass_context
def main(
    ctx: click.Context,
    store_file: str | None,
    color: bool | None,
    verbose: bool,
) -> None:
    """todolist - manage a todo list from a numbered menu.

    Todos are kept in a plain text file (todos.txt by default) and saved
    when you choose Exit.

    \b
    Usage:
      todolist               # Start the interactive menu
      todolist list          # Print all todos and exit
      todolist list -c Work  # Print todos in the Work category
      todolist path          # Show where todos are stored
    """
    try:
        config = TodoConfig.load()
    except (ValidationError, json.JSONDecodeError) as e:
        console.print(f"[red]Invalid configuration in {CONFIG_FILE}:[/red] {escape(str(e))}")
        ctx.exit(1)

    if store_file is not None:
        config.storage.path = store_file
    if color is not None:
        config.display.color = color
    if verbose:
        config.verbose = True

    ctx.ensure_object(dict)
    ctx.obj["config"] = config

    if ctx.invoked_subcommand is None:
        _run_interactive(ctx, config)


def _load_or_exit(ctx: click.Context, config: TodoConfig) -> tuple[Todo, ...]:
    """Load the store, exiting with status 1 if it cannot be read."""
    from todolist.app import load_session_todos

    try:
        return load_session_todos(config, console)
    except OSError as e:
        console.print(f"[red]Could not read to-dos:[/red] {escape(str(e))}")
        ctx.exit(1)


def _run_interactive(ctx: click.Context, config: TodoConfig) -> None:
    """Run the menu session and save on the way out.

    Exits with status 1 if the store cannot be read or saved.
    """
    from todolist.app import TodoApp
    from todolist.storage import save_todos

    todos = _load_or_exit(ctx, config)
    todos = TodoApp(console, color=config.display.color).run(todos)

    try:
        save_todos(todos, config.store_path)
    except OSError as e:
        console.print(f"[red]Could not save to-dos:[/red] {escape(str(e))}")
        ctx.exit(1)


@main.command("list")
@click.option("--category", "-c", help="Only show todos in this category")
@click.option("--deadline", "-d", help="Only show todos due on this date (yyyy-MM-dd)")
@click.option("--search", "-s", "query", help="Only show todos matching this text")
@click.pass_context
def list_command(
    ctx: click.Context,
    category: str | None,
    deadline: str | None,
    query: str | None,
) -> None:
    """Print todos without starting the menu.

    Filters can be combined; a todo must match all of them.

    Example:

        todolist list --category Work --search report
    """
    from todolist import operations
    from todolist.app import INVALID_DATE_MESSAGE
    from todolist.display import display_todos
    from todolist.models import parse_deadline

    config: TodoConfig = ctx.obj["config"]

    due = None
    if deadline is not None:
        due = parse_deadline(deadline)
        if due is None:
            console.print(f"[red]{INVALID_DATE_MESSAGE}[/red]")
            ctx.exit(1)

    todos = _load_or_exit(ctx, config)

    if category is not None:
        todos = operations.filter_by_category(todos, category)
    if due is not None:
        todos = operations.filter_by_deadline(todos, due)
    if query is not None:
        todos = operations.search_todos(todos, query)

    display_todos(todos, console, color=config.display.color)


@main.command()
@click.pass_context
def path(ctx: click.Context) -> None:
    """Show the absolute path to the todo store."""
    config: TodoConfig = ctx.obj["config"]
    click.echo(str(config.store_path.resolve()))


if __name__ == "__main__":
    main()
