"""Shared fixtures for todolist tests."""

from __future__ import annotations

import io
import json
import os
from collections.abc import Generator
from datetime import date
from pathlib import Path

import pytest
from rich.console import Console

from todolist.models import Todo


@pytest.fixture
def temp_project(tmp_path: Path) -> Generator[Path, None, None]:
    """Create a temporary project directory and change to it."""
    original_dir = os.getcwd()
    os.chdir(tmp_path)
    try:
        yield tmp_path
    finally:
        os.chdir(original_dir)


@pytest.fixture
def temp_config_dir(temp_project: Path) -> Path:
    """Create a temporary .todolist directory."""
    config_dir = temp_project / ".todolist"
    config_dir.mkdir()
    return config_dir


@pytest.fixture
def sample_config_data() -> dict:
    """Sample configuration data."""
    return {
        "storage": {"path": "work.txt"},
        "display": {"color": False},
        "verbose": True,
    }


@pytest.fixture
def sample_todos() -> tuple[Todo, ...]:
    """A small mixed collection."""
    return (
        Todo(1, "Team meeting", "Work", date(2025, 1, 12)),
        Todo(2, "Shopping", "Errand", date(2025, 1, 10), completed=True),
        Todo(3, "Write report", "Work", date(2025, 1, 10)),
        Todo(4, "Call plumber", "work", date(2025, 1, 15)),
    )


@pytest.fixture
def sample_store(temp_project: Path) -> Path:
    """Create a todos.txt store with two good lines and two bad ones."""
    content = """\
1,Buy milk,Errand,2025-01-10,false
2,Team meeting,Work,2025-01-12
x,Broken id,Work,2025-01-12,false
3,Write report,Work,2025-01-10,true
"""
    store = temp_project / "todos.txt"
    store.write_text(content)
    return store


@pytest.fixture
def write_config(temp_config_dir: Path):
    """Return a helper that writes .todolist/config.json."""

    def _write(data: dict) -> Path:
        config_path = temp_config_dir / "config.json"
        config_path.write_text(json.dumps(data))
        return config_path

    return _write


@pytest.fixture
def output() -> io.StringIO:
    """Buffer that collects console output."""
    return io.StringIO()


@pytest.fixture
def console(output: io.StringIO) -> Console:
    """A plain, wide console writing into ``output``."""
    return Console(file=output, width=200, color_system=None, highlight=False)
