"""Tests for todolist.config module."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from todolist.config import (
    CONFIG_FILE,
    TODOLIST_DIR,
    DisplayConfig,
    StorageConfig,
    TodoConfig,
)


class TestStorageConfig:
    """Tests for StorageConfig model."""

    def test_defaults(self) -> None:
        """Test default store path."""
        assert StorageConfig().path == "todos.txt"


class TestDisplayConfig:
    """Tests for DisplayConfig model."""

    def test_defaults(self) -> None:
        """Test colour is on by default."""
        assert DisplayConfig().color is True

    def test_invalid_color(self) -> None:
        """Test that non-boolean colour values are rejected."""
        with pytest.raises(ValidationError):
            DisplayConfig(color="sometimes")  # type: ignore[arg-type]


class TestTodoConfig:
    """Tests for TodoConfig model."""

    def test_defaults(self) -> None:
        """Test default configuration."""
        config = TodoConfig()
        assert isinstance(config.storage, StorageConfig)
        assert isinstance(config.display, DisplayConfig)
        assert config.verbose is False
        assert config.store_path == Path("todos.txt")

    def test_load_missing_file(self, temp_project: Path) -> None:
        """Test loading returns defaults when file doesn't exist."""
        config = TodoConfig.load(temp_project / ".todolist/config.json")
        assert config.storage.path == "todos.txt"

    def test_load_existing_file(self, temp_config_dir: Path, sample_config_data: dict) -> None:
        """Test loading from existing file."""
        config_path = temp_config_dir / "config.json"
        with open(config_path, "w") as f:
            json.dump(sample_config_data, f)

        config = TodoConfig.load(config_path)
        assert config.storage.path == "work.txt"
        assert config.display.color is False
        assert config.verbose is True

    def test_load_default_path(self, write_config, sample_config_data: dict) -> None:
        """Test loading from default .todolist/config.json path."""
        write_config(sample_config_data)

        config = TodoConfig.load()
        assert config.store_path == Path("work.txt")

    def test_load_partial_file(self, write_config) -> None:
        """Test missing sections fall back to defaults."""
        write_config({"verbose": True})

        config = TodoConfig.load()
        assert config.verbose is True
        assert config.storage.path == "todos.txt"

    def test_load_invalid_file(self, write_config) -> None:
        """Test invalid values raise a validation error."""
        write_config({"display": {"color": "sometimes"}})

        with pytest.raises(ValidationError):
            TodoConfig.load()

    def test_load_round_trips_dumped_config(self, write_config) -> None:
        """Test a dumped configuration loads back unchanged."""
        original = TodoConfig(
            storage=StorageConfig(path="data/todos.txt"),
            display=DisplayConfig(color=False),
            verbose=True,
        )
        write_config(original.model_dump())

        assert TodoConfig.load() == original


class TestModulePaths:
    """Tests for module-level path constants."""

    def test_config_dir(self) -> None:
        assert TODOLIST_DIR == Path(".todolist")

    def test_config_file(self) -> None:
        assert CONFIG_FILE == Path(".todolist/config.json")
