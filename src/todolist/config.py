"""Configuration models for todolist."""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import BaseModel, Field


class StorageConfig(BaseModel):
    """Configuration for the persistence store."""

    path: str = "todos.txt"


class DisplayConfig(BaseModel):
    """Configuration for rendering todos."""

    color: bool = True


class TodoConfig(BaseModel):
    """Main configuration for todolist."""

    storage: StorageConfig = Field(default_factory=StorageConfig)
    display: DisplayConfig = Field(default_factory=DisplayConfig)
    verbose: bool = False
    """Report lines skipped while loading the store."""

    @classmethod
    def load(cls, path: Path | None = None) -> TodoConfig:
        """Load configuration from file or return defaults."""
        if path is None:
            path = CONFIG_FILE

        if not path.exists():
            return cls()

        with open(path) as f:
            data = json.load(f)

        return cls.model_validate(data)

    @property
    def store_path(self) -> Path:
        """Path of the todo store file."""
        return Path(self.storage.path)


# Default config directory
TODOLIST_DIR = Path(".todolist")
CONFIG_FILE = TODOLIST_DIR / "config.json"
