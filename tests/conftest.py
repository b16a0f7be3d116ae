"""Shared test configuration: import path and an in-memory local store."""
from __future__ import annotations

import sys
from pathlib import Path
from typing import Dict, Optional

import pytest

# Ensure the project root (containing modules like `calc`, `models`, `services`) is available on
# the Python import path when running tests with the default ``pytest`` command.
PROJECT_ROOT = Path(__file__).resolve().parent.parent
PROJECT_ROOT_STR = str(PROJECT_ROOT)
if PROJECT_ROOT_STR not in sys.path:
    sys.path.insert(0, PROJECT_ROOT_STR)


class MemoryStore:
    """Dictionary backed stand-in for :class:`services.database.LocalStore`."""

    def __init__(self) -> None:
        self.items: Dict[str, str] = {}
        self.writes = 0

    def get_item(self, key: str) -> Optional[str]:
        return self.items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self.items[key] = value
        self.writes += 1


@pytest.fixture
def memory_store() -> MemoryStore:
    return MemoryStore()
