"""Shared fixtures for task tracker tests."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from pathlib import Path

import pytest
from task_tracker.collection import TaskCollection
from task_tracker.store import TaskStore


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep tracker environment variables from leaking into tests."""
    for key in list(os.environ):
        if key.startswith("TASK_TRACKER_"):
            monkeypatch.delenv(key)


@pytest.fixture(autouse=True)
def reset_logger() -> Iterator[None]:
    """Drop handlers that setup_logger attached during a test."""
    yield
    logger = logging.getLogger("task_tracker")
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def store_path(tmp_path: Path) -> Path:
    """Path of a store file that does not exist yet."""
    return tmp_path / "tasks.json"


@pytest.fixture
def store(store_path: Path) -> TaskStore:
    """Create a store bound to a temporary file."""
    return TaskStore(store_path)


@pytest.fixture
def collection() -> TaskCollection:
    """Create an empty collection."""
    return TaskCollection()


@pytest.fixture
def mixed_collection() -> TaskCollection:
    """Collection with a known mix of complete and incomplete tasks.

    Complete: #2, #4. Incomplete: #1, #3, #5.
    """
    tasks = TaskCollection()
    for title in ["Write report", "Pay rent", "Call mom", "Book flights", "Water plants"]:
        tasks.create(title)
    tasks.complete(2)
    tasks.complete(4)
    return tasks
