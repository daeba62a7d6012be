"""Task Tracker - a personal task list kept in a JSON file."""

from task_tracker.collection import TaskCollection
from task_tracker.exceptions import (
    ConfigurationError,
    HomeDirectoryError,
    StoreError,
    TaskNotFoundError,
    TrackerError,
)
from task_tracker.models import EditableField, ListMode, Task
from task_tracker.store import TaskStore

__all__ = [
    "ConfigurationError",
    "EditableField",
    "HomeDirectoryError",
    "ListMode",
    "StoreError",
    "Task",
    "TaskCollection",
    "TaskNotFoundError",
    "TaskStore",
    "TrackerError",
]
