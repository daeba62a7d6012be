"""Custom exception hierarchy for the task tracker.

Exception Hierarchy:
    TrackerError (base)
    ├── ConfigurationError  - Invalid configuration value (fatal)
    ├── HomeDirectoryError  - Home directory cannot be determined (fatal)
    ├── StoreError          - Store file read/parse/write failure (fatal)
    └── TaskNotFoundError   - Operation referenced a missing task ID (recoverable)

Fatal errors abort the command with a diagnostic and a non-zero exit code.
A missing task is reported to the user and the command still exits normally.
"""

from __future__ import annotations

from pathlib import Path


class TrackerError(Exception):
    """Base exception for all task tracker errors."""


class ConfigurationError(TrackerError):
    """Raised when a configuration value is invalid."""


class HomeDirectoryError(TrackerError):
    """Raised when the user's home directory cannot be determined."""


class StoreError(TrackerError):
    """Raised when the store file cannot be read, parsed, or written.

    Attributes:
        path: The store file involved.
    """

    def __init__(self, path: Path, message: str) -> None:
        """Initialize store error with the offending path."""
        self.path = path
        super().__init__(f"{path}: {message}")


class TaskNotFoundError(TrackerError):
    """Raised when no task with the requested ID exists."""

    def __init__(self, task_id: int) -> None:
        """Initialize with the missing task ID."""
        self.task_id = task_id
        super().__init__(f"Task #{task_id} not found.")
