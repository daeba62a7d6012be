"""Configuration management for the task tracker.

Configuration Precedence (highest to lowest):
    1. Constructor arguments (and CLI overrides via ``with_overrides``)
    2. Environment variables
    3. Default values

Environment Variables:
    TASK_TRACKER_FILE: Store file path (default: ~/.task_tracker.json)
    TASK_TRACKER_LOG_LEVEL: Logging level name (default: WARNING)
    TASK_TRACKER_LOG_DIR: Directory for log files (default: no log file)

A ``.env`` file in the working directory is loaded before the
environment is read.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import ClassVar, Optional

from dotenv import load_dotenv

from task_tracker.exceptions import ConfigurationError
from task_tracker.store import resolve_store_path

load_dotenv(Path.cwd() / ".env")


@dataclass(frozen=True)
class TrackerConfig:
    """Immutable runtime configuration.

    Attributes:
        store_path: Explicit store file; None means the home-directory default.
        log_level: Standard logging level name.
        log_dir: Directory for a log file, or None for console only.
    """

    VALID_LOG_LEVELS: ClassVar[tuple[str, ...]] = (
        "DEBUG",
        "INFO",
        "WARNING",
        "ERROR",
        "CRITICAL",
    )

    store_path: Optional[Path] = field(
        default_factory=lambda: _get_env_path("TASK_TRACKER_FILE")
    )
    log_level: str = field(
        default_factory=lambda: _get_env("TASK_TRACKER_LOG_LEVEL", "WARNING")
    )
    log_dir: Optional[Path] = field(
        default_factory=lambda: _get_env_path("TASK_TRACKER_LOG_DIR")
    )

    def __post_init__(self) -> None:
        """Normalize and validate configuration values."""
        level = self.log_level.strip().upper()
        if level not in self.VALID_LOG_LEVELS:
            raise ConfigurationError(
                f"Invalid log level '{self.log_level}'. "
                f"Must be one of: {', '.join(self.VALID_LOG_LEVELS)}"
            )
        # frozen dataclass
        object.__setattr__(self, "log_level", level)
        if self.store_path is not None:
            object.__setattr__(self, "store_path", Path(self.store_path).expanduser())
        if self.log_dir is not None:
            object.__setattr__(self, "log_dir", Path(self.log_dir).expanduser())

    @property
    def logging_level(self) -> int:
        """Numeric logging level."""
        return logging.getLevelName(self.log_level)

    def resolve_store_path(self) -> Path:
        """Store file to use for this run.

        Raises:
            HomeDirectoryError: If no explicit path is set and the home
                directory cannot be determined.
        """
        if self.store_path is not None:
            return self.store_path
        return resolve_store_path()

    def with_overrides(self, **kwargs: object) -> TrackerConfig:
        """Create a new configuration with the given fields replaced."""
        return replace(self, **kwargs)  # type: ignore[arg-type]


def _get_env(key: str, default: str) -> str:
    """Get environment variable with default."""
    value = os.environ.get(key)
    if value is None or value == "":
        return default
    return value


def _get_env_path(key: str) -> Optional[Path]:
    """Get optional path from environment variable."""
    value = os.environ.get(key)
    if value is None or value == "":
        return None
    return Path(value)
