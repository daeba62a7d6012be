"""Logging configuration for the task tracker."""

from __future__ import annotations

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

from task_tracker.exceptions import ConfigurationError


def setup_logger(
    name: str = "task_tracker",
    level: int = logging.WARNING,
    log_dir: Optional[Path] = None,
) -> logging.Logger:
    """Configure the package logger with console and optional file handlers.

    Diagnostics go to stderr so they never mix with command output on stdout.

    Args:
        name: Logger name
        level: Logging level
        log_dir: Directory for log files (no file handler when None)

    Returns:
        Configured logger instance

    Raises:
        ConfigurationError: If the log directory or file cannot be opened
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Clear existing handlers
    logger.handlers.clear()

    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_dir is not None:
        log_file = log_dir / f"task_tracker_{datetime.now():%Y%m%d}.log"
        try:
            log_dir.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_file, encoding="utf-8")
        except OSError as e:
            raise ConfigurationError(f"Cannot open log file in {log_dir}: {e}") from e
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
