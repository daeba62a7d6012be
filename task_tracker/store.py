"""JSON file store for task persistence."""

from __future__ import annotations

import contextlib
import json
import logging
import os
from pathlib import Path
from typing import Optional

from task_tracker.collection import TaskCollection
from task_tracker.exceptions import HomeDirectoryError, StoreError

logger = logging.getLogger(__name__)

DEFAULT_STORE_FILE = ".task_tracker.json"


def resolve_store_path(
    file_name: str = DEFAULT_STORE_FILE, home: Optional[Path] = None
) -> Path:
    """Resolve the store file against the user's home directory.

    Raises:
        HomeDirectoryError: If the home directory cannot be determined.
    """
    if home is None:
        try:
            home = Path.home()
        except (RuntimeError, KeyError) as e:
            raise HomeDirectoryError(f"Cannot determine home directory: {e}") from e
    return home / file_name


class TaskStore:
    """Reads and writes the whole task collection as one JSON array.

    There is no locking: concurrent runs against the same file race and
    the last writer wins. Writes go through a temporary file that replaces
    the store, so an interrupted save leaves the previous document intact.
    """

    def __init__(self, path: Path) -> None:
        """Initialize store with the path of its JSON document."""
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> TaskCollection:
        """Load the collection. A missing file yields an empty collection.

        Raises:
            StoreError: If the file exists but cannot be read or parsed.
        """
        try:
            with self._path.open(encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            logger.debug("No store at %s, starting empty", self._path)
            return TaskCollection()
        except json.JSONDecodeError as e:
            raise StoreError(self._path, f"invalid JSON: {e}") from e
        except (OSError, UnicodeDecodeError) as e:
            raise StoreError(self._path, f"cannot read store: {e}") from e

        if not isinstance(data, list):
            raise StoreError(self._path, "expected a JSON array of tasks")

        try:
            collection = TaskCollection.from_records(data)
        except ValueError as e:
            raise StoreError(self._path, f"invalid task record: {e}") from e

        logger.debug("Loaded %d tasks from %s", len(collection), self._path)
        return collection

    def save(self, collection: TaskCollection) -> None:
        """Overwrite the store with the full collection, pretty-printed.

        Raises:
            StoreError: If the file cannot be written.
        """
        tmp_path = self._path.with_name(self._path.name + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with tmp_path.open("w", encoding="utf-8") as f:
                json.dump(collection.to_records(), f, indent=4)
                f.write("\n")
            os.replace(tmp_path, self._path)
        except OSError as e:
            with contextlib.suppress(OSError):
                tmp_path.unlink(missing_ok=True)
            raise StoreError(self._path, f"cannot write store: {e}") from e

        logger.info("Saved %d tasks to %s", len(collection), self._path)
