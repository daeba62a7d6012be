"""In-memory task collection and its operations."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Sequence
from typing import Any, Optional

from task_tracker.exceptions import TaskNotFoundError
from task_tracker.models import EditableField, ListMode, Task

logger = logging.getLogger(__name__)


class TaskCollection:
    """Ordered sequence of tasks owned by a single command run.

    Insertion order is preserved by every operation. New IDs come from a
    high-water mark that starts at the maximum loaded ID and only moves up,
    so deleting or clearing tasks never frees an ID for reuse while the
    collection lives, and the order of the sequence never influences ID
    assignment.
    """

    def __init__(self, tasks: Optional[Iterable[Task]] = None) -> None:
        """Initialize collection, optionally with existing tasks."""
        self._tasks: list[Task] = list(tasks) if tasks is not None else []
        self._last_id: int = max((task.id for task in self._tasks), default=0)

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TaskCollection):
            return NotImplemented
        return self._tasks == other._tasks

    # -------------------- serialization --------------------

    @classmethod
    def from_records(cls, records: Iterable[Any]) -> TaskCollection:
        """Build a collection from store records.

        Raises:
            ValueError: If any record is malformed or two records share an ID.
        """
        tasks: list[Task] = []
        seen: set[int] = set()
        for record in records:
            task = Task.from_record(record)
            if task.id in seen:
                raise ValueError(f"Duplicate task id: {task.id}")
            seen.add(task.id)
            tasks.append(task)
        return cls(tasks)

    def to_records(self) -> list[dict[str, Any]]:
        """Convert all tasks to store records, in order."""
        return [task.to_record() for task in self._tasks]

    # -------------------- queries --------------------

    def next_id(self) -> int:
        """ID the next created task will receive."""
        return self._last_id + 1

    def get(self, task_id: int) -> Task:
        """Get a task by ID."""
        for task in self._tasks:
            if task.id == task_id:
                return task
        raise TaskNotFoundError(task_id)

    def list(self, mode: ListMode = ListMode.INCOMPLETE) -> Sequence[Task]:
        """Return the tasks shown by the given listing mode, in order."""
        return [task for task in self._tasks if mode.matches(task)]

    # -------------------- task operations --------------------

    def create(
        self,
        title: str,
        description: Optional[str] = None,
        task_class: Optional[str] = None,
        due_date: Optional[str] = None,
    ) -> Task:
        """Append a new incomplete task and return it."""
        task = Task(
            id=self.next_id(),
            title=title,
            description=description,
            task_class=task_class,
            due_date=due_date,
        )
        self._tasks.append(task)
        self._last_id = task.id
        logger.debug("Created task #%d", task.id)
        return task

    def edit(
        self,
        task_id: int,
        title: Optional[str] = None,
        description: Optional[str] = None,
        task_class: Optional[str] = None,
        due_date: Optional[str] = None,
        clear: Iterable[EditableField] = (),
    ) -> Task:
        """Update the supplied fields of a task.

        Fields passed as None are left unchanged. Fields named in ``clear``
        are reset to None.

        Raises:
            TaskNotFoundError: If no task has this ID.
            ValueError: If a field is both set and cleared.
        """
        updates = {
            "description": description,
            "task_class": task_class,
            "due_date": due_date,
        }
        cleared = set(clear)
        conflicting = [f.value for f in cleared if updates[f.attribute] is not None]
        if conflicting:
            raise ValueError(f"Cannot both set and clear: {', '.join(sorted(conflicting))}")

        task = self.get(task_id)

        if title is not None:
            task.title = title
        for attribute, value in updates.items():
            if value is not None:
                setattr(task, attribute, value)
        for field in cleared:
            setattr(task, field.attribute, None)

        logger.debug("Edited task #%d", task_id)
        return task

    def complete(self, task_id: int) -> Task:
        """Mark a task complete. Completing a complete task is a no-op."""
        task = self.get(task_id)
        task.complete = True
        return task

    def delete(self, task_id: int) -> Task:
        """Remove a task and return it."""
        for index, task in enumerate(self._tasks):
            if task.id == task_id:
                del self._tasks[index]
                logger.debug("Deleted task #%d", task_id)
                return task
        raise TaskNotFoundError(task_id)

    def clear(self) -> int:
        """Remove all tasks. Returns how many were removed.

        The ID high-water mark is kept, so cleared IDs are not handed out again.
        """
        removed = len(self._tasks)
        self._tasks.clear()
        return removed
