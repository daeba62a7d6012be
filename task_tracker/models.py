"""Task model and related types."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class ListMode(Enum):
    """Which tasks a listing shows."""

    INCOMPLETE = "incomplete"
    ALL = "all"
    COMPLETE = "complete"

    def matches(self, task: Task) -> bool:
        """Return True if the task belongs in this listing."""
        if self is ListMode.ALL:
            return True
        if self is ListMode.COMPLETE:
            return task.complete
        return not task.complete


class EditableField(Enum):
    """Optional task fields that an edit may clear.

    Values are the keys used in the store document.
    """

    DESCRIPTION = "description"
    CLASS = "class"
    DUE_DATE = "due_date"

    @property
    def attribute(self) -> str:
        """Name of the matching Task attribute."""
        return "task_class" if self is EditableField.CLASS else self.value

    @classmethod
    def from_string(cls, value: str) -> EditableField:
        """Parse a field name, case-insensitive."""
        normalized = value.strip().lower().replace("-", "_")
        for member in cls:
            if member.value == normalized:
                return member
        valid = ", ".join(f.value for f in cls)
        raise ValueError(f"Invalid field '{value}'. Must be one of: {valid}")


@dataclass
class Task:
    """A single to-do item.

    Attributes:
        id: Unique task identifier, assigned by the collection.
        title: Task title (required).
        description: Optional longer description.
        task_class: Optional category label, stored under the "class" key.
        due_date: Optional free-form due date; never parsed.
        complete: Completion status.
    """

    id: int
    title: str
    description: Optional[str] = None
    task_class: Optional[str] = None
    due_date: Optional[str] = None
    complete: bool = False

    def to_record(self) -> dict[str, Any]:
        """Convert to a JSON-ready store record."""
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "class": self.task_class,
            "due_date": self.due_date,
            "complete": self.complete,
        }

    @classmethod
    def from_record(cls, record: Any) -> Task:
        """Build a Task from a store record.

        Optional keys that are absent are treated as None.

        Raises:
            ValueError: If the record is not a well-formed task object.
        """
        if not isinstance(record, dict):
            raise ValueError(f"Task record must be an object, got {type(record).__name__}")

        task_id = record.get("id")
        # bool is a subclass of int
        if not isinstance(task_id, int) or isinstance(task_id, bool) or task_id < 0:
            raise ValueError(f"Invalid task id: {task_id!r}")

        title = record.get("title")
        if not isinstance(title, str):
            raise ValueError(f"Task #{task_id} has invalid title: {title!r}")

        complete = record.get("complete")
        if not isinstance(complete, bool):
            raise ValueError(f"Task #{task_id} has invalid complete flag: {complete!r}")

        optional: dict[str, Optional[str]] = {}
        for key in ("description", "class", "due_date"):
            value = record.get(key)
            if value is not None and not isinstance(value, str):
                raise ValueError(f"Task #{task_id} has invalid {key}: {value!r}")
            optional[key] = value

        return cls(
            id=task_id,
            title=title,
            description=optional["description"],
            task_class=optional["class"],
            due_date=optional["due_date"],
            complete=complete,
        )
