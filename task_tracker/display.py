"""Display formatting for task output."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Optional

from tabulate import tabulate

from task_tracker.models import Task


def format_tasks_table(tasks: Sequence[Task]) -> str:
    """Format tasks as a table string."""
    if not tasks:
        return "No tasks found."

    headers = ["ID", "Title", "Done", "Class", "Due", "Description"]
    rows = [
        [
            task.id,
            _truncate(task.title, 40),
            "✓" if task.complete else "",
            _truncate(task.task_class, 15),
            task.due_date or "",
            _truncate(task.description, 40),
        ]
        for task in tasks
    ]
    return tabulate(rows, headers=headers, tablefmt="simple")


def format_task_detail(task: Task) -> str:
    """Format a single task with full details."""
    done = "Yes" if task.complete else "No"

    return f"""
Task #{task.id}
{"─" * 40}
Title:       {task.title}
Description: {task.description or "(none)"}
Class:       {task.task_class or "(none)"}
Due Date:    {task.due_date or "Not set"}
Completed:   {done}
""".strip()


def _truncate(text: Optional[str], max_len: int) -> str:
    """Truncate text with ellipsis if too long."""
    if not text:
        return ""
    if len(text) <= max_len:
        return text
    return text[: max_len - 1] + "…"
