"""Tests for display formatting."""

from task_tracker.display import format_task_detail, format_tasks_table
from task_tracker.models import Task


def test_empty_table():
    assert format_tasks_table([]) == "No tasks found."


def test_table_rows_in_order():
    table = format_tasks_table(
        [Task(id=1, title="First", complete=True), Task(id=2, title="Second", task_class="Work")]
    )
    lines = table.splitlines()

    assert "Title" in lines[0]
    assert "First" in lines[2] and "✓" in lines[2]
    assert "Second" in lines[3] and "Work" in lines[3]


def test_long_title_truncated():
    table = format_tasks_table([Task(id=1, title="x" * 60)])

    assert "x" * 39 + "…" in table
    assert "x" * 41 not in table


def test_detail_placeholders():
    detail = format_task_detail(Task(id=4, title="Bare"))

    assert detail.startswith("Task #4")
    assert "Description: (none)" in detail
    assert "Due Date:    Not set" in detail
