"""Command-line interface for the task tracker.

Each run loads the store, applies exactly one command to the collection,
and writes the collection back when the command is a mutating one.
"""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence
from pathlib import Path
from typing import ClassVar, Optional

from task_tracker.collection import TaskCollection
from task_tracker.config import TrackerConfig
from task_tracker.display import format_task_detail, format_tasks_table
from task_tracker.exceptions import TaskNotFoundError, TrackerError
from task_tracker.models import EditableField, ListMode
from task_tracker.store import TaskStore
from task_tracker.utils.logger import setup_logger

logger = logging.getLogger(__name__)


def parse_task_id(value: str) -> int:
    """Parse a task ID from string."""
    try:
        task_id = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid task ID: '{value}'")
    if task_id < 0:
        raise argparse.ArgumentTypeError(f"Task ID cannot be negative: {task_id}")
    return task_id


def parse_field(value: str) -> EditableField:
    """Parse a clearable field name from string."""
    try:
        return EditableField.from_string(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="task-tracker",
        description="A personal task tracker backed by a JSON file.",
    )
    parser.add_argument("-f", "--file", type=Path, help="Store file (default: ~/.task_tracker.json)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable verbose logging")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # New command
    new_parser = subparsers.add_parser("new", help="Create a new task")
    new_parser.add_argument("title", help="Task title")
    new_parser.add_argument("-d", "--description", help="Task description")
    new_parser.add_argument("-c", "--class", dest="task_class", help="Task class/category")
    new_parser.add_argument("--due", dest="due_date", help="Due date (free-form text)")

    # Edit command
    edit_parser = subparsers.add_parser("edit", help="Edit a task")
    edit_parser.add_argument("id", type=parse_task_id, help="Task ID")
    edit_parser.add_argument("-t", "--title", help="New title")
    edit_parser.add_argument("-d", "--description", help="New description")
    edit_parser.add_argument("-c", "--class", dest="task_class", help="New class/category")
    edit_parser.add_argument("--due", dest="due_date", help="New due date")
    edit_parser.add_argument(
        "--clear", type=parse_field, action="append", default=[], metavar="FIELD",
        help="Unset a field: description, class, due_date (repeatable)"
    )

    # List command
    list_parser = subparsers.add_parser("list", help="List tasks (incomplete by default)")
    list_group = list_parser.add_mutually_exclusive_group()
    list_group.add_argument(
        "-a", "--all", dest="mode", action="store_const", const=ListMode.ALL,
        help="Show all tasks"
    )
    list_group.add_argument(
        "--complete", dest="mode", action="store_const", const=ListMode.COMPLETE,
        help="Show only completed tasks"
    )
    list_parser.set_defaults(mode=ListMode.INCOMPLETE)

    # Show command
    show_parser = subparsers.add_parser("show", help="Show task details")
    show_parser.add_argument("id", type=parse_task_id, help="Task ID")

    # Complete command
    complete_parser = subparsers.add_parser("complete", help="Mark a task as complete")
    complete_parser.add_argument("id", type=parse_task_id, help="Task ID")

    # Delete command
    delete_parser = subparsers.add_parser("delete", help="Delete a task")
    delete_parser.add_argument("id", type=parse_task_id, help="Task ID")

    # Clear command
    subparsers.add_parser("clear", help="Delete all tasks")

    return parser


class CLI:
    """Command-line interface handler."""

    MUTATING_COMMANDS: ClassVar[frozenset[str]] = frozenset(
        {"new", "edit", "complete", "delete", "clear"}
    )

    def __init__(self, store: TaskStore) -> None:
        """Initialize CLI with a task store."""
        self._store = store

    def run(self, args: argparse.Namespace) -> int:
        """Load, execute the requested command, save. Returns exit code.

        Raises:
            StoreError: If the store cannot be loaded or saved.
        """
        if args.command is None:
            print("No command specified. Use --help for usage.")
            return 1

        handler = getattr(self, f"_handle_{args.command}", None)
        if handler is None:
            print(f"Unknown command: {args.command}")
            return 1

        collection = self._store.load()
        try:
            handler(collection, args)
        except TaskNotFoundError as e:
            print(e)
        except ValueError as e:
            print(f"Validation error: {e}")
            return 1

        if args.command in self.MUTATING_COMMANDS:
            self._store.save(collection)
        return 0

    def _handle_new(self, collection: TaskCollection, args: argparse.Namespace) -> None:
        """Handle new command."""
        task = collection.create(
            title=args.title,
            description=args.description,
            task_class=args.task_class,
            due_date=args.due_date,
        )
        print(f"Created task #{task.id}: {task.title}")

    def _handle_edit(self, collection: TaskCollection, args: argparse.Namespace) -> None:
        """Handle edit command."""
        task = collection.edit(
            args.id,
            title=args.title,
            description=args.description,
            task_class=args.task_class,
            due_date=args.due_date,
            clear=args.clear,
        )
        print(f"Updated task #{task.id}")

    def _handle_list(self, collection: TaskCollection, args: argparse.Namespace) -> None:
        """Handle list command."""
        print(format_tasks_table(collection.list(args.mode)))

    def _handle_show(self, collection: TaskCollection, args: argparse.Namespace) -> None:
        """Handle show command."""
        print(format_task_detail(collection.get(args.id)))

    def _handle_complete(self, collection: TaskCollection, args: argparse.Namespace) -> None:
        """Handle complete command."""
        task = collection.complete(args.id)
        print(f"Task #{task.id} marked as complete")

    def _handle_delete(self, collection: TaskCollection, args: argparse.Namespace) -> None:
        """Handle delete command."""
        collection.delete(args.id)
        print(f"Deleted task #{args.id}")

    def _handle_clear(self, collection: TaskCollection, args: argparse.Namespace) -> None:
        """Handle clear command."""
        removed = collection.clear()
        print(f"Cleared {removed} task(s)")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        config = TrackerConfig()
        if args.file is not None:
            config = config.with_overrides(store_path=args.file)
        if args.verbose:
            config = config.with_overrides(log_level="DEBUG")

        setup_logger(level=config.logging_level, log_dir=config.log_dir)

        store = TaskStore(config.resolve_store_path())
        logger.debug("Using store %s", store.path)
        return CLI(store).run(args)
    except TrackerError as e:
        logger.error(f"Error: {e}")
        return 1
    except KeyboardInterrupt:
        logger.warning("Interrupted by user")
        return 130
