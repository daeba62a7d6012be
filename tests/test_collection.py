"""Tests for TaskCollection."""

import pytest
from task_tracker.collection import TaskCollection
from task_tracker.exceptions import TaskNotFoundError
from task_tracker.models import EditableField, ListMode, Task


class TestCreate:
    """Tests for creating tasks and assigning IDs."""

    def test_first_task_gets_id_one(self, collection):
        task = collection.create("Buy milk")

        assert task.id == 1
        assert task.complete is False

    def test_ids_are_sequential(self, collection):
        tasks = [collection.create(f"Task {n}") for n in range(1, 6)]
        assert [t.id for t in tasks] == [1, 2, 3, 4, 5]

    def test_create_with_optional_fields(self, collection):
        task = collection.create("Report", description="Q3", task_class="Work", due_date="Friday")

        assert task.description == "Q3"
        assert task.task_class == "Work"
        assert task.due_date == "Friday"

    def test_empty_title_is_not_rejected(self, collection):
        assert collection.create("").title == ""

    def test_delete_lower_id_does_not_reuse_it(self, collection):
        for title in ["A", "B", "C"]:
            collection.create(title)
        collection.delete(1)

        assert collection.create("D").id == 4

    def test_id_uses_maximum_not_last_element(self):
        # Hand-edited store where the last task is not the highest ID
        tasks = TaskCollection(
            [Task(id=1, title="A"), Task(id=5, title="B"), Task(id=2, title="C")]
        )
        new = tasks.create("D")

        assert new.id == 6
        assert len({t.id for t in tasks}) == len(tasks)

    def test_deleting_max_id_does_not_reuse_it(self, collection):
        for title in ["A", "B", "C"]:
            collection.create(title)
        collection.delete(3)

        new = collection.create("D")
        assert new.id == 4
        assert [t.id for t in collection] == [1, 2, 4]

    def test_deleted_ids_stay_retired(self, collection):
        for title in ["A", "B", "C"]:
            collection.create(title)
        collection.delete(2)
        collection.delete(3)

        assert collection.create("D").id == 4
        assert collection.create("E").id == 5

    def test_loaded_collection_starts_after_max(self):
        tasks = TaskCollection([Task(id=1, title="A"), Task(id=3, title="B")])
        assert tasks.next_id() == 4

    def test_from_records_rejects_duplicate_ids(self):
        records = [
            {"id": 2, "title": "A", "complete": False},
            {"id": 2, "title": "B", "complete": False},
        ]
        with pytest.raises(ValueError, match="Duplicate task id"):
            TaskCollection.from_records(records)

    def test_empty_collection_starts_at_one(self, collection):
        assert collection.next_id() == 1

    def test_new_tasks_append_at_end(self, collection):
        collection.create("First")
        collection.create("Second")
        assert [t.title for t in collection] == ["First", "Second"]


class TestEdit:
    """Tests for partial edits."""

    def test_edit_title_only(self, collection):
        collection.create("Old", description="Keep me", task_class="Home")
        task = collection.edit(1, title="X", description=None)

        assert task.title == "X"
        assert task.description == "Keep me"
        assert task.task_class == "Home"

    def test_edit_all_fields(self, collection):
        collection.create("Old")
        task = collection.edit(
            1, title="New", description="Desc", task_class="Work", due_date="Monday"
        )

        assert task == Task(
            id=1, title="New", description="Desc", task_class="Work", due_date="Monday"
        )

    def test_edit_does_not_change_completion(self, collection):
        collection.create("Done")
        collection.complete(1)
        assert collection.edit(1, title="Still done").complete is True

    def test_clear_fields(self, collection):
        collection.create("T", description="D", task_class="C", due_date="Soon")
        task = collection.edit(1, clear=[EditableField.DESCRIPTION, EditableField.CLASS])

        assert task.description is None
        assert task.task_class is None
        assert task.due_date == "Soon"

    def test_set_and_clear_same_field_raises(self, collection):
        collection.create("T", description="D")

        with pytest.raises(ValueError, match="Cannot both set and clear"):
            collection.edit(1, description="New", clear=[EditableField.DESCRIPTION])
        assert collection.get(1).description == "D"

    def test_edit_not_found(self, collection):
        collection.create("Only")

        with pytest.raises(TaskNotFoundError) as exc_info:
            collection.edit(99, title="Ghost")
        assert exc_info.value.task_id == 99
        assert [t.title for t in collection] == ["Only"]


class TestComplete:
    """Tests for completing tasks."""

    def test_complete(self, collection):
        collection.create("Task")
        assert collection.complete(1).complete is True

    def test_complete_is_idempotent(self, collection):
        collection.create("Task")
        collection.complete(1)
        once = collection.to_records()

        collection.complete(1)
        assert collection.to_records() == once

    def test_complete_not_found(self, mixed_collection):
        before = mixed_collection.to_records()

        with pytest.raises(TaskNotFoundError):
            mixed_collection.complete(42)
        assert mixed_collection.to_records() == before


class TestDelete:
    """Tests for deleting tasks."""

    def test_delete_preserves_order(self, mixed_collection):
        removed = mixed_collection.delete(3)

        assert removed.title == "Call mom"
        assert [t.id for t in mixed_collection] == [1, 2, 4, 5]

    def test_delete_not_found(self, mixed_collection):
        before = mixed_collection.to_records()

        with pytest.raises(TaskNotFoundError):
            mixed_collection.delete(42)
        assert mixed_collection.to_records() == before

    def test_delete_twice(self, collection):
        collection.create("Once")
        collection.delete(1)

        with pytest.raises(TaskNotFoundError):
            collection.delete(1)


class TestClear:
    """Tests for clearing the collection."""

    def test_clear(self, mixed_collection):
        assert mixed_collection.clear() == 5
        assert len(mixed_collection) == 0
        assert mixed_collection.list(ListMode.ALL) == []

    def test_clear_empty(self, collection):
        assert collection.clear() == 0

    def test_clear_does_not_reuse_ids(self, mixed_collection):
        mixed_collection.clear()
        assert mixed_collection.create("Fresh").id == 6


class TestList:
    """Tests for filtered listings."""

    def test_default_is_incomplete(self, mixed_collection):
        assert [t.id for t in mixed_collection.list()] == [1, 3, 5]

    def test_complete_only(self, mixed_collection):
        assert [t.id for t in mixed_collection.list(ListMode.COMPLETE)] == [2, 4]

    def test_all(self, mixed_collection):
        assert [t.id for t in mixed_collection.list(ListMode.ALL)] == [1, 2, 3, 4, 5]

    def test_no_matches_is_empty(self, collection):
        collection.create("Open")
        assert collection.list(ListMode.COMPLETE) == []

    def test_listing_is_a_copy(self, mixed_collection):
        listing = mixed_collection.list(ListMode.ALL)
        listing.clear()
        assert len(mixed_collection) == 5


class TestScenario:
    """End-to-end use of the collection."""

    def test_buy_milk_walk_dog(self, collection):
        milk = collection.create("Buy milk")
        assert (milk.id, milk.complete) == (1, False)

        dog = collection.create("Walk dog")
        assert dog.id == 2

        collection.complete(1)
        incomplete = collection.list(ListMode.INCOMPLETE)
        assert [(t.id, t.title) for t in incomplete] == [(2, "Walk dog")]

        collection.delete(2)
        collection.clear()
        assert collection.list(ListMode.ALL) == []
