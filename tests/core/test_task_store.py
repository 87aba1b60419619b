# tests/core/test_task_store.py
import threading

import pytest

from task_tracker.core.domain.exceptions import (
    DuplicateTaskIdError,
    EmptyTitleError,
    TaskNotFoundError,
)
from task_tracker.core.domain.models import Task
from task_tracker.core.task_store import TaskStore


class TestCreate:

    def test_first_id_is_one(self):
        store = TaskStore()
        task = store.create_task("First")
        assert task == Task(id=1, title="First", completed=False)
        assert store.last_id == 1

    def test_continues_after_seeded_high_water_mark(self, seeded_store):
        """
        Scenario: Store seeded with ids 1, 2, 123.
        Expected: The next task gets id 124.
        """
        task = seeded_store.create_task("Test Task")
        assert task.id == 124
        assert len(seeded_store) == 4

    @pytest.mark.parametrize("title", ["", "   ", None])
    def test_empty_title_mutates_nothing(self, seeded_store, title):
        before = seeded_store.list_tasks()

        with pytest.raises(EmptyTitleError):
            seeded_store.create_task(title)

        assert seeded_store.list_tasks() == before
        assert seeded_store.last_id == 123

    def test_ids_never_reused(self, seeded_store):
        seeded_store.delete_task(123)
        assert seeded_store.create_task("After delete").id == 124

    def test_concurrent_creates_get_distinct_ids(self):
        """
        Scenario: Many threads create tasks at once.
        Expected: Every id is distinct and the range has no gaps.
        """
        store = TaskStore()
        created = []
        created_lock = threading.Lock()

        def worker(n):
            task = store.create_task(f"task {n}")
            with created_lock:
                created.append(task.id)

        threads = [threading.Thread(target=worker, args=(n,)) for n in range(50)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert sorted(created) == list(range(1, 51))
        assert len({t.id for t in store.list_tasks()}) == 50


class TestList:

    def test_empty(self):
        assert TaskStore().list_tasks() == []

    def test_insertion_order_and_idempotent(self, seeded_store):
        first = seeded_store.list_tasks()
        assert [t.id for t in first] == [1, 2, 123]
        assert seeded_store.list_tasks() == first

    def test_returns_copies(self, seeded_store):
        snapshot = seeded_store.list_tasks()
        snapshot[0].title = "mutated outside"
        snapshot.clear()

        assert seeded_store.get_task(1).title == "Clean the carpet"
        assert len(seeded_store) == 3


class TestUpdate:

    def test_replaces_title_and_flag(self, seeded_store):
        updated = seeded_store.update_task(1, "Updated Task", completed=True)
        assert updated == Task(id=1, title="Updated Task", completed=True)
        assert seeded_store.get_task(1) == updated

    def test_completed_defaults_to_false(self, seeded_store):
        assert seeded_store.update_task(123, "Reschedule").completed is False

    def test_unknown_id(self, seeded_store):
        with pytest.raises(TaskNotFoundError) as exc_info:
            seeded_store.update_task(999, "Nope")
        assert exc_info.value.message == "No task found with ID 999"

    def test_title_checked_before_lookup(self, seeded_store):
        """
        Scenario: Empty title for an id that does not exist.
        Expected: Validation wins over not-found.
        """
        with pytest.raises(EmptyTitleError):
            seeded_store.update_task(999, "")

    @pytest.mark.parametrize("title", ["", "   ", None])
    def test_empty_title_mutates_nothing(self, seeded_store, title):
        before = seeded_store.list_tasks()

        with pytest.raises(EmptyTitleError):
            seeded_store.update_task(1, title, completed=True)

        assert seeded_store.list_tasks() == before
        assert seeded_store.last_id == 123

    def test_unknown_id_mutates_nothing(self, seeded_store):
        before = seeded_store.list_tasks()

        with pytest.raises(TaskNotFoundError):
            seeded_store.update_task(999, "Nope", completed=True)

        assert seeded_store.list_tasks() == before
        assert seeded_store.last_id == 123


class TestDelete:

    def test_preserves_relative_order(self, seeded_store):
        seeded_store.delete_task(2)
        assert [t.id for t in seeded_store.list_tasks()] == [1, 123]

    def test_unknown_id(self, seeded_store):
        with pytest.raises(TaskNotFoundError):
            seeded_store.delete_task(999)
        assert len(seeded_store) == 3

    def test_get_after_delete(self, seeded_store):
        seeded_store.delete_task(1)
        with pytest.raises(TaskNotFoundError):
            seeded_store.get_task(1)


class TestReplace:

    def test_recomputes_counter(self, seeded_store):
        seeded_store.replace([Task(id=10, title="a"), Task(id=4, title="b")])
        assert seeded_store.last_id == 10
        assert seeded_store.create_task("c").id == 11

    def test_empty_resets_counter(self, seeded_store):
        seeded_store.replace([])
        assert seeded_store.last_id == 0
        assert seeded_store.list_tasks() == []

    def test_duplicates_leave_state_untouched(self, seeded_store):
        before = seeded_store.list_tasks()

        with pytest.raises(DuplicateTaskIdError):
            seeded_store.replace([Task(id=5, title="a"), Task(id=5, title="b")])

        assert seeded_store.list_tasks() == before
        assert seeded_store.last_id == 123
