# tests\core\test_domain_models.py
import pytest
from pydantic import ValidationError

from task_tracker.core.domain.exceptions import (
    DomainError,
    EmptyTitleError,
    InvalidPayloadError,
    SerializationError,
    StorageDecodeError,
    TaskNotFoundError,
    TaskStorageError,
    TaskValidationError,
)
from task_tracker.core.domain.models import Task


class TestTask:

    def test_completed_defaults_to_false(self):
        task = Task(id=1, title="Write report")
        assert task.completed is False

    def test_wire_field_order(self):
        """
        Scenario: A task is serialized.
        Expected: Keys appear as id, title, completed.
        """
        task = Task(id=7, title="Water plants", completed=True)
        assert task.model_dump_json() == '{"id":7,"title":"Water plants","completed":true}'

    @pytest.mark.parametrize("task_id", [0, -1])
    def test_id_must_be_positive(self, task_id):
        with pytest.raises(ValidationError):
            Task(id=task_id, title="x")

    @pytest.mark.parametrize("title", ["", "   ", "\t\n"])
    def test_blank_title_rejected(self, title):
        with pytest.raises(ValidationError):
            Task(id=1, title=title)

    def test_title_kept_verbatim(self):
        task = Task(id=1, title="  padded  ")
        assert task.title == "  padded  "


class TestExceptions:

    def test_messages(self):
        assert InvalidPayloadError().message == "Invalid JSON format"
        assert EmptyTitleError().message == "Task title cannot be empty"
        assert TaskNotFoundError(42).message == "No task found with ID 42"
        assert SerializationError("boom").message == "Internal server error: JSON marshalling failed"

    def test_hierarchy(self):
        assert isinstance(EmptyTitleError(), TaskValidationError)
        assert isinstance(TaskNotFoundError(1), DomainError)

        err = StorageDecodeError("/tmp/tasks.json", "bad file")
        assert isinstance(err, TaskStorageError)
        assert err.path == "/tmp/tasks.json"
        assert str(err) == "bad file"
