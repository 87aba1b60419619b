# task_tracker\core\task_store.py
import threading
from typing import Iterable, List, Optional

import structlog

from task_tracker.core.domain.exceptions import (
    DuplicateTaskIdError,
    EmptyTitleError,
    TaskNotFoundError,
)
from task_tracker.core.domain.models import Task

logger = structlog.get_logger()


def _require_title(title: object) -> str:
    if not isinstance(title, str) or not title.strip():
        raise EmptyTitleError()
    return title


class TaskStore:
    """
    In-memory owner of the Task Collection and the Identifier Counter.

    Every public operation holds one exclusive lock for its whole duration,
    so concurrent calls are serializable and a listing never sees a
    half-applied mutation. Nothing inside the locked region blocks:
    validation happens before the lock is taken, logging after it is released.

    Tasks handed out are copies; callers cannot mutate store state.
    """

    def __init__(self, tasks: Optional[Iterable[Task]] = None) -> None:
        self._lock = threading.Lock()
        self._tasks: List[Task] = []
        self._last_id = 0
        if tasks is not None:
            self.replace(tasks)

    def __len__(self) -> int:
        with self._lock:
            return len(self._tasks)

    @property
    def last_id(self) -> int:
        """Highest identifier ever assigned or loaded."""
        with self._lock:
            return self._last_id

    # --- Queries ---

    def list_tasks(self) -> List[Task]:
        """Snapshot of all tasks in insertion order."""
        with self._lock:
            return [task.model_copy() for task in self._tasks]

    def get_task(self, task_id: int) -> Task:
        with self._lock:
            return self._tasks[self._index_of(task_id)].model_copy()

    # --- Mutations ---

    def create_task(self, title: str, completed: bool = False) -> Task:
        """
        Appends a new task and assigns it the next identifier.

        Raises:
            EmptyTitleError: title is missing, empty or whitespace-only.
        """
        _require_title(title)
        with self._lock:
            task = Task(id=self._last_id + 1, title=title, completed=bool(completed))
            self._last_id = task.id
            self._tasks.append(task)
            created = task.model_copy()

        logger.info("task_created", task_id=created.id)
        return created

    def update_task(self, task_id: int, title: str, completed: bool = False) -> Task:
        """
        Replaces title and completed of an existing task. The id never changes.

        Raises:
            EmptyTitleError: title is missing, empty or whitespace-only.
            TaskNotFoundError: no task has this id.
        """
        _require_title(title)
        with self._lock:
            task = self._tasks[self._index_of(task_id)]
            task.title = title
            task.completed = bool(completed)
            updated = task.model_copy()

        logger.info("task_updated", task_id=task_id, completed=updated.completed)
        return updated

    def delete_task(self, task_id: int) -> None:
        """
        Removes a task, keeping the relative order of the others.
        The freed id is never handed out again.

        Raises:
            TaskNotFoundError: no task has this id.
        """
        with self._lock:
            del self._tasks[self._index_of(task_id)]

        logger.info("task_deleted", task_id=task_id)

    def replace(self, tasks: Iterable[Task]) -> None:
        """
        Swaps the whole collection in one step and recomputes the counter
        as the highest loaded id (0 when empty).

        Raises:
            DuplicateTaskIdError: two tasks share an id. The store is left untouched.
        """
        incoming = [task.model_copy() for task in tasks]
        seen = set()
        for task in incoming:
            if task.id in seen:
                raise DuplicateTaskIdError(task.id)
            seen.add(task.id)

        with self._lock:
            self._tasks = incoming
            self._last_id = max(seen, default=0)
            last_id = self._last_id

        logger.info("tasks_replaced", count=len(incoming), last_id=last_id)

    # --- Helpers (caller holds the lock) ---

    def _index_of(self, task_id: int) -> int:
        for index, task in enumerate(self._tasks):
            if task.id == task_id:
                return index
        raise TaskNotFoundError(task_id)
