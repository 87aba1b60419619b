# task_tracker\core\use_cases\load_tasks.py
import structlog

from task_tracker.core.domain.exceptions import DuplicateTaskIdError, StorageDecodeError
from task_tracker.core.ports.task_repository import ITaskRepository
from task_tracker.core.task_store import TaskStore

logger = structlog.get_logger()


class LoadTasks:
    """
    Use Case: replaces the store contents with the persisted collection.

    The store is only touched once the whole file has been read and
    validated, so a failed load leaves the previous state in place.
    """

    def __init__(self, store: TaskStore, repository: ITaskRepository):
        self.store = store
        self.repository = repository

    def execute(self) -> int:
        """
        Returns:
            The number of tasks loaded.

        Raises:
            StorageIOError: the file cannot be opened.
            StorageDecodeError: the file is not a valid JSON array of tasks.
        """
        logger.info("tasks_load_started", path=self.repository.location)

        tasks = self.repository.load()
        try:
            self.store.replace(tasks)
        except DuplicateTaskIdError as e:
            raise StorageDecodeError(self.repository.location, e.message) from e

        logger.info(
            "tasks_loaded",
            path=self.repository.location,
            count=len(tasks),
            last_id=self.store.last_id,
        )
        return len(tasks)
