# task_tracker/core/use_cases/save_tasks.py
import structlog

from task_tracker.core.ports.task_repository import ITaskRepository
from task_tracker.core.task_store import TaskStore

logger = structlog.get_logger()


class SaveTasks:
    """
    Use Case: writes the current collection to the repository.

    The snapshot is taken under the store lock; the write itself runs
    after the lock is released so requests are not blocked on disk I/O.
    """

    def __init__(self, store: TaskStore, repository: ITaskRepository):
        self.store = store
        self.repository = repository

    def execute(self) -> int:
        snapshot = self.store.list_tasks()
        self.repository.save(snapshot)
        logger.info("tasks_saved", path=self.repository.location, count=len(snapshot))
        return len(snapshot)
