# task_tracker\core\ports\task_repository.py
from typing import List, Protocol, Sequence

from task_tracker.core.domain.models import Task


class ITaskRepository(Protocol):
    """
    Port for checkpointing the Task Collection.
    Implementations are synchronous so a shutdown hook can call them directly.
    """

    @property
    def location(self) -> str:
        """Human readable address of the storage (e.g. a file path)."""
        ...

    def exists(self) -> bool:
        """Returns True if a previous checkpoint is available."""
        ...

    def load(self) -> List[Task]:
        """
        Reads the persisted collection.

        Raises:
            StorageIOError: the storage cannot be opened.
            StorageDecodeError: the contents are not a valid list of tasks.
        """
        ...

    def save(self, tasks: Sequence[Task]) -> None:
        """
        Persists the collection, keeping the previous version as a backup.

        Raises:
            StorageIOError: the destination cannot be created or written.
        """
        ...

    def health_check(self) -> bool:
        """Returns True if the underlying storage is writable."""
        ...
