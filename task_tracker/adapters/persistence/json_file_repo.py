# task_tracker\adapters\persistence\json_file_repo.py
import json
import os
from pathlib import Path
from typing import List, Sequence, Union

import structlog
from pydantic import TypeAdapter, ValidationError

from task_tracker.core.domain.exceptions import (
    SerializationError,
    StorageDecodeError,
    StorageIOError,
)
from task_tracker.core.domain.models import Task

logger = structlog.get_logger()

_TASK_LIST = TypeAdapter(List[Task])


class JsonFileTaskRepository:
    """
    Concrete implementation of the Task Repository using a single JSON file.

    File format: a JSON array of task objects indented with two spaces.
    Every save first renames the current file to `<file>.bak`.
    """

    BACKUP_SUFFIX = ".bak"

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    @property
    def location(self) -> str:
        return str(self.path)

    @property
    def backup_path(self) -> Path:
        return self.path.with_name(self.path.name + self.BACKUP_SUFFIX)

    def exists(self) -> bool:
        return self.path.is_file()

    # --- Interface Implementation ---

    def load(self) -> List[Task]:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                raw = f.read()
        except OSError as e:
            logger.error("task_file_read_failed", path=self.location, error=str(e))
            raise StorageIOError(self.location, f"Could not open task file {self.location}: {e}") from e

        try:
            # Strict: "1" is not an id and "true" is not a flag.
            return _TASK_LIST.validate_json(raw, strict=True)
        except ValidationError as e:
            logger.error("task_file_decode_failed", path=self.location, errors=e.error_count())
            raise StorageDecodeError(
                self.location,
                f"Task file {self.location} is not a valid JSON array of tasks",
            ) from e

    def save(self, tasks: Sequence[Task]) -> None:
        try:
            payload = json.dumps([task.model_dump() for task in tasks], indent=2, ensure_ascii=False)
        except (TypeError, ValueError) as e:
            raise SerializationError(str(e)) from e

        self._rotate_backup()

        try:
            with open(self.path, "w", encoding="utf-8") as f:
                f.write(payload)
                f.write("\n")
        except OSError as e:
            logger.error("task_file_write_failed", path=self.location, error=str(e))
            raise StorageIOError(self.location, f"Could not save tasks to {self.location}: {e}") from e

    def health_check(self) -> bool:
        """Checks that the directory holding the task file is writable."""
        directory = self.path.parent
        return directory.is_dir() and os.access(directory, os.W_OK)

    # --- Helpers ---

    def _rotate_backup(self) -> None:
        """Best effort: a failed backup is logged and the save goes on."""
        if not self.path.exists():
            return
        try:
            os.replace(self.path, self.backup_path)
        except OSError as e:
            logger.warning(
                "task_backup_failed",
                path=self.location,
                backup=str(self.backup_path),
                error=str(e),
            )
