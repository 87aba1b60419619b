# task_tracker\core\use_cases\__init__.py
"""
Core Use Cases (Application Logic).

The persistence facility: composing the Task Store with a Task Repository.
- `LoadTasks`: seeds the store from the last checkpoint at startup.
- `SaveTasks`: snapshots the store and writes a checkpoint.
"""

from .load_tasks import LoadTasks
from .save_tasks import SaveTasks

__all__ = [
    "LoadTasks",
    "SaveTasks",
]
