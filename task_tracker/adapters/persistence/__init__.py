# task_tracker\adapters\persistence\__init__.py
"""
Persistence Adapters.

Implements the `ITaskRepository` port on top of the local file system.

Components:
- JsonFileTaskRepository: one JSON array per file, previous version kept as `<file>.bak`.
"""

from .json_file_repo import JsonFileTaskRepository

__all__ = [
    "JsonFileTaskRepository",
]
