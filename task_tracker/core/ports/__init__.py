# task_tracker\core\ports\__init__.py
"""
Core Ports (Interfaces).

This package defines the Protocols that the Infrastructure Adapters must
implement, so the core can persist tasks without knowing where they go.
"""

from .task_repository import ITaskRepository

__all__ = [
    "ITaskRepository",
]
