# task_tracker\adapters\api\routers\__init__.py
"""
API Route Definitions.

- `tasks`: CRUD endpoints for the task collection (Core Value).
- `health`: System health checks.
"""

from .tasks import router as tasks_router
from .health import router as health_router

__all__ = [
    "tasks_router",
    "health_router",
]
