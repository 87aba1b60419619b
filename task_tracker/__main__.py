# task_tracker\__main__.py
"""
Entry point for the Task Tracker HTTP service.

Intended usage:
    python -m task_tracker
    task-tracker

uvicorn handles SIGINT/SIGTERM: it stops accepting connections, waits for
in-flight requests (at most SHUTDOWN_TIMEOUT_SEC), then runs the application
lifespan shutdown, which writes the final checkpoint.
"""

import uvicorn

from task_tracker.shared.config import settings


def main() -> None:
    uvicorn.run(
        "task_tracker.adapters.api.main:create_app",
        factory=True,
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        timeout_graceful_shutdown=settings.SHUTDOWN_TIMEOUT_SEC,
    )


if __name__ == "__main__":
    main()
