# task_tracker\adapters\api\__init__.py
"""
REST API Adapter.

This package is the HTTP entry point for the Task Tracker.
It is built on FastAPI and follows the Hexagonal Architecture principles:
- It depends on `task_tracker.core` (Task Store, Use Cases, Models).
- It wires the `task_tracker.shared.container` to inject dependencies.
- It does NOT contain business logic.
"""

from .main import create_app

__all__ = ["create_app"]
