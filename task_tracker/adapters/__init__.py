# task_tracker\adapters\__init__.py
"""
Infrastructure Adapters.

This package contains the concrete implementations of the Ports defined in
`task_tracker.core.ports`, plus the driving adapter:
- `api`: The Primary Adapter (Driving) - FastAPI web server.
- `persistence`: Secondary Adapter (Driven) - JSON task file with backups.

Dependencies point INWARD: these modules depend on `task_tracker.core`,
but `task_tracker.core` never imports from here.
"""
