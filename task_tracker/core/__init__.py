# task_tracker\core\__init__.py
"""
Core Domain Layer.

This package contains the business logic and entities of the service:
- The Task entity and the domain error taxonomy (`domain`).
- The in-memory Task Store, the single owner of all task state.
- The persistence Port the infrastructure layer must implement (`ports`).
- The Load/Save use cases that compose the store with a repository.

Nothing here imports FastAPI or touches the file system directly.
"""
