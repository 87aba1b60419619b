# task_tracker/core/domain/exceptions.py
class DomainError(Exception):
    """Base class for all domain-level exceptions."""
    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)

# --- Validation Errors ---

class TaskValidationError(DomainError):
    """Raised when a task payload is rejected. Nothing is mutated."""

class InvalidPayloadError(TaskValidationError):
    """Raised when a request body is not a JSON object of the Task shape."""
    def __init__(self):
        super().__init__("Invalid JSON format")

class EmptyTitleError(TaskValidationError):
    """Raised when a create/update carries an empty or whitespace-only title."""
    def __init__(self):
        super().__init__("Task title cannot be empty")

# --- Entity Not Found Errors ---

class TaskNotFoundError(DomainError):
    """Raised when the referenced task id is not in the collection."""
    def __init__(self, task_id: int):
        self.task_id = task_id
        super().__init__(f"No task found with ID {task_id}")

class DuplicateTaskIdError(DomainError):
    """Raised when a task collection contains the same id twice."""
    def __init__(self, task_id: int):
        self.task_id = task_id
        super().__init__(f"Duplicate task ID {task_id}")

# --- Routing Errors ---

class RoutingError(DomainError):
    """Raised when the request path cannot be mapped to a task id."""

class InvalidURLError(RoutingError):
    def __init__(self):
        super().__init__("Invalid URL")

class InvalidTaskIdError(RoutingError):
    def __init__(self):
        super().__init__("Invalid Task ID")

# --- Storage Errors ---

class TaskStorageError(DomainError):
    """Base class for failures of the persisted task file."""
    def __init__(self, path: str, message: str):
        self.path = path
        super().__init__(message)

class StorageIOError(TaskStorageError):
    """Raised when the task file cannot be opened, created or written."""

class StorageDecodeError(TaskStorageError):
    """Raised when the task file is not a valid JSON array of tasks."""

class SerializationError(DomainError):
    """Raised when tasks cannot be encoded to JSON."""
    def __init__(self, details: str):
        self.details = details
        super().__init__("Internal server error: JSON marshalling failed")
