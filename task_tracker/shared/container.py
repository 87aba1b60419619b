# task_tracker\shared\container.py
from typing import Optional

from dependency_injector import containers, providers

from task_tracker.adapters.persistence.json_file_repo import JsonFileTaskRepository
from task_tracker.core.task_store import TaskStore
from task_tracker.core.use_cases.load_tasks import LoadTasks
from task_tracker.core.use_cases.save_tasks import SaveTasks
from task_tracker.shared.config import Settings, settings


class Container(containers.DeclarativeContainer):
    """
    Dependency Injection Container.

    The Task Store is a Singleton: it is the one place task state lives
    for the lifetime of the process.
    """

    # 1. Configuration
    config = providers.Configuration()

    # 2. Gateways (Infrastructure Adapters)
    task_repository = providers.Singleton(
        JsonFileTaskRepository,
        path=config.TASKS_FILE,
    )

    # 3. State
    task_store = providers.Singleton(
        TaskStore
    )

    # 4. Use Cases (new instance per call, shared Singletons injected)
    load_tasks_use_case = providers.Factory(
        LoadTasks,
        store=task_store,
        repository=task_repository,
    )

    save_tasks_use_case = providers.Factory(
        SaveTasks,
        store=task_store,
        repository=task_repository,
    )


def build_container(app_settings: Optional[Settings] = None) -> Container:
    """Creates a container configured from the given (or global) settings."""
    container = Container()
    container.config.from_dict((app_settings or settings).model_dump())
    return container
