# tests\conftest.py
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from task_tracker.adapters.api.main import create_app
from task_tracker.core.domain.models import Task
from task_tracker.core.ports.task_repository import ITaskRepository
from task_tracker.core.task_store import TaskStore
from task_tracker.shared.config import AppEnv, Settings
from task_tracker.shared.container import build_container


def seed_tasks():
    return [
        Task(id=1, title="Clean the carpet", completed=False),
        Task(id=2, title="Pick up the groceries", completed=False),
        Task(id=123, title="Doctor's appointment", completed=True),
    ]


@pytest.fixture
def tasks_file(tmp_path):
    """Path of a task file that does not exist yet."""
    return tmp_path / "tasks.json"


@pytest.fixture
def test_settings(tasks_file):
    return Settings(
        APP_ENV=AppEnv.TESTING,
        TASKS_FILE=str(tasks_file),
        LOG_FORMAT="console",
        OTEL_EXPORTER_OTLP_ENDPOINT=None,
    )


@pytest.fixture
def seeded_store():
    """The three tasks the service ships with; the next id is 124."""
    return TaskStore(seed_tasks())


@pytest.fixture
def mock_repo():
    """Returns a mock Task Repository."""
    repo = MagicMock(spec=ITaskRepository)
    repo.location = "memory://tasks"
    repo.exists.return_value = True
    repo.load.return_value = []
    repo.health_check.return_value = True
    return repo


@pytest.fixture
def container(test_settings, seeded_store):
    """
    Dependency Injection Container for testing.
    The real JSON repository points at a temp file; the store is pre-seeded.
    """
    container = build_container(test_settings)
    container.task_store.override(seeded_store)

    yield container

    container.unwire()
    container.task_store.reset_override()


@pytest.fixture
def client(container, test_settings):
    """
    Returns a FastAPI TestClient with the lifespan running.
    The temp task file does not exist, so startup keeps the seeded store.
    """
    app = create_app(container=container, app_settings=test_settings)
    with TestClient(app) as c:
        yield c
