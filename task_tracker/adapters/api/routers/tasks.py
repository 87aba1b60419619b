# task_tracker\adapters\api\routers\tasks.py
from typing import List

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, status

from task_tracker.adapters.api.dependencies import get_task_id, read_task_payload
from task_tracker.adapters.api.schemas import DeleteResult, ErrorResponse, TaskPayload
from task_tracker.core.domain.models import Task
from task_tracker.core.task_store import TaskStore
from task_tracker.shared.container import Container

router = APIRouter(prefix="/tasks", tags=["tasks"])

_ERRORS = {
    status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
    status.HTTP_404_NOT_FOUND: {"model": ErrorResponse},
    status.HTTP_405_METHOD_NOT_ALLOWED: {"model": ErrorResponse},
}

# `/tasks/` is served like `/tasks` for the collection routes.
# Every other path below `/tasks/` goes through get_task_id, which owns
# the "Invalid URL" / "Invalid Task ID" decisions.


@router.get("", response_model=List[Task], summary="List tasks")
@router.get("/", response_model=List[Task], include_in_schema=False)
@inject
async def list_tasks(
    store: TaskStore = Depends(Provide[Container.task_store]),
) -> List[Task]:
    """Returns every task in insertion order (`[]` when empty)."""
    return store.list_tasks()


@router.post(
    "",
    response_model=Task,
    status_code=status.HTTP_201_CREATED,
    responses=_ERRORS,
    summary="Create a task",
)
@router.post(
    "/",
    response_model=Task,
    status_code=status.HTTP_201_CREATED,
    include_in_schema=False,
)
@inject
async def create_task(
    payload: TaskPayload = Depends(read_task_payload),
    store: TaskStore = Depends(Provide[Container.task_store]),
) -> Task:
    """
    Creates a task. The id is assigned by the store; `completed`
    defaults to false.
    """
    return store.create_task(title=payload.title or "", completed=bool(payload.completed))


@router.put(
    "/{task_ref:path}",
    response_model=Task,
    responses=_ERRORS,
    summary="Update a task",
)
@inject
async def update_task(
    task_id: int = Depends(get_task_id),
    payload: TaskPayload = Depends(read_task_payload),
    store: TaskStore = Depends(Provide[Container.task_store]),
) -> Task:
    """Replaces title and completion flag of an existing task."""
    return store.update_task(task_id, title=payload.title or "", completed=bool(payload.completed))


@router.delete(
    "/{task_ref:path}",
    response_model=DeleteResult,
    responses=_ERRORS,
    summary="Delete a task",
)
@inject
async def delete_task(
    task_id: int = Depends(get_task_id),
    store: TaskStore = Depends(Provide[Container.task_store]),
) -> DeleteResult:
    store.delete_task(task_id)
    return DeleteResult()
