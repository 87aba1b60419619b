# task_tracker\adapters\api\routers\health.py
from typing import Dict, Union

import structlog
from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, Response, status

from task_tracker.core.ports.task_repository import ITaskRepository
from task_tracker.core.task_store import TaskStore
from task_tracker.shared.container import Container

logger = structlog.get_logger()

router = APIRouter(prefix="/health", tags=["System"])


@router.get("/live", status_code=status.HTTP_200_OK)
async def liveness_probe():
    """
    Liveness Probe.
    Returns 200 OK if the process is serving requests.
    """
    return {"status": "ok", "service": "task-tracker"}


@router.get("/ready", status_code=status.HTTP_200_OK)
@inject
async def readiness_probe(
    response: Response,
    repository: ITaskRepository = Depends(Provide[Container.task_repository]),
    store: TaskStore = Depends(Provide[Container.task_store]),
) -> Dict[str, Union[str, int]]:
    """
    Readiness Probe.
    Returns 503 Service Unavailable if the task file cannot be written,
    since the shutdown checkpoint would be lost.
    """
    health_status: Dict[str, Union[str, int]] = {"storage": "down", "tasks": len(store)}

    try:
        if repository.health_check():
            health_status["storage"] = "up"
    except OSError as e:
        logger.error("health_check_failed", component="storage", error=str(e))

    if health_status["storage"] != "up":
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
        logger.warning("readiness_probe_failed", status=health_status)

    return health_status
