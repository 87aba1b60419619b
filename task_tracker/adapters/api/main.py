# task_tracker\adapters\api\main.py
import asyncio
import contextlib
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from task_tracker import __version__
from task_tracker.adapters.api.errors import register_exception_handlers
from task_tracker.adapters.api.middleware import log_request_duration, require_json_content_type
from task_tracker.core.domain.exceptions import DomainError, TaskStorageError
from task_tracker.core.use_cases.save_tasks import SaveTasks
from task_tracker.shared.config import AppEnv, Settings, settings
from task_tracker.shared.container import Container, build_container
from task_tracker.shared.logging_config import configure_logging
from task_tracker.shared.telemetry import instrument_fastapi, setup_telemetry

# Import Routers
# Note: We import the modules directly to ensure 'container.wire' works correctly
from task_tracker.adapters.api.routers import health, tasks

logger = structlog.get_logger()

WIRED_MODULES = [tasks, health]


def _load_initial_tasks(container: Container, app_settings: Settings) -> None:
    """
    Seeds the store before the server accepts requests.
    Any failure propagates and aborts startup.
    """
    repository = container.task_repository()
    if not repository.exists() and not app_settings.TASKS_FILE_REQUIRED:
        logger.warning("task_file_missing", path=repository.location, action="starting_empty")
        return

    try:
        container.load_tasks_use_case().execute()
    except TaskStorageError as e:
        logger.critical("task_load_failed", path=e.path, error=e.message)
        raise


def _save_on_shutdown(container: Container) -> None:
    """Final checkpoint. A failure is logged; shutdown continues."""
    try:
        container.save_tasks_use_case().execute()
    except DomainError as e:
        logger.error("task_save_failed", error=e.message)


async def _autosave_loop(save: SaveTasks, interval: float) -> None:
    while True:
        await asyncio.sleep(interval)
        try:
            await asyncio.to_thread(save.execute)
        except DomainError as e:
            logger.error("autosave_failed", error=e.message)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """
    Manages the application lifecycle.
    1. Startup: Loads the persisted tasks, starts the optional autosave.
    2. Shutdown: Runs after uvicorn has drained in-flight requests; writes the final checkpoint.
    """
    container: Container = app.state.container
    app_settings: Settings = app.state.settings

    logger.info("app_startup", env=app_settings.APP_ENV.value, tasks_file=app_settings.TASKS_FILE)
    _load_initial_tasks(container, app_settings)

    autosave: Optional[asyncio.Task] = None
    if app_settings.AUTOSAVE_INTERVAL_SEC > 0:
        autosave = asyncio.create_task(
            _autosave_loop(container.save_tasks_use_case(), app_settings.AUTOSAVE_INTERVAL_SEC)
        )
        logger.info("autosave_enabled", interval_sec=app_settings.AUTOSAVE_INTERVAL_SEC)

    try:
        yield
    finally:
        if autosave is not None:
            autosave.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await autosave
        _save_on_shutdown(container)
        logger.info("app_shutdown")


def create_app(
    container: Optional[Container] = None,
    app_settings: Optional[Settings] = None,
) -> FastAPI:
    """Factory function to create the FastAPI application."""
    app_settings = app_settings or settings
    configure_logging(app_settings)
    setup_telemetry(app_settings)

    if container is None:
        container = build_container(app_settings)

    # Routers use @inject; they must resolve against this container.
    container.wire(modules=WIRED_MODULES)

    docs_enabled = app_settings.APP_ENV != AppEnv.PRODUCTION
    app = FastAPI(
        title=app_settings.APP_NAME,
        version=__version__,
        description="Task Tracker JSON API",
        lifespan=lifespan,
        docs_url="/docs" if docs_enabled else None,
        redoc_url=None,
    )
    app.state.container = container
    app.state.settings = app_settings

    # Global Middleware (the last one added runs first)
    if app_settings.ENFORCE_JSON_CONTENT_TYPE:
        app.middleware("http")(require_json_content_type())
    app.middleware("http")(log_request_duration)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    instrument_fastapi(app, app_settings)
    register_exception_handlers(app)

    # Register Routers
    app.include_router(health.router)
    app.include_router(tasks.router)

    return app
