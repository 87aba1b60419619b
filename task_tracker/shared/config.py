# task_tracker\shared\config.py
from enum import Enum
from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class AppEnv(str, Enum):
    DEVELOPMENT = "development"
    PRODUCTION = "production"
    TESTING = "testing"


class Settings(BaseSettings):
    """
    Central Configuration Registry.
    Strictly typed and validated via Pydantic; every field can be set
    through an environment variable of the same name or a `.env` file.
    """

    # --- Application Meta ---
    APP_NAME: str = "task-tracker"
    APP_ENV: AppEnv = AppEnv.DEVELOPMENT
    DEBUG: bool = False

    # --- HTTP Server ---
    HOST: str = "localhost"
    PORT: int = 8000
    SHUTDOWN_TIMEOUT_SEC: int = 10
    CORS_ORIGINS: List[str] = ["*"]
    # Reject POST/PUT bodies that are not sent as application/json (415)
    ENFORCE_JSON_CONTENT_TYPE: bool = False

    # --- Persistence ---
    TASKS_FILE: str = "data/tasks.json"
    # If False, a missing file on first boot starts an empty collection
    TASKS_FILE_REQUIRED: bool = False
    # 0 disables periodic checkpoints; the shutdown save always runs
    AUTOSAVE_INTERVAL_SEC: float = 0.0

    # --- Logging & Observability ---
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "json"
    OTEL_SERVICE_NAME: str = "task-tracker"
    OTEL_EXPORTER_OTLP_ENDPOINT: Optional[str] = None

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


settings = Settings()
