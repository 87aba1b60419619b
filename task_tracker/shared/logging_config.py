# task_tracker\shared\logging_config.py
import logging
import sys
from typing import Optional

import structlog
from opentelemetry import trace

from task_tracker.shared.config import Settings, settings


def add_trace_context(_, __, event_dict):
    """
    Adds `trace_id`/`span_id` while a request span is active, so a
    `request_handled` line can be found from its trace.
    Nothing is added when tracing is disabled.
    """
    ctx = trace.get_current_span().get_span_context()
    if ctx.is_valid:
        event_dict["trace_id"] = trace.format_trace_id(ctx.trace_id)
        event_dict["span_id"] = trace.format_span_id(ctx.span_id)
    return event_dict


def add_service_info(app_settings: Settings):
    """Builds a processor stamping every event with the service name and environment."""
    service = app_settings.APP_NAME
    env = app_settings.APP_ENV.value

    def processor(_, __, event_dict):
        event_dict.setdefault("service", service)
        event_dict.setdefault("env", env)
        return event_dict

    return processor


def build_processors(app_settings: Settings) -> list:
    processors = [
        structlog.contextvars.merge_contextvars,
        add_service_info(app_settings),
        add_trace_context,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    # JSON lines or colored console output
    if app_settings.LOG_FORMAT == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())
    return processors


def configure_logging(app_settings: Optional[Settings] = None) -> None:
    """
    Configures structlog for the task events and routes the standard
    logging library (uvicorn, opentelemetry) to stdout at the same level.
    """
    app_settings = app_settings or settings
    level = logging.getLevelName(app_settings.LOG_LEVEL.upper())

    structlog.configure(
        processors=build_processors(app_settings),
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level)
