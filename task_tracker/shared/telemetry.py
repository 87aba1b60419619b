# task_tracker\shared\telemetry.py
from typing import Optional

import structlog
from fastapi import FastAPI
from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.http.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.sdk.resources import SERVICE_NAME, SERVICE_VERSION, Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor

from task_tracker import __version__
from task_tracker.shared.config import Settings, settings

logger = structlog.get_logger()

TRACES_PATH = "/v1/traces"

# Health probes are not traced
UNTRACED_URLS = "health/live,health/ready"


def build_resource(app_settings: Settings) -> Resource:
    """Describes this process on every exported span."""
    return Resource.create({
        SERVICE_NAME: app_settings.OTEL_SERVICE_NAME,
        SERVICE_VERSION: __version__,
        "deployment.environment": app_settings.APP_ENV.value,
        "task_tracker.tasks_file": app_settings.TASKS_FILE,
    })


def traces_endpoint(base_url: str) -> str:
    """Accepts either the collector root or the full traces URL."""
    base_url = base_url.rstrip("/")
    if base_url.endswith(TRACES_PATH):
        return base_url
    return base_url + TRACES_PATH


def setup_telemetry(app_settings: Optional[Settings] = None) -> bool:
    """
    Installs an OTLP/HTTP tracer provider when OTEL_EXPORTER_OTLP_ENDPOINT is set.

    Returns:
        True if tracing was enabled.
    """
    app_settings = app_settings or settings
    if not app_settings.OTEL_EXPORTER_OTLP_ENDPOINT:
        logger.debug("telemetry_disabled")
        return False

    endpoint = traces_endpoint(app_settings.OTEL_EXPORTER_OTLP_ENDPOINT)
    provider = TracerProvider(resource=build_resource(app_settings))
    provider.add_span_processor(BatchSpanProcessor(OTLPSpanExporter(endpoint=endpoint)))
    trace.set_tracer_provider(provider)

    logger.info("telemetry_enabled", service=app_settings.OTEL_SERVICE_NAME, endpoint=endpoint)
    return True


def instrument_fastapi(app: FastAPI, app_settings: Optional[Settings] = None) -> None:
    """Traces every task request; the health probes are left out."""
    app_settings = app_settings or settings
    if app_settings.OTEL_EXPORTER_OTLP_ENDPOINT:
        FastAPIInstrumentor.instrument_app(app, excluded_urls=UNTRACED_URLS)
