# task_tracker\adapters\api\errors.py
from typing import Dict, Type

import structlog
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from task_tracker.core.domain.exceptions import (
    DomainError,
    RoutingError,
    SerializationError,
    TaskNotFoundError,
    TaskValidationError,
)

logger = structlog.get_logger()

INTERNAL_ERROR_MESSAGE = "Internal server error"

# Most specific class first
_STATUS_BY_ERROR: Dict[Type[DomainError], int] = {
    TaskValidationError: status.HTTP_400_BAD_REQUEST,
    RoutingError: status.HTTP_400_BAD_REQUEST,
    TaskNotFoundError: status.HTTP_404_NOT_FOUND,
    SerializationError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def error_response(status_code: int, message: str, headers=None) -> JSONResponse:
    """Every error leaves the service as {"error": "<message>"}."""
    return JSONResponse(status_code=status_code, content={"error": message}, headers=headers)


def status_for(exc: DomainError) -> int:
    for error_type, status_code in _STATUS_BY_ERROR.items():
        if isinstance(exc, error_type):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    """Maps domain failures onto their HTTP status."""
    status_code = status_for(exc)
    if status_code >= 500:
        logger.error("request_failed", method=request.method, path=request.url.path, error=exc.message)
        message = exc.message if isinstance(exc, SerializationError) else INTERNAL_ERROR_MESSAGE
        return error_response(status_code, message)

    logger.info(
        "request_rejected",
        method=request.method,
        path=request.url.path,
        status=status_code,
        error=exc.message,
    )
    return error_response(status_code, exc.message)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """
    Standardizes routing errors raised by Starlette (404 unknown path,
    405 unsupported method) into the service's error shape.
    """
    return error_response(exc.status_code, str(exc.detail), headers=getattr(exc, "headers", None))


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Catches unhandled exceptions to prevent crashing and leaking stack traces.
    """
    logger.error("unhandled_exception", method=request.method, path=request.url.path, exc_info=exc)
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DomainError, domain_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
