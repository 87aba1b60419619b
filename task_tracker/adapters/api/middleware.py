# task_tracker\adapters\api\middleware.py
import time
from typing import Awaitable, Callable, Iterable

import structlog
from fastapi import Request, Response, status

from task_tracker.adapters.api.errors import error_response

logger = structlog.get_logger()

CallNext = Callable[[Request], Awaitable[Response]]


async def log_request_duration(request: Request, call_next: CallNext) -> Response:
    """Logs method, path, status and duration of every request."""
    start = time.perf_counter()
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    try:
        response = await call_next(request)
        status_code = response.status_code
        return response
    finally:
        logger.info(
            "request_handled",
            method=request.method,
            path=request.url.path,
            client=request.client.host if request.client else None,
            status=status_code,
            duration_ms=round((time.perf_counter() - start) * 1000, 3),
        )


def require_json_content_type(methods: Iterable[str] = ("POST", "PUT")):
    """
    Builds a middleware rejecting bodies not declared as application/json
    with 415 for the given methods.
    """
    guarded = {m.upper() for m in methods}

    async def middleware(request: Request, call_next: CallNext) -> Response:
        if request.method in guarded:
            media_type = request.headers.get("content-type", "").split(";")[0].strip().lower()
            if media_type != "application/json":
                logger.info("unsupported_media_type", method=request.method, path=request.url.path, content_type=media_type)
                return error_response(status.HTTP_415_UNSUPPORTED_MEDIA_TYPE, "Unsupported Media Type")
        return await call_next(request)

    return middleware
