# task_tracker/adapters/api/dependencies.py
import posixpath
import re

import structlog
from fastapi import Request
from pydantic import ValidationError

from task_tracker.adapters.api.schemas import TaskPayload
from task_tracker.core.domain.exceptions import (
    InvalidPayloadError,
    InvalidTaskIdError,
    InvalidURLError,
)

logger = structlog.get_logger()

_DIGITS = re.compile(r"[0-9]+")

# Ids are signed 64-bit integers on the wire
MAX_TASK_ID = 2**63 - 1
_MAX_TASK_ID_DIGITS = len(str(MAX_TASK_ID))


# -----------------------------------------------------------------------------
# Path parameters
# -----------------------------------------------------------------------------
def parse_task_ref(task_ref: str) -> int:
    """
    Extracts the task id from everything after `/tasks/`.

    The remainder is cleaned first (`1/` and `/1` both mean `1`) and must be
    exactly one segment holding a positive integer.

    Raises:
        InvalidURLError: zero or several segments remain.
        InvalidTaskIdError: the segment is not a positive integer within
            the signed 64-bit range.
    """
    cleaned = posixpath.normpath("/" + task_ref).strip("/")
    segments = cleaned.split("/") if cleaned else []
    if len(segments) != 1:
        raise InvalidURLError()

    segment = segments[0]
    if not _DIGITS.fullmatch(segment):
        raise InvalidTaskIdError()

    # Leading zeros are allowed; the length check keeps int() bounded.
    digits = segment.lstrip("0")
    if not digits or len(digits) > _MAX_TASK_ID_DIGITS:
        raise InvalidTaskIdError()

    task_id = int(digits)
    if task_id > MAX_TASK_ID:
        raise InvalidTaskIdError()
    return task_id


def get_task_id(task_ref: str) -> int:
    """FastAPI dependency: the `{task_ref:path}` parameter as a task id."""
    try:
        return parse_task_ref(task_ref)
    except (InvalidURLError, InvalidTaskIdError) as e:
        logger.warning("task_ref_rejected", task_ref=task_ref, error=e.message)
        raise


# -----------------------------------------------------------------------------
# Request bodies
# -----------------------------------------------------------------------------
async def read_task_payload(request: Request) -> TaskPayload:
    """
    Reads and validates the request body before any store lock is taken.

    Raises:
        InvalidPayloadError: malformed JSON, a non-object document, or
            fields of the wrong type.
    """
    body = await request.body()
    try:
        return TaskPayload.model_validate_json(body)
    except ValidationError as e:
        logger.warning(
            "task_payload_rejected",
            method=request.method,
            path=request.url.path,
            errors=e.error_count(),
        )
        raise InvalidPayloadError() from e
