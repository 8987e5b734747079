"""Student Routes - HTTP surface for create, get-by-id, and list.

Invariants:
    - Storage resolved from app.state per request (injected at app creation)
    - Bodies over settings.max_body_bytes rejected with 413 before decoding
    - Every route returns exactly one response; failures raise typed errors
      that the registered error handlers turn into the error envelope

Design Decisions:
    - Raw body read instead of a pydantic body parameter: empty body,
      malformed JSON, and field-rule violations each get their own response
    - Path id taken as str and parsed by the handler: non-integer ids are
      400 PATH_PARSE_ERROR, not framework 422s
"""

import logging

from fastapi import APIRouter, Depends, Request

from students_api.api.response import write_success
from students_api.config import get_settings
from students_api.core.errors import PayloadTooLargeError
from students_api.core.storage_protocol import StudentStorage
from students_api.services.student_handlers import StudentHandlers

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/students", tags=["students"])


def get_storage(request: Request) -> StudentStorage:
    """FastAPI dependency for the injected storage backend."""
    storage = request.app.state.storage
    if storage is None:
        raise RuntimeError("Storage not initialized")
    return storage


def get_handlers(
    storage: StudentStorage = Depends(get_storage),
) -> StudentHandlers:
    return StudentHandlers(storage)


async def read_limited_body(request: Request) -> bytes:
    """Read the request body, enforcing the configured size limit."""
    limit = get_settings().max_body_bytes
    declared = request.headers.get("content-length")
    if declared and declared.isdigit() and int(declared) > limit:
        raise PayloadTooLargeError(limit)
    body = bytearray()
    async for chunk in request.stream():
        body.extend(chunk)
        if len(body) > limit:
            raise PayloadTooLargeError(limit)
    return bytes(body)


@router.post("")
async def create_student(
    request: Request, handlers: StudentHandlers = Depends(get_handlers),
):
    """Create a student; responds 201 with the assigned id."""
    body = await read_limited_body(request)
    http_status, payload = await handlers.create(body)
    return write_success(http_status, payload)


@router.get("")
async def list_students(handlers: StudentHandlers = Depends(get_handlers)):
    """List every stored student."""
    http_status, payload = await handlers.get_list()
    return write_success(http_status, payload)


@router.get("/{student_id}")
async def get_student(
    student_id: str, handlers: StudentHandlers = Depends(get_handlers),
):
    """Get one student by id."""
    http_status, payload = await handlers.get_by_id(student_id)
    return write_success(http_status, payload)
