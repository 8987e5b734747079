"""Response Envelope - the only place JSON responses are built.

Invariants:
    - Success bodies are the raw payload (no wrapping)
    - Error bodies are always {"status": "error", "error": <str>, ...}
    - Each call returns one JSONResponse; handlers return it once
"""

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from students_api.core.errors import (
    FieldError, StudentsApiError, StudentValidationError,
)


def write_success(http_status: int, payload) -> JSONResponse:
    """Serialize payload verbatim with the given status."""
    return JSONResponse(
        status_code=http_status, content=jsonable_encoder(payload),
    )


def general_error(err: Exception) -> dict:
    """Wrap any error into the error envelope."""
    if isinstance(err, StudentsApiError):
        return err.to_response()
    return {"status": "error", "error": str(err)}


def write_error(http_status: int, err: Exception) -> JSONResponse:
    return JSONResponse(status_code=http_status, content=general_error(err))


def from_validation(field_errors: list[FieldError]) -> JSONResponse:
    """Join per-field failures into one message and write it as a 400."""
    err = StudentValidationError(field_errors)
    return write_error(err.http_status, err)
