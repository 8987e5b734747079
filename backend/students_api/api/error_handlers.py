"""Error Handlers - global exception handlers for the Students API.

Invariants:
    - StudentValidationError -> 400 envelope built by from_validation
    - StudentsApiError -> envelope with the error's own http_status
    - RequestValidationError -> 400 envelope with field-level details
    - Exception (catch-all) -> 500 envelope, never leaks internal details

Design Decisions:
    - Handlers raise, these functions write: one response per request
    - 4xx logged at WARNING, 5xx at ERROR
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from students_api.api.response import from_validation, write_error
from students_api.core.errors import StudentsApiError, StudentValidationError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_student_validation_handler(app)
    _register_students_api_error_handler(app)
    _register_request_validation_handler(app)
    _register_generic_error_handler(app)


def _log_api_error(request: Request, exc: StudentsApiError) -> None:
    extra = {
        "error_code": exc.code,
        "path": request.url.path,
        "status_code": exc.http_status,
    }
    if exc.http_status >= 500:
        logger.error(f"StudentsApiError: {exc.message}", extra=extra)
    else:
        logger.warning(f"StudentsApiError: {exc.message}", extra=extra)


def _register_student_validation_handler(app: FastAPI) -> None:

    @app.exception_handler(StudentValidationError)
    async def student_validation_handler(
        request: Request, exc: StudentValidationError,
    ):
        """Handle field-rule violations on decoded bodies."""
        _log_api_error(request, exc)
        return from_validation(exc.field_errors)


def _register_students_api_error_handler(app: FastAPI) -> None:
    """Register domain/infrastructure error handler."""

    @app.exception_handler(StudentsApiError)
    async def students_api_error_handler(
        request: Request, exc: StudentsApiError,
    ):
        _log_api_error(request, exc)
        return write_error(exc.http_status, exc)


def _register_request_validation_handler(app: FastAPI) -> None:
    """Register Pydantic request validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError,
    ):
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_request_validation_response(exc),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all - never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "status": "error",
                "error": "an unexpected error occurred",
                "code": "INTERNAL_ERROR",
            },
        )


def _build_request_validation_response(exc: RequestValidationError) -> dict:
    details = [
        {
            "field": ".".join(str(loc) for loc in e["loc"]),
            "message": e["msg"],
            "type": e["type"],
        }
        for e in exc.errors()
    ]
    return {
        "status": "error",
        "error": ", ".join(f"{d['field']}: {d['message']}" for d in details),
        "code": "VALIDATION_ERROR",
        "details": details,
    }
