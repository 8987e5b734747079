"""Error Hierarchy - typed, categorized exceptions for every Students API failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Client errors (400-level) are never retried; storage errors (500-level) are critical
    - to_response() always produces {"status": "error", "error": <str>, "code": <str>}
    - No internal details leaked in user-facing messages for storage failures

Design Decisions:
    - Single hierarchy with StudentsApiError base: FastAPI global handler catches all
    - StudentNotFoundError split from StorageError: 404 vs 500 is decided by type,
      not by inspecting driver messages
"""

from dataclasses import dataclass
from enum import Enum


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    DECODE = "decode"
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass(frozen=True)
class FieldError:
    """One violated field rule on a decoded request body."""
    field: str
    rule: str
    message: str


class StudentsApiError(Exception):
    """Base exception for all Students API errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to the standard error envelope."""
        return {
            "status": "error",
            "error": self.message,
            "code": self.code,
        }


# ─── Client Errors (400-level) ──────────────────────────────────

class EmptyBodyError(StudentsApiError):
    """Request body was missing where one is required."""
    def __init__(self):
        super().__init__(
            "empty body", "EMPTY_BODY", ErrorCategory.DECODE,
            ErrorSeverity.WARNING, 400,
        )


class DecodeError(StudentsApiError):
    """Request body is not a decodable JSON object."""
    def __init__(self, message: str):
        super().__init__(
            message, "DECODE_ERROR", ErrorCategory.DECODE,
            ErrorSeverity.WARNING, 400,
        )


class StudentValidationError(StudentsApiError):
    """Decoded body violates one or more field rules (one message per field)."""
    def __init__(self, field_errors: list[FieldError]):
        super().__init__(
            ", ".join(e.message for e in field_errors),
            "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, 400,
        )
        self.field_errors = field_errors

    def to_response(self) -> dict:
        response = super().to_response()
        response["details"] = [
            {"field": e.field, "message": e.message, "type": e.rule}
            for e in self.field_errors
        ]
        return response


class PathParseError(StudentsApiError):
    """Path identifier is not a base-10 integer."""
    def __init__(self, raw_value: str):
        super().__init__(
            f"invalid student id '{raw_value}': must be an integer",
            "PATH_PARSE_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, 400,
        )
        self.raw_value = raw_value


class PayloadTooLargeError(StudentsApiError):
    """Request body exceeds the configured size limit."""
    def __init__(self, limit: int):
        super().__init__(
            f"request body exceeds {limit} bytes",
            "PAYLOAD_TOO_LARGE", ErrorCategory.DECODE,
            ErrorSeverity.WARNING, 413,
        )
        self.limit = limit


class StudentNotFoundError(StudentsApiError):
    """No student is stored under the requested id."""
    def __init__(self, student_id: int):
        super().__init__(
            f"student '{student_id}' not found",
            "STUDENT_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, 404,
        )
        self.student_id = student_id


# ─── Infrastructure Errors (500-level) ──────────────────────────

class StorageError(StudentsApiError):
    """Persistence operation failed."""
    def __init__(self, message: str, operation: str):
        super().__init__(
            f"storage {operation} failed: {message}",
            "STORAGE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, 500,
        )
        self.operation = operation
