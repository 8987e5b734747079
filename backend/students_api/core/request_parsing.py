"""Request Parsing - pure decode/validate steps shared by the student handlers.

Invariants:
    - An empty or whitespace-only body is EmptyBodyError, never DecodeError
    - Only a JSON object decodes into a student body
    - Validation reports at most one FieldError per field, in declaration order
    - Path ids are base-10 signed 64-bit integers; no whitespace, no underscores

Design Decisions:
    - json.loads before model_validate: malformed JSON (DecodeError) stays
      distinct from field-rule violations (StudentValidationError)
"""

import json
import re

from pydantic import ValidationError

from students_api.core.domain_types import (
    StudentId, MIN_STUDENT_ID, MAX_STUDENT_ID,
)
from students_api.core.errors import (
    DecodeError, EmptyBodyError, FieldError, PathParseError,
    StudentValidationError,
)
from students_api.schemas.student import StudentCreate

_REQUIRED_TYPES = frozenset({"missing", "required"})
_ID_PATTERN = re.compile(r"[+-]?[0-9]+")


def decode_student_body(body: bytes) -> StudentCreate:
    """Decode and validate a create-student body."""
    if not body.strip():
        raise EmptyBodyError()
    try:
        data = json.loads(body)
    except ValueError as e:
        raise DecodeError(str(e)) from e
    if not isinstance(data, dict):
        raise DecodeError("request body must be a JSON object")
    try:
        return StudentCreate.model_validate(data)
    except ValidationError as e:
        raise StudentValidationError(collect_field_errors(e)) from e


def collect_field_errors(exc: ValidationError) -> list[FieldError]:
    """Collapse pydantic errors to one FieldError per field."""
    errors: dict[str, FieldError] = {}
    for e in exc.errors():
        field = str(e["loc"][0]) if e["loc"] else "body"
        if field in errors:
            continue
        if e["type"] in _REQUIRED_TYPES:
            errors[field] = FieldError(
                field, "required", f"field {field} is required field",
            )
        else:
            errors[field] = FieldError(
                field, "invalid", f"field {field} is invalid",
            )
    return list(errors.values())


def parse_student_id(raw: str) -> StudentId:
    """Parse a path segment into a StudentId or raise PathParseError."""
    if not _ID_PATTERN.fullmatch(raw):
        raise PathParseError(raw)
    value = int(raw)
    if not MIN_STUDENT_ID <= value <= MAX_STUDENT_ID:
        raise PathParseError(raw)
    return StudentId(value)
