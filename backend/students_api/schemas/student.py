"""Student Schemas - Pydantic models with field-level validation for API boundaries.

Invariants:
    - StudentCreate: name, email non-empty after strip; age present and non-zero
    - Strict types: "20" is not an age, true is not an age
    - age fits a signed 64-bit column: anything wider is rejected as invalid
    - Student always carries the store-assigned id

Design Decisions:
    - PydanticCustomError("required") for zero values: missing and empty fields
      report the same rule, so clients see one kind of "required" message
    - field_validator for side-effect-free transforms (strip) - keeps models pure
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_core import PydanticCustomError

from students_api.core.domain_types import MIN_STUDENT_ID, MAX_STUDENT_ID


class StudentCreate(BaseModel):
    """Student creation body - id is never accepted from the client."""
    model_config = ConfigDict(strict=True, extra="ignore")

    name: str
    email: str
    age: int = Field(ge=MIN_STUDENT_ID, le=MAX_STUDENT_ID)

    @field_validator("name", "email")
    @classmethod
    def require_text(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise PydanticCustomError("required", "value is required")
        return v

    @field_validator("age")
    @classmethod
    def require_age(cls, v: int) -> int:
        if v == 0:
            raise PydanticCustomError("required", "value is required")
        return v


class Student(BaseModel):
    """Student response - public-facing persisted record."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    age: int
