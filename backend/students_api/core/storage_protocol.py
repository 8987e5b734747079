"""Storage Contract - the capability set every persistence backend satisfies.

Invariants:
    - Exactly three operations: create, get-by-id, list
    - No operation mutates more than one record per call
    - get_student_by_id raises StudentNotFoundError for unknown ids,
      StorageError for everything else that goes wrong
    - Returned students always carry their assigned id

Design Decisions:
    - Protocol over ABC: structural subtyping, backends never inherit
      (relational and in-memory implementations are interchangeable)
    - Async in Protocol: implementations do IO; handlers await them
"""

from typing import Protocol

from students_api.core.domain_types import StudentId
from students_api.schemas.student import Student


class StudentStorage(Protocol):
    """Contract for student persistence - injected into handlers."""
    async def create_student(
        self, name: str, email: str, age: int,
    ) -> StudentId: ...
    async def get_student_by_id(self, student_id: StudentId) -> Student: ...
    async def get_students(self) -> list[Student]: ...
