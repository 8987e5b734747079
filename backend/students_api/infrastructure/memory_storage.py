"""In-Memory Student Storage - dict-backed StudentStorage for tests and local runs.

Invariants:
    - Ids start at 1 and increase by 1 per create, never reused
    - Lock held for every read and write: concurrent creates get distinct ids
    - Returned students are copies; callers cannot mutate stored state
"""

import asyncio

from students_api.core.domain_types import StudentId
from students_api.core.errors import StudentNotFoundError
from students_api.schemas.student import Student


class InMemoryStudentStorage:
    """StudentStorage kept in process memory."""

    def __init__(self):
        self._students: dict[StudentId, Student] = {}
        self._last_id = 0
        self._lock = asyncio.Lock()

    async def create_student(
        self, name: str, email: str, age: int,
    ) -> StudentId:
        async with self._lock:
            self._last_id += 1
            student_id = StudentId(self._last_id)
            self._students[student_id] = Student(
                id=student_id, name=name, email=email, age=age,
            )
        return student_id

    async def get_student_by_id(self, student_id: StudentId) -> Student:
        async with self._lock:
            student = self._students.get(student_id)
        if student is None:
            raise StudentNotFoundError(student_id)
        return student.model_copy()

    async def get_students(self) -> list[Student]:
        async with self._lock:
            return [s.model_copy() for s in self._students.values()]
