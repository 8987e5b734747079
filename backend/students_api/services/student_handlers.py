"""Student Handlers - create, get_by_id, get_list.

Invariants:
    - Each method runs one linear pipeline: decode -> validate -> storage call
    - A failure raises exactly one typed error; nothing runs after it
    - get_by_id never reaches storage with an unparsed id
    - Handlers hold only the injected storage reference (safe to share across requests)

Design Decisions:
    - Return (status, payload) pairs: routes own the HTTP response,
      handlers stay testable without a web stack
    - Not-found propagates as StudentNotFoundError (404), distinct from
      StorageError (500)
"""

import logging

from fastapi import status

from students_api.core.request_parsing import decode_student_body, parse_student_id
from students_api.core.storage_protocol import StudentStorage
from students_api.schemas.student import Student

logger = logging.getLogger(__name__)


class StudentHandlers:
    """Request orchestration for the student resource."""

    def __init__(self, storage: StudentStorage):
        self.storage = storage

    async def create(self, body: bytes) -> tuple[int, dict]:
        """Create a student from a raw JSON body."""
        logger.info("Creating a student")
        student = decode_student_body(body)
        student_id = await self.storage.create_student(
            student.name, student.email, student.age,
        )
        logger.info(
            "Student created successfully", extra={"student_id": student_id},
        )
        return status.HTTP_201_CREATED, {"id": student_id}

    async def get_by_id(self, raw_id: str) -> tuple[int, Student]:
        """Fetch one student by its path identifier."""
        logger.info("Getting student by id", extra={"student_id": raw_id})
        student_id = parse_student_id(raw_id)
        student = await self.storage.get_student_by_id(student_id)
        return status.HTTP_200_OK, student

    async def get_list(self) -> tuple[int, list[Student]]:
        logger.info("Getting list of students")
        students = await self.storage.get_students()
        return status.HTTP_200_OK, students
