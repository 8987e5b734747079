"""SQL Student Storage - relational implementation of the StudentStorage contract.

Invariants:
    - Every statement is built by SQLAlchemy with bound parameters (no string SQL)
    - One session per call; session and result released on every exit path
    - Engine errors surface as StorageError, never retried here
    - Zero rows on lookup is StudentNotFoundError, not StorageError

Design Decisions:
    - flush() before commit() to read the engine-assigned id inside the
      same transaction that inserted the row
    - Listing orders by id: store default order made explicit
"""

import logging

from sqlalchemy import select

from students_api.core.domain_types import StudentId
from students_api.core.errors import StudentNotFoundError
from students_api.infrastructure.database import DatabaseSessionManager
from students_api.models.student import StudentRecord
from students_api.schemas.student import Student

logger = logging.getLogger(__name__)


class SqlStudentStorage:
    """StudentStorage backed by a SQLAlchemy async engine."""

    def __init__(self, db_manager: DatabaseSessionManager):
        self.db_manager = db_manager

    async def create_student(
        self, name: str, email: str, age: int,
    ) -> StudentId:
        async with self.db_manager.session("insert") as db:
            record = StudentRecord(name=name, email=email, age=age)
            db.add(record)
            await db.flush()
            student_id = StudentId(record.id)
            await db.commit()
        logger.debug("Inserted student row", extra={"student_id": student_id})
        return student_id

    async def get_student_by_id(self, student_id: StudentId) -> Student:
        async with self.db_manager.session("select") as db:
            result = await db.execute(
                select(StudentRecord).where(StudentRecord.id == student_id),
            )
            record = result.scalar_one_or_none()
        if record is None:
            raise StudentNotFoundError(student_id)
        return Student.model_validate(record)

    async def get_students(self) -> list[Student]:
        async with self.db_manager.session("select") as db:
            result = await db.execute(
                select(StudentRecord).order_by(StudentRecord.id),
            )
            records = result.scalars().all()
        return [Student.model_validate(r) for r in records]
