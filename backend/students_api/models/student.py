"""Student ORM - persisted student rows.

Invariants:
    - id is an engine-assigned integer primary key, never set by callers
    - id and age are 64-bit on every engine
    - name, email, age are non-nullable
    - email is NOT unique: duplicates are accepted

Design Decisions:
    - id is BIGINT except on SQLite, where it must be INTEGER to alias ROWID
      and keep AUTOINCREMENT (SQLite INTEGER is already 64-bit)
    - autoincrement=True: SQLite AUTOINCREMENT keeps ids monotonic
      (deleted ids are never reused), PostgreSQL gets a bigserial column
"""

from sqlalchemy import BigInteger, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from students_api.db.base import Base


class StudentRecord(Base):
    """One enrolled person."""
    __tablename__ = "students"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(
        BigInteger().with_variant(Integer, "sqlite"),
        primary_key=True, autoincrement=True,
    )
    name: Mapped[str] = mapped_column(Text, nullable=False)
    email: Mapped[str] = mapped_column(Text, nullable=False)
    age: Mapped[int] = mapped_column(BigInteger, nullable=False)
