"""Student ORM - column types per dialect.

Tests cover:
    - PostgreSQL gets 64-bit id and age columns
    - SQLite keeps an INTEGER AUTOINCREMENT primary key
"""

from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.schema import CreateTable

from students_api.models.student import StudentRecord


def _ddl(dialect) -> str:
    return str(CreateTable(StudentRecord.__table__).compile(dialect=dialect))


def test_postgresql_columns_are_64_bit():
    ddl = _ddl(postgresql.dialect())
    assert "id BIGSERIAL" in ddl
    assert "age BIGINT NOT NULL" in ddl


def test_sqlite_id_is_integer_autoincrement():
    ddl = _ddl(sqlite.dialect())
    assert "id INTEGER NOT NULL" in ddl
    assert "AUTOINCREMENT" in ddl
