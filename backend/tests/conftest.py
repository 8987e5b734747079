"""Root conftest - shared test configuration and app/client fixtures.

Invariants:
    - Tests never touch the default ./storage database
    - Every API test gets a fresh app instance with its own storage backend
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("LOG_FORMAT", "text")

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from students_api.core.errors import StorageError  # noqa: E402
from students_api.infrastructure.database import DatabaseSessionManager  # noqa: E402
from students_api.infrastructure.memory_storage import InMemoryStudentStorage  # noqa: E402
from students_api.infrastructure.sql_storage import SqlStudentStorage  # noqa: E402
from students_api.main import create_app  # noqa: E402


class FailingStorage:
    """StudentStorage whose every operation fails like a dead database."""

    def __init__(self):
        self.calls = []

    async def create_student(self, name, email, age):
        self.calls.append("create_student")
        raise StorageError("connection or operational error", "insert")

    async def get_student_by_id(self, student_id):
        self.calls.append("get_student_by_id")
        raise StorageError("connection or operational error", "select")

    async def get_students(self):
        self.calls.append("get_students")
        raise StorageError("connection or operational error", "select")


def _client_for(storage) -> AsyncClient:
    return AsyncClient(
        transport=ASGITransport(app=create_app(storage=storage)),
        base_url="http://test",
    )


@pytest.fixture
def memory_storage():
    return InMemoryStudentStorage()


@pytest.fixture
def failing_storage():
    return FailingStorage()


@pytest.fixture
async def db_manager(tmp_path):
    """SQL engine over a throwaway SQLite file with the schema in place.

    A file under tmp_path rather than :memory: so every pooled connection
    sees the same rows.
    """
    manager = DatabaseSessionManager(
        f"sqlite+aiosqlite:///{tmp_path}/students.db",
    )
    await manager.create_schema()
    yield manager
    await manager.dispose()


@pytest.fixture
def sql_storage(db_manager):
    return SqlStudentStorage(db_manager)


@pytest.fixture
async def client(memory_storage):
    """HTTP client against an app wired to in-memory storage."""
    async with _client_for(memory_storage) as c:
        yield c


@pytest.fixture
async def failing_client(failing_storage):
    """HTTP client against an app whose storage always fails."""
    async with _client_for(failing_storage) as c:
        yield c


@pytest.fixture
async def sql_client(sql_storage):
    """HTTP client against an app wired to the SQL storage."""
    async with _client_for(sql_storage) as c:
        yield c
