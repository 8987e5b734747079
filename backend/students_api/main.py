"""Students API - FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map StudentsApiError -> JSON error envelope
    - Storage is injected through create_app(); the lifespan builds the SQL
      backend only when nothing was injected
    - Schema bootstrapped (create-if-absent) before the first request

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - app.state over module globals: tests substitute a backend per app instance
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from students_api.api.error_handlers import register_error_handlers
from students_api.api.routes import health, students
from students_api.config import get_settings
from students_api.core.storage_protocol import StudentStorage
from students_api.infrastructure.database import DatabaseSessionManager
from students_api.infrastructure.observability import setup_logging
from students_api.infrastructure.sql_storage import SqlStudentStorage

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    db_manager = None
    if app.state.storage is None:
        db_manager = DatabaseSessionManager(
            settings.database_url,
            pool_size=settings.database_pool_size,
            max_overflow=settings.database_max_overflow,
        )
        await db_manager.create_schema()
        app.state.db_manager = db_manager
        app.state.storage = SqlStudentStorage(db_manager)
        logger.info("Storage initialized")
    logger.info("Students API started")
    yield
    logger.info("Students API shutting down")
    if db_manager is not None:
        app.state.storage = None
        app.state.db_manager = None
        await db_manager.dispose()


def create_app(storage: StudentStorage | None = None) -> FastAPI:
    """Build the application around an optional pre-built storage backend."""
    app = FastAPI(title="Students API", version="1.0.0", lifespan=lifespan)
    app.state.storage = storage
    app.state.db_manager = None

    register_error_handlers(app)

    # Routes - explicit registration
    app.include_router(health.router)
    app.include_router(students.router)
    return app


app = create_app()
