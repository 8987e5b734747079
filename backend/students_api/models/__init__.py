"""ORM Models - SQLAlchemy declarative models for persisted entities.

Invariants:
    - All models inherit from Base (db/base.py)

Design Decisions:
    - All models imported here so Base.metadata is populated before
      create_all runs during schema bootstrap
"""

from students_api.models.student import StudentRecord  # noqa: F401
