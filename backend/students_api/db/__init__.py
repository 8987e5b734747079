"""Database Infrastructure - SQLAlchemy Base shared by ORM models.

Invariants:
    - Single async engine per process (owned by DatabaseSessionManager)
"""
