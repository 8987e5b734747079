"""Services Layer - request orchestration between routes and storage.

Invariants:
    - Services depend on the StudentStorage protocol, never on a concrete backend
"""
