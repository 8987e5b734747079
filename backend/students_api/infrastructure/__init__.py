"""Infrastructure Layer - storage backends and cross-cutting concerns.

Invariants:
    - Backends implement core/storage_protocol.StudentStorage structurally
    - All engine errors mapped to core/errors.StorageError
"""
