"""Students API Package - HTTP service for student records.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
