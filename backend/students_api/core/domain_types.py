"""Domain Types - rich types that replace bare primitives across the codebase.

Invariants:
    - StudentId wraps the engine-assigned integer primary key
    - Ids are signed 64-bit: anything outside that range is not a valid id

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
"""

from typing import NewType


StudentId = NewType("StudentId", int)

MIN_STUDENT_ID = -(2 ** 63)
MAX_STUDENT_ID = 2 ** 63 - 1
