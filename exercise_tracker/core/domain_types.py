"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - UserId wraps a UUID — never pass a raw path string where an id is expected

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
"""

from typing import NewType
from uuid import UUID


UserId = NewType("UserId", UUID)
