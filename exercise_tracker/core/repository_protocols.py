"""Boundary Protocols — contracts between the services and the store.

Invariants:
    - Services NEVER import SQLAlchemy — dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by infrastructure/ via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, the ORM models satisfy the
      record protocols without inheriting from them
    - Async in Protocol: boundary methods are async because implementations do IO
"""

from datetime import date
from typing import Protocol

from exercise_tracker.core.domain_types import UserId
from exercise_tracker.core.log_query import LogQuery


class UserLike(Protocol):
    """Structural contract for stored users."""
    id: UserId
    username: str


class ExerciseLike(Protocol):
    """Structural contract for stored exercises."""
    user_id: UserId
    description: str
    duration: int
    date: date


class UserRepository(Protocol):
    """Contract for user persistence — implemented by infrastructure."""
    async def create(self, username: str) -> UserLike: ...
    async def get(self, user_id: UserId) -> UserLike | None: ...
    async def list_all(self) -> list[UserLike]: ...


class ExerciseRepository(Protocol):
    """Contract for exercise persistence — implemented by infrastructure."""
    async def create(
        self, user_id: UserId, description: str, duration: int, day: date,
    ) -> ExerciseLike: ...
    async def find_for_user(
        self, user_id: UserId, query: LogQuery,
    ) -> list[ExerciseLike]: ...
