"""SQLAlchemy Repositories — store-backed implementations of the boundary protocols.

Invariants:
    - One AsyncSession per repository instance (the request session)
    - create() commits immediately: every write is a single atomic insert
    - find_for_user applies no ORDER BY: rows come back in the store's natural order

Design Decisions:
    - Date window and limit pushed down into SQL, not filtered in Python
"""

import datetime

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from exercise_tracker.core.domain_types import UserId
from exercise_tracker.core.log_query import LogQuery
from exercise_tracker.models.exercise import Exercise
from exercise_tracker.models.user import User


class SqlUserRepository:
    """Users table access."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(self, username: str) -> User:
        user = User(username=username)
        self.db.add(user)
        await self.db.commit()
        await self.db.refresh(user)
        return user

    async def get(self, user_id: UserId) -> User | None:
        result = await self.db.execute(select(User).where(User.id == user_id))
        return result.scalar_one_or_none()

    async def list_all(self) -> list[User]:
        result = await self.db.execute(select(User))
        return list(result.scalars().all())


class SqlExerciseRepository:
    """Exercises table access."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(
        self, user_id: UserId, description: str, duration: int, day: datetime.date,
    ) -> Exercise:
        exercise = Exercise(
            user_id=user_id, description=description,
            duration=duration, date=day,
        )
        self.db.add(exercise)
        await self.db.commit()
        await self.db.refresh(exercise)
        return exercise

    async def find_for_user(
        self, user_id: UserId, query: LogQuery,
    ) -> list[Exercise]:
        stmt = select(Exercise).where(Exercise.user_id == user_id)
        if query.date_from is not None:
            stmt = stmt.where(Exercise.date >= query.date_from)
        if query.date_to is not None:
            stmt = stmt.where(Exercise.date <= query.date_to)
        if query.limit is not None:
            stmt = stmt.limit(query.limit)
        result = await self.db.execute(stmt)
        return list(result.scalars().all())
