"""Service test fixtures — in-memory repositories satisfying the boundary protocols.

Invariants:
    - Fakes keep insertion order, like the store's natural order
    - No database, no FastAPI: handlers are exercised directly
"""

import uuid
from dataclasses import dataclass, field
from datetime import date

import pytest

from exercise_tracker.core.log_query import LogQuery


@dataclass
class FakeUser:
    username: str
    id: uuid.UUID = field(default_factory=uuid.uuid4)


@dataclass
class FakeExercise:
    user_id: uuid.UUID
    description: str
    duration: int
    date: date


class InMemoryUserRepository:
    def __init__(self):
        self.rows: list[FakeUser] = []

    async def create(self, username: str) -> FakeUser:
        user = FakeUser(username)
        self.rows.append(user)
        return user

    async def get(self, user_id):
        return next((u for u in self.rows if u.id == user_id), None)

    async def list_all(self):
        return list(self.rows)


class InMemoryExerciseRepository:
    def __init__(self):
        self.rows: list[FakeExercise] = []

    async def create(self, user_id, description, duration, day):
        exercise = FakeExercise(user_id, description, duration, day)
        self.rows.append(exercise)
        return exercise

    async def find_for_user(self, user_id, query: LogQuery):
        matching = [
            e for e in self.rows
            if e.user_id == user_id and query.matches(e.date)
        ]
        return matching[:query.limit] if query.limit else matching


@pytest.fixture
def user_repo():
    return InMemoryUserRepository()


@pytest.fixture
def exercise_repo():
    return InMemoryExerciseRepository()
