"""Exercise ORM — one dated activity entry.

Invariants:
    - user_id references users.id by value only (no FOREIGN KEY constraint)
    - date is a calendar date; duration is whole minutes

Design Decisions:
    - Index on (user_id, date): every read filters by owner and optionally by date window
"""

import datetime
import uuid

from sqlalchemy import Date, Index, Integer, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from exercise_tracker.db.base import Base


class Exercise(Base):
    """Activity entry attributed to a user."""
    __tablename__ = "exercises"
    __table_args__ = (
        Index("ix_exercises_user_id_date", "user_id", "date"),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid, primary_key=True, default=uuid.uuid4,
    )
    user_id: Mapped[uuid.UUID] = mapped_column(Uuid, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    duration: Mapped[int] = mapped_column(Integer, nullable=False)
    date: Mapped[datetime.date] = mapped_column(Date, nullable=False)
