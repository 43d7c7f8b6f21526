"""Exercise Handlers — add_exercise, get_exercise_log.

Invariants:
    - The owning user is looked up before anything else is validated or written
    - A missing date means "today" as passed in by the caller
    - Log count always equals the number of entries returned

Design Decisions:
    - today is a parameter, not read from the clock: keeps handlers deterministic in tests
    - Malformed ids raise MalformedIdError (500); unknown ids raise ResourceNotFoundError (200)
"""

import logging
from collections.abc import Mapping
from datetime import date

from exercise_tracker.core.domain_types import UserId
from exercise_tracker.core.errors import (
    FieldRequiredError, InvalidFieldError, MalformedIdError, ResourceNotFoundError,
)
from exercise_tracker.core.log_query import build_log_query
from exercise_tracker.core.parsing import (
    INT32_MAX, format_calendar_date, parse_calendar_date, parse_leading_int,
    parse_user_id,
)
from exercise_tracker.core.repository_protocols import (
    ExerciseRepository, UserLike, UserRepository,
)
from exercise_tracker.schemas.exercise import (
    ExerciseLogResponse, ExerciseResponse, LogEntry,
)

logger = logging.getLogger(__name__)


def _text_field(fields: Mapping[str, object], name: str) -> str | None:
    """Return a field as text, or None when absent or empty."""
    value = fields.get(name)
    if value is None or value == "":
        return None
    return value if isinstance(value, str) else str(value)


class ExerciseHandlers:
    """Creation and retrieval of exercise entries."""

    def __init__(self, users: UserRepository, exercises: ExerciseRepository):
        self.users = users
        self.exercises = exercises

    async def _get_user_or_raise(self, raw_id: str) -> UserLike:
        user_id = parse_user_id(raw_id)
        if user_id is None:
            raise MalformedIdError(raw_id)
        user = await self.users.get(user_id)
        if user is None:
            raise ResourceNotFoundError("User", raw_id)
        return user

    async def add_exercise(
        self, raw_user_id: str, fields: Mapping[str, object], today: date,
    ) -> ExerciseResponse:
        """Append one exercise to the user's log."""
        user = await self._get_user_or_raise(raw_user_id)

        description = _text_field(fields, "description")
        if description is None:
            raise FieldRequiredError("description")

        raw_duration = fields.get("duration")
        if raw_duration is None or raw_duration == "":
            raise FieldRequiredError("duration")
        duration = parse_leading_int(raw_duration)
        if duration is None:
            raise InvalidFieldError("duration", "Duration must be a number")
        if abs(duration) > INT32_MAX:
            raise InvalidFieldError("duration", "Duration is out of range")

        raw_date = _text_field(fields, "date")
        if raw_date is None:
            day = today
        else:
            day = parse_calendar_date(raw_date)
            if day is None:
                raise InvalidFieldError("date", "Invalid date")

        exercise = await self.exercises.create(
            UserId(user.id), description, duration, day,
        )
        logger.info(
            f"Exercise added: {description} ({duration} min) on {day.isoformat()}",
            extra={"user_id": str(user.id)},
        )
        return ExerciseResponse(
            id=user.id,
            username=user.username,
            date=format_calendar_date(exercise.date),
            duration=exercise.duration,
            description=exercise.description,
        )

    async def get_exercise_log(
        self,
        raw_user_id: str,
        date_from: str | None = None,
        date_to: str | None = None,
        limit: str | None = None,
    ) -> ExerciseLogResponse:
        """Filtered, optionally capped view of the user's exercises."""
        user = await self._get_user_or_raise(raw_user_id)
        query = build_log_query(date_from, date_to, limit)
        entries = await self.exercises.find_for_user(UserId(user.id), query)
        return ExerciseLogResponse(
            id=user.id,
            username=user.username,
            log=[
                LogEntry(
                    description=e.description,
                    duration=e.duration,
                    date=format_calendar_date(e.date),
                )
                for e in entries
            ],
        )
