"""Request Dependencies — body field extraction and handler wiring.

Invariants:
    - Bodies may be JSON, URL-encoded form, or multipart form; all yield a flat dict
    - A JSON body that is not an object yields no fields
    - Malformed JSON raises RequestValidationError (400)
    - Handlers receive repositories bound to the request's AsyncSession
"""

import json

from fastapi import Depends, Request
from fastapi.exceptions import RequestValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from exercise_tracker.infrastructure.database import get_db
from exercise_tracker.infrastructure.repositories import (
    SqlExerciseRepository, SqlUserRepository,
)
from exercise_tracker.services.handle_exercises import ExerciseHandlers
from exercise_tracker.services.handle_users import UserHandlers

_FORM_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


async def read_body_fields(request: Request) -> dict[str, object]:
    """Collect submitted fields from a JSON or form body."""
    content_type = request.headers.get("content-type", "")
    if content_type.startswith(_FORM_TYPES):
        form = await request.form()
        return {k: v for k, v in form.items() if isinstance(v, str)}

    raw = await request.body()
    if not raw.strip():
        return {}
    try:
        payload = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError):
        raise RequestValidationError([{
            "loc": ("body",), "msg": "Malformed JSON body", "type": "json_invalid",
        }])
    return payload if isinstance(payload, dict) else {}


def get_user_handlers(db: AsyncSession = Depends(get_db)) -> UserHandlers:
    return UserHandlers(SqlUserRepository(db))


def get_exercise_handlers(
    db: AsyncSession = Depends(get_db),
) -> ExerciseHandlers:
    return ExerciseHandlers(SqlUserRepository(db), SqlExerciseRepository(db))
