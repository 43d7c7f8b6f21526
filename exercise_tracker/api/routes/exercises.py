"""Exercise Routes — add an entry, read the filtered log.

Invariants:
    - Both routes look the user up first; unknown users answer 200 with {"error": "User not found"}
    - Query parameters are taken as raw text and parsed by the service layer
"""

from datetime import date

from fastapi import APIRouter, Depends, Query

from exercise_tracker.api.dependencies import (
    get_exercise_handlers, read_body_fields,
)
from exercise_tracker.schemas.exercise import ExerciseLogResponse, ExerciseResponse
from exercise_tracker.services.handle_exercises import ExerciseHandlers

router = APIRouter(prefix="/api/users", tags=["exercises"])


@router.post("/{user_id}/exercises", response_model=ExerciseResponse)
async def add_exercise(
    user_id: str,
    fields: dict = Depends(read_body_fields),
    handlers: ExerciseHandlers = Depends(get_exercise_handlers),
):
    """Append an exercise to the user's log (date defaults to today)."""
    return await handlers.add_exercise(user_id, fields, today=date.today())


@router.get("/{user_id}/logs", response_model=ExerciseLogResponse)
async def get_logs(
    user_id: str,
    date_from: str | None = Query(None, alias="from"),
    date_to: str | None = Query(None, alias="to"),
    limit: str | None = Query(None),
    handlers: ExerciseHandlers = Depends(get_exercise_handlers),
):
    """Return the user's exercises, optionally windowed by date and capped."""
    return await handlers.get_exercise_log(user_id, date_from, date_to, limit)
