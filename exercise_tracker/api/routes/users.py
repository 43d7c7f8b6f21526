"""User Routes — registration and listing.

Invariants:
    - POST /api/users accepts JSON or form bodies
    - Missing username answers 200 with {"error": "Username is required"}
"""

from fastapi import APIRouter, Depends

from exercise_tracker.api.dependencies import get_user_handlers, read_body_fields
from exercise_tracker.schemas.user import UserResponse
from exercise_tracker.services.handle_users import UserHandlers

router = APIRouter(prefix="/api/users", tags=["users"])


@router.post("", response_model=UserResponse)
async def create_user(
    fields: dict = Depends(read_body_fields),
    handlers: UserHandlers = Depends(get_user_handlers),
):
    """Register a new user."""
    return await handlers.register_user(fields.get("username"))


@router.get("", response_model=list[UserResponse])
async def list_users(handlers: UserHandlers = Depends(get_user_handlers)):
    """List every registered user."""
    return await handlers.list_users()
