"""User Handlers — register_user, list_users.

Invariants:
    - register_user persists nothing when username is missing or blank
    - Usernames are stored as given (no trimming, no uniqueness check)
    - Numeric usernames are stored as their text form; other non-text values are rejected
"""

import logging

from exercise_tracker.core.errors import FieldRequiredError, InvalidFieldError
from exercise_tracker.core.repository_protocols import UserRepository
from exercise_tracker.schemas.user import UserResponse

logger = logging.getLogger(__name__)


class UserHandlers:
    """Registration and listing of users."""

    def __init__(self, users: UserRepository):
        self.users = users

    async def register_user(self, username: object) -> UserResponse:
        """Create a user from the submitted username."""
        if username is None or username == "":
            raise FieldRequiredError("username")
        if isinstance(username, (int, float)) and not isinstance(username, bool):
            username = str(username)
        if not isinstance(username, str):
            raise InvalidFieldError("username", "Username must be text")
        user = await self.users.create(username)
        logger.info(
            f"User registered: {user.username}",
            extra={"user_id": str(user.id)},
        )
        return UserResponse(id=user.id, username=user.username)

    async def list_users(self) -> list[UserResponse]:
        """All users in store order."""
        users = await self.users.list_all()
        return [UserResponse(id=u.id, username=u.username) for u in users]
