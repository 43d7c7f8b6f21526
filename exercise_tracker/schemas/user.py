"""User Schemas — public-facing user shape.

Invariants:
    - id serializes as "_id" (string form of the UUID)
"""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class UserResponse(BaseModel):
    """Registered user — returned by registration and listing."""
    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    id: UUID = Field(alias="_id")
    username: str
