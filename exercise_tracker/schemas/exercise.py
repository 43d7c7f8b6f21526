"""Exercise Schemas — entry creation result and log view.

Invariants:
    - ExerciseResponse merges the owner's id/username with the new entry
    - ExerciseLogResponse.count == len(ExerciseLogResponse.log)
    - date fields hold rendered calendar strings ("Mon Jan 02 2023")
"""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, model_validator


class ExerciseResponse(BaseModel):
    """Result of adding an exercise."""
    model_config = ConfigDict(populate_by_name=True)

    id: UUID = Field(alias="_id")
    username: str
    date: str
    duration: int
    description: str


class LogEntry(BaseModel):
    """One line of a user's log."""
    description: str
    duration: int
    date: str


class ExerciseLogResponse(BaseModel):
    """Filtered, optionally limited log of a user's exercises."""
    model_config = ConfigDict(populate_by_name=True)

    id: UUID = Field(alias="_id")
    username: str
    count: int = 0
    log: list[LogEntry] = Field(default_factory=list)

    @model_validator(mode="after")
    def sync_count(self) -> "ExerciseLogResponse":
        self.count = len(self.log)
        return self
