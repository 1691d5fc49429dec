from datetime import datetime, timezone

from pydantic import BaseModel, Field, field_validator


def _to_camel(string: str) -> str:
    parts = string.split("_")
    return parts[0] + "".join(word.capitalize() for word in parts[1:])


class TaskCreate(BaseModel):
    title: str = Field(min_length=1)
    description: str | None = None
    completed: bool = False


class TaskUpdate(BaseModel):
    """Full replacement of the editable fields; anything omitted resets to its default."""

    title: str = Field(min_length=1)
    description: str | None = None
    completed: bool = False


class TaskResponse(BaseModel):
    id: int
    title: str
    description: str | None = None
    completed: bool
    created_at: datetime

    class Config:
        from_attributes = True
        alias_generator = _to_camel
        populate_by_name = True

    @field_validator("created_at")
    @classmethod
    def _assume_utc(cls, value: datetime) -> datetime:
        # stored as UTC; SQLite returns it without an offset
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)
