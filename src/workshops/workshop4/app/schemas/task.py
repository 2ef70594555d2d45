"""Task-related Pydantic schemas."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

TASK_READ_EXAMPLE = {
    "id": 1,
    "title": "Finish the realtime workshop",
    "done": False,
    "owner_id": 42,
    "created_at": "2024-01-01T12:00:00Z",
    "updated_at": "2024-01-02T08:30:00Z",
}


def _strip_title(value: str | None) -> str | None:
    if value is None:
        return None
    stripped = value.strip()
    if not stripped:
        raise ValueError("Title must not be blank.")
    return stripped


class TaskCreate(BaseModel):
    """Payload for creating a new task."""

    model_config = ConfigDict(json_schema_extra={"example": {"title": "Finish the realtime workshop"}})

    title: str = Field(min_length=1, max_length=255)

    @field_validator("title")
    @classmethod
    def _normalise_title(cls, value: str | None) -> str | None:
        return _strip_title(value)


class TaskUpdate(BaseModel):
    """Payload for partially updating an existing task."""

    model_config = ConfigDict(json_schema_extra={"example": {"done": True}})

    title: str | None = Field(default=None, min_length=1, max_length=255)
    done: bool | None = None

    @field_validator("title")
    @classmethod
    def _normalise_title(cls, value: str | None) -> str | None:
        return _strip_title(value)

    @model_validator(mode="after")
    def _ensure_payload_not_empty(self) -> "TaskUpdate":
        if not self.model_dump(exclude_unset=True, exclude_none=True):
            raise ValueError("At least one field must be provided for update.")
        return self


class TaskRead(BaseModel):
    """Public representation of a task."""

    model_config = ConfigDict(from_attributes=True, json_schema_extra={"example": TASK_READ_EXAMPLE})

    id: int
    title: str
    done: bool
    owner_id: int
    created_at: datetime
    updated_at: datetime


__all__ = ["TaskCreate", "TaskRead", "TaskUpdate"]
