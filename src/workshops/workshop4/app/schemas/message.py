"""Chat message schemas for the JSON API and the websocket."""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ChatMessageIn(BaseModel):
    """Payload accepted from websocket clients."""

    text: str = Field(min_length=1, max_length=500)

    @field_validator("text")
    @classmethod
    def _strip_text(cls, value: str) -> str:
        stripped = value.strip()
        if not stripped:
            raise ValueError("Message must not be blank.")
        return stripped


class MessageRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    author: str
    text: str
    created_at: datetime


class MessageEvent(MessageRead):
    """A persisted message as broadcast to connected clients."""

    kind: Literal["message"] = "message"


__all__ = ["ChatMessageIn", "MessageEvent", "MessageRead"]
