"""Chat messages posted over the websocket."""

from __future__ import annotations

import sqlalchemy as sa
from sqlmodel import Field

from .common import TimestampMixin


class Message(TimestampMixin, table=True):
    """Persistent chat message; ``author`` holds the username at send time."""

    __tablename__ = "messages"
    __table_args__ = (sa.Index("ix_messages_created_at", "created_at"),)

    id: int | None = Field(default=None, primary_key=True)
    text: str = Field(
        max_length=500,
        sa_column=sa.Column(sa.String(length=500), nullable=False),
    )
    author: str = Field(
        max_length=150,
        sa_column=sa.Column(sa.String(length=150), nullable=False),
    )
    user_id: int = Field(
        sa_column=sa.Column(
            sa.Integer(),
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
        ),
    )


__all__ = ["Message"]
