"""Repository for chat history."""

from __future__ import annotations

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from ..models import Message
from .base import BaseRepository


class MessageRepository(BaseRepository[Message]):
    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Message)

    async def list_recent(self, limit: int) -> list[Message]:
        """Return up to ``limit`` latest messages in chronological order."""
        statement = select(Message).order_by(Message.id.desc()).limit(limit)
        result = await self.session.exec(statement)
        return list(reversed(result.all()))
