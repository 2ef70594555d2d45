"""Chat message persistence."""

from __future__ import annotations

from sqlmodel.ext.asyncio.session import AsyncSession

from ..models import Message
from ..repositories import MessageRepository


class MessageService:
    def __init__(self, session: AsyncSession) -> None:
        self._repository = MessageRepository(session)

    async def post_message(self, *, user_id: int, author: str, text: str) -> Message:
        return await self._repository.save(Message(user_id=user_id, author=author, text=text))

    async def recent_messages(self, limit: int) -> list[Message]:
        return await self._repository.list_recent(limit)
