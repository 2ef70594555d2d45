"""Repository for task persistence."""

from __future__ import annotations

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from ..models import Task
from .base import BaseRepository


class TaskRepository(BaseRepository[Task]):
    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Task)

    async def list_for_owner(self, owner_id: int) -> list[Task]:
        """Return the owner's tasks, oldest first."""
        statement = select(Task).where(Task.owner_id == owner_id).order_by(Task.id)
        result = await self.session.exec(statement)
        return list(result.all())

    async def get_for_owner(self, task_id: int, owner_id: int) -> Task | None:
        statement = select(Task).where(Task.id == task_id, Task.owner_id == owner_id)
        result = await self.session.exec(statement)
        return result.first()
