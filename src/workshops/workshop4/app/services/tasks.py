"""Service layer encapsulating task-related operations."""

from __future__ import annotations

from sqlmodel.ext.asyncio.session import AsyncSession

from ....common.errors import NotFoundError
from ..models import Task
from ..repositories import TaskRepository


class TaskService:
    """Task workflows scoped to a single owner."""

    def __init__(self, session: AsyncSession) -> None:
        self._repository = TaskRepository(session)

    async def list_tasks_for_owner(self, owner_id: int) -> list[Task]:
        return await self._repository.list_for_owner(owner_id)

    async def create_task(self, *, owner_id: int, title: str) -> Task:
        return await self._repository.save(Task(owner_id=owner_id, title=title))

    async def get_task_for_owner(self, task_id: int, owner_id: int) -> Task:
        """Return the owner's task; tasks of other users are reported as missing."""
        task = await self._repository.get_for_owner(task_id, owner_id)
        if task is None:
            raise NotFoundError("Task not found.")
        return task

    async def update_task(
        self,
        task_id: int,
        *,
        owner_id: int,
        title: str | None = None,
        done: bool | None = None,
    ) -> Task:
        task = await self.get_task_for_owner(task_id, owner_id)
        if title is not None:
            task.title = title
        if done is not None:
            task.done = done
        return await self._repository.save(task)

    async def delete_task(self, task_id: int, *, owner_id: int) -> None:
        task = await self.get_task_for_owner(task_id, owner_id)
        await self._repository.delete(task)
