"""JSON task endpoints consumed by the single-page app."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Response, status

from ..deps import ApiUserDependency, CsrfHeaderDependency, DatabaseSessionDependency
from ..models import User
from ..schemas import TaskCreate, TaskRead, TaskUpdate
from ..services import TaskService

router = APIRouter(tags=["tasks"])
logger = logging.getLogger(__name__)


def _owner_id(user: User) -> int:
    if user.id is None:  # pragma: no cover - persisted users always have an id
        raise RuntimeError("Session user is missing an id.")
    return user.id


@router.get("", response_model=list[TaskRead], summary="List my tasks")
async def list_tasks(user: ApiUserDependency, session: DatabaseSessionDependency) -> list[TaskRead]:
    tasks = await TaskService(session).list_tasks_for_owner(_owner_id(user))
    return [TaskRead.model_validate(task) for task in tasks]


@router.post(
    "",
    response_model=TaskRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create a task",
)
async def create_task(
    payload: TaskCreate,
    user: ApiUserDependency,
    _: CsrfHeaderDependency,
    session: DatabaseSessionDependency,
) -> TaskRead:
    task = await TaskService(session).create_task(owner_id=_owner_id(user), title=payload.title)
    logger.info("Task created", extra={"task_id": task.id, "owner_id": task.owner_id})
    return TaskRead.model_validate(task)


@router.patch(
    "/{task_id}",
    response_model=TaskRead,
    summary="Update a task",
)
async def update_task(
    task_id: int,
    payload: TaskUpdate,
    user: ApiUserDependency,
    _: CsrfHeaderDependency,
    session: DatabaseSessionDependency,
) -> TaskRead:
    task = await TaskService(session).update_task(
        task_id,
        owner_id=_owner_id(user),
        title=payload.title,
        done=payload.done,
    )
    return TaskRead.model_validate(task)


@router.delete(
    "/{task_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a task",
)
async def delete_task(
    task_id: int,
    user: ApiUserDependency,
    _: CsrfHeaderDependency,
    session: DatabaseSessionDependency,
) -> Response:
    await TaskService(session).delete_task(task_id, owner_id=_owner_id(user))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
