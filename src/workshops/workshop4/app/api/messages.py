"""Chat history for clients joining the conversation."""

from __future__ import annotations

from fastapi import APIRouter, Query

from ..config import SettingsDependency
from ..deps import ApiUserDependency, DatabaseSessionDependency
from ..schemas import MessageRead
from ..services import MessageService

router = APIRouter(tags=["messages"])


@router.get("", response_model=list[MessageRead], summary="Recent chat messages")
async def list_messages(
    _: ApiUserDependency,
    session: DatabaseSessionDependency,
    settings: SettingsDependency,
    limit: int | None = Query(default=None, ge=1, le=500),
) -> list[MessageRead]:
    """Return the latest messages, oldest first."""

    messages = await MessageService(session).recent_messages(limit or settings.chat_history_limit)
    return [MessageRead.model_validate(message) for message in messages]
