"""Realtime chat over websockets."""

from __future__ import annotations

import asyncio
import json
import logging
from typing import Any

from fastapi import APIRouter, WebSocket, WebSocketDisconnect, status
from pydantic import ValidationError
from starlette.websockets import WebSocketState

from ...common.session import get_session_user_id, get_session_username
from .config import SettingsDependency
from .deps import DatabaseSessionDependency
from .schemas import ChatMessageIn, MessageEvent
from .services import MessageService

logger = logging.getLogger(__name__)

UNAUTHORIZED_CLOSE_CODE = 4401

router = APIRouter()


class ConnectionLimitExceeded(RuntimeError):
    """Raised when the websocket connection pool is exhausted."""


class ChatBroker:
    """Tracks connected chat clients and fans messages out to them."""

    def __init__(self) -> None:
        self._connections: set[WebSocket] = set()
        self._lock = asyncio.Lock()

    @property
    def active_connections(self) -> int:
        return len(self._connections)

    async def connect(self, websocket: WebSocket, max_connections: int) -> int:
        """Accept and register ``websocket``, returning the number of open sockets."""

        async with self._lock:
            if len(self._connections) >= max_connections:
                raise ConnectionLimitExceeded("Websocket connection limit reached.")
            self._connections.add(websocket)
            active = len(self._connections)
        await websocket.accept()
        return active

    async def disconnect(self, websocket: WebSocket) -> None:
        async with self._lock:
            self._connections.discard(websocket)

    async def broadcast(self, payload: dict[str, Any]) -> None:
        """Send ``payload`` to every client, dropping sockets that have gone away."""

        async with self._lock:
            connections = list(self._connections)

        stale: list[WebSocket] = []
        for websocket in connections:
            if websocket.application_state != WebSocketState.CONNECTED:
                stale.append(websocket)
                continue
            try:
                await websocket.send_json(payload)
            except (WebSocketDisconnect, RuntimeError):
                stale.append(websocket)

        if stale:
            async with self._lock:
                self._connections.difference_update(stale)

    async def reset(self) -> None:
        """Forget every connection (used by tests)."""

        async with self._lock:
            self._connections.clear()


broker = ChatBroker()


async def _send_error(websocket: WebSocket, reason: str, detail: Any) -> None:
    await websocket.send_json({"kind": "error", "reason": reason, "detail": detail})


async def _receive_payload(websocket: WebSocket) -> Any:
    """Return the JSON document carried by the next text or binary frame."""

    message = await websocket.receive()
    if message["type"] == "websocket.disconnect":
        raise WebSocketDisconnect(message.get("code", status.WS_1000_NORMAL_CLOSURE), message.get("reason"))
    frame = message.get("text")
    if frame is None:
        frame = (message.get("bytes") or b"").decode("utf-8")
    return json.loads(frame)


@router.websocket("/ws/chat")
async def chat(
    websocket: WebSocket,
    settings: SettingsDependency,
    session: DatabaseSessionDependency,
) -> None:
    """Persist each incoming chat message and broadcast it to every client."""

    user_id = get_session_user_id(websocket.session)
    username = get_session_username(websocket.session)
    if user_id is None or username is None:
        await websocket.close(code=UNAUTHORIZED_CLOSE_CODE)
        return

    try:
        await broker.connect(websocket, settings.websocket_max_connections)
    except ConnectionLimitExceeded:
        await websocket.close(code=status.WS_1013_TRY_AGAIN_LATER)
        return

    logger.info("Chat client connected", extra={"user_id": user_id, "active": broker.active_connections})
    service = MessageService(session)
    try:
        while True:
            try:
                raw = await _receive_payload(websocket)
            except ValueError:
                await _send_error(websocket, "invalid_json", "Messages must be valid JSON objects.")
                continue

            try:
                incoming = ChatMessageIn.model_validate(raw)
            except ValidationError as exc:
                await _send_error(
                    websocket,
                    "validation_error",
                    [{"loc": list(error["loc"]), "msg": error["msg"]} for error in exc.errors()],
                )
                continue

            message = await service.post_message(user_id=user_id, author=username, text=incoming.text)
            logger.info("Chat message received", extra={"message_id": message.id, "author": username})
            event = MessageEvent.model_validate(message)
            await broker.broadcast(event.model_dump(mode="json"))
    except WebSocketDisconnect as exc:
        logger.info("Chat client disconnected", extra={"user_id": user_id, "close_code": exc.code})
    finally:
        await broker.disconnect(websocket)


__all__ = ["ChatBroker", "ConnectionLimitExceeded", "UNAUTHORIZED_CLOSE_CODE", "broker", "router"]
