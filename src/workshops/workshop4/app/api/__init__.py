from __future__ import annotations

from fastapi import APIRouter

from . import messages, tasks

api_router = APIRouter(prefix="/api")
api_router.include_router(tasks.router, prefix="/tasks")
api_router.include_router(messages.router, prefix="/messages")

__all__ = ["api_router"]
