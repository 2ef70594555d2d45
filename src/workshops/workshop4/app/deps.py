"""Reusable FastAPI dependencies."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, HTTPException, Request, status
from sqlmodel.ext.asyncio.session import AsyncSession

from ...common.deps import login_required
from ...common.errors import CsrfError
from ...common.session import get_session_user_id, validate_csrf_token
from .db import get_db_session
from .models import User
from .services import UserService

CSRF_HEADER = "X-CSRF-Token"

DatabaseSessionDependency = Annotated[AsyncSession, Depends(get_db_session)]
LoginRequiredDependency = Annotated[str, Depends(login_required())]


async def get_api_user(request: Request, session: DatabaseSessionDependency) -> User:
    """Resolve the session user for JSON endpoints, answering 401 instead of redirecting."""

    user_id = get_session_user_id(request.session)
    user = await UserService(session).get_user(user_id) if user_id is not None else None
    if user is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Authentication required.")
    return user


def require_csrf_header(request: Request) -> None:
    if not validate_csrf_token(request.session, request.headers.get(CSRF_HEADER)):
        raise CsrfError()


ApiUserDependency = Annotated[User, Depends(get_api_user)]
CsrfHeaderDependency = Annotated[None, Depends(require_csrf_header)]

__all__ = [
    "ApiUserDependency",
    "CSRF_HEADER",
    "CsrfHeaderDependency",
    "DatabaseSessionDependency",
    "LoginRequiredDependency",
    "get_api_user",
    "require_csrf_header",
]
