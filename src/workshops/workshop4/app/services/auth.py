"""Registration and login against the ``users`` table."""

from __future__ import annotations

import logging

from fastapi import status
from sqlmodel.ext.asyncio.session import AsyncSession

from ....common.errors import ApplicationError
from ..models import User
from .users import USERNAME_TAKEN_MESSAGE, UserService

logger = logging.getLogger(__name__)


class AuthService:
    """High-level authentication workflows for workshop 4."""

    def __init__(self, session: AsyncSession) -> None:
        self._user_service = UserService(session)

    async def register_user(self, *, username: str, password: str) -> User:
        existing = await self._user_service.get_user_by_username(username)
        if existing is not None:
            raise ApplicationError(
                USERNAME_TAKEN_MESSAGE,
                code="username_taken",
                status_code=status.HTTP_409_CONFLICT,
            )
        user = await self._user_service.create_user(username=username, password=password)
        logger.info("User registered", extra={"user_id": user.id})
        return user

    async def authenticate_user(self, username: str, password: str) -> User | None:
        user = await self._user_service.get_user_by_username(username)
        if user is None or not user.check_password(password):
            return None
        return user
