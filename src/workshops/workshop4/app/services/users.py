"""Service layer orchestrating user-related repository operations."""

from __future__ import annotations

from fastapi import status
from sqlalchemy.exc import IntegrityError
from sqlmodel.ext.asyncio.session import AsyncSession

from ....common.errors import ApplicationError
from ..models import User
from ..repositories import UserRepository

USERNAME_TAKEN_MESSAGE = "Username already exists!"


class UserService:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session
        self._repository = UserRepository(session)

    async def create_user(self, *, username: str, password: str) -> User:
        """Create and persist a new user with a hashed password.

        A concurrent registration of the same name surfaces as the unique
        constraint failing, which is reported like any other duplicate.
        """
        user = User(username=username, password_hash="")
        user.set_password(password)
        try:
            return await self._repository.save(user)
        except IntegrityError as exc:
            await self._session.rollback()
            raise ApplicationError(
                USERNAME_TAKEN_MESSAGE,
                code="username_taken",
                status_code=status.HTTP_409_CONFLICT,
            ) from exc

    async def get_user(self, user_id: int) -> User | None:
        return await self._repository.get(user_id)

    async def get_user_by_username(self, username: str) -> User | None:
        return await self._repository.get_by_username(username)
