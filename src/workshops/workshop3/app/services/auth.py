"""Registration and login against the in-memory user table."""

from __future__ import annotations

import logging

from fastapi import status

from ....common.errors import ApplicationError
from ....common.security import get_password_hash, verify_password
from ..store import DataStore, UserRecord

logger = logging.getLogger(__name__)


class AuthService:
    """Username/password workflows for workshop 3."""

    def __init__(self, store: DataStore) -> None:
        self._store = store

    def register_user(self, username: str, password: str) -> UserRecord:
        if self._store.get_user(username) is not None:
            raise ApplicationError(
                "Username already exists!",
                code="username_taken",
                status_code=status.HTTP_409_CONFLICT,
            )
        user = self._store.add_user(
            UserRecord(username=username, password_hash=get_password_hash(password))
        )
        logger.info("User registered", extra={"username": username})
        return user

    def authenticate_user(self, username: str, password: str) -> UserRecord | None:
        """Return the user when the password matches, otherwise ``None``."""

        user = self._store.get_user(username)
        if user is None or not verify_password(password, user.password_hash):
            return None
        return user
