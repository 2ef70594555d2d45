"""Dependencies shared by the session-based workshops."""

from __future__ import annotations

from typing import Callable

from fastapi import Request

from .errors import LoginRequired
from .session import get_session_username

DEFAULT_LOGIN_MESSAGE = "You must log in to access this page."


def login_required(message: str = DEFAULT_LOGIN_MESSAGE) -> Callable[[Request], str]:
    """Build a dependency returning the signed-in username or redirecting to ``/login``."""

    def _dependency(request: Request) -> str:
        username = get_session_username(request.session)
        if username is None:
            raise LoginRequired(message)
        return username

    return _dependency


__all__ = ["DEFAULT_LOGIN_MESSAGE", "login_required"]
