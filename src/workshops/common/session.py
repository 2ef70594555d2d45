"""Session helpers for login state, CSRF tokens and flash messages."""

from __future__ import annotations

import secrets
from typing import Any, MutableMapping

SESSION_USER_KEY = "user"
SESSION_USER_ID_KEY = "user_id"
SESSION_CSRF_KEY = "csrf_token"
SESSION_FLASH_KEY = "flash_messages"

FLASH_CATEGORIES = ("danger", "success", "info")


def get_session_username(session: MutableMapping[str, Any]) -> str | None:
    """Return the username of the signed-in user, if any."""

    raw = session.get(SESSION_USER_KEY)
    if isinstance(raw, str) and raw:
        return raw
    return None


def get_session_user_id(session: MutableMapping[str, Any]) -> int | None:
    raw = session.get(SESSION_USER_ID_KEY)
    if raw is None:
        return None
    try:
        return int(raw)
    except (TypeError, ValueError):
        return None


def login_user(session: MutableMapping[str, Any], username: str, user_id: int | None = None) -> None:
    """Record a successful login in the session."""

    session[SESSION_USER_KEY] = username
    if user_id is not None:
        session[SESSION_USER_ID_KEY] = int(user_id)


def logout_user(session: MutableMapping[str, Any]) -> None:
    """Drop every key from the session, like destroying it server-side."""

    session.clear()


def ensure_csrf_token(session: MutableMapping[str, Any]) -> str:
    """Return the session's CSRF token, generating one if necessary."""

    token = session.get(SESSION_CSRF_KEY)
    if isinstance(token, str) and token:
        return token
    token = secrets.token_urlsafe(32)
    session[SESSION_CSRF_KEY] = token
    return token


def validate_csrf_token(session: MutableMapping[str, Any], provided: object) -> bool:
    """Compare a submitted CSRF token with the one stored in the session."""

    expected = session.get(SESSION_CSRF_KEY)
    if not expected or not isinstance(provided, str) or not provided:
        return False
    return secrets.compare_digest(str(expected), provided)


def add_flash_message(session: MutableMapping[str, Any], category: str, message: str) -> None:
    """Queue a one-time message for the next rendered page."""

    existing = session.get(SESSION_FLASH_KEY)
    queued = list(existing) if isinstance(existing, list) else []
    queued.append({"category": category, "message": message})
    session[SESSION_FLASH_KEY] = queued


def pop_flash_messages(session: MutableMapping[str, Any]) -> list[dict[str, str]]:
    """Retrieve and clear queued flash messages, ordered by category."""

    messages = session.pop(SESSION_FLASH_KEY, [])
    if not isinstance(messages, list):
        return []
    cleaned: list[dict[str, str]] = []
    for item in messages:
        if not isinstance(item, dict):
            continue
        message = str(item.get("message", ""))
        if not message:
            continue
        cleaned.append({"category": str(item.get("category", "info")), "message": message})

    def _rank(item: dict[str, str]) -> int:
        try:
            return FLASH_CATEGORIES.index(item["category"])
        except ValueError:
            return len(FLASH_CATEGORIES)

    return sorted(cleaned, key=_rank)


__all__ = [
    "FLASH_CATEGORIES",
    "SESSION_CSRF_KEY",
    "SESSION_FLASH_KEY",
    "SESSION_USER_ID_KEY",
    "SESSION_USER_KEY",
    "add_flash_message",
    "ensure_csrf_token",
    "get_session_user_id",
    "get_session_username",
    "login_user",
    "logout_user",
    "pop_flash_messages",
    "validate_csrf_token",
]
