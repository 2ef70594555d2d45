"""Per-request correlation state shared by logging and error handling."""

from __future__ import annotations

from contextvars import ContextVar, Token

REQUEST_ID_HEADER = "X-Request-ID"

_request_id: ContextVar[str] = ContextVar("workshop_request_id", default="-")


def get_request_id() -> str:
    return _request_id.get()


def bind_request_id(request_id: str) -> Token[str]:
    """Bind ``request_id`` to the running task until the token is reset."""

    return _request_id.set(request_id)


def reset_request_id(token: Token[str]) -> None:
    _request_id.reset(token)


__all__ = ["REQUEST_ID_HEADER", "bind_request_id", "get_request_id", "reset_request_id"]
