from __future__ import annotations

from workshops.common.security import get_password_hash, verify_password
from workshops.common.session import (
    add_flash_message,
    ensure_csrf_token,
    get_session_user_id,
    get_session_username,
    login_user,
    logout_user,
    pop_flash_messages,
    validate_csrf_token,
)


def test_flash_messages_are_ordered_and_consumed() -> None:
    session: dict = {}
    add_flash_message(session, "info", "fyi")
    add_flash_message(session, "success", "done")
    add_flash_message(session, "danger", "broken")

    messages = pop_flash_messages(session)

    assert [item["category"] for item in messages] == ["danger", "success", "info"]
    assert pop_flash_messages(session) == []


def test_csrf_token_is_stable_per_session() -> None:
    session: dict = {}
    token = ensure_csrf_token(session)

    assert ensure_csrf_token(session) == token
    assert validate_csrf_token(session, token)
    assert not validate_csrf_token(session, "other")
    assert not validate_csrf_token(session, None)
    assert not validate_csrf_token({}, token)


def test_login_and_logout() -> None:
    session: dict = {"csrf_token": "abc"}
    login_user(session, "ada", 7)

    assert get_session_username(session) == "ada"
    assert get_session_user_id(session) == 7

    logout_user(session)
    assert session == {}
    assert get_session_username(session) is None
    assert get_session_user_id(session) is None


def test_password_hash_round_trip() -> None:
    hashed = get_password_hash("correct horse")

    assert hashed != "correct horse"
    assert verify_password("correct horse", hashed)
    assert not verify_password("battery staple", hashed)
