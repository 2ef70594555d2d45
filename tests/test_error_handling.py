from __future__ import annotations

import logging

import pytest
from fastapi import status
from httpx import ASGITransport, AsyncClient
from pydantic import BaseModel
from sqlalchemy.exc import IntegrityError

from workshops.common.errors import ApplicationError, LoginRequired, field_errors, submitted_values
from workshops.common.logging import RequestContextFilter
from workshops.workshop1.app.main import create_app
from workshops.workshop2.app.main import create_app as create_forms_app

pytestmark = pytest.mark.asyncio


class ExamplePayload(BaseModel):
    name: str


@pytest.fixture()
def app():
    return create_app()


def _client(app) -> AsyncClient:
    return AsyncClient(transport=ASGITransport(app=app), base_url="http://test")


async def test_application_error_response_schema(app) -> None:
    @app.get("/error/application")
    async def trigger_application_error() -> None:  # pragma: no cover - defined in test
        raise ApplicationError(
            "Example failure",
            code="example_error",
            status_code=status.HTTP_418_IM_A_TEAPOT,
            details={"foo": "bar"},
        )

    async with _client(app) as client:
        response = await client.get("/error/application")

    assert response.status_code == status.HTTP_418_IM_A_TEAPOT
    request_id = response.headers["X-Request-ID"]
    assert response.json() == {
        "code": "example_error",
        "message": "Example failure",
        "details": {"foo": "bar", "request_id": request_id},
    }


async def test_validation_error_response_schema(app) -> None:
    @app.post("/error/validation")
    async def create_item(_: ExamplePayload) -> None:  # pragma: no cover - defined in test
        return None

    async with _client(app) as client:
        response = await client.post("/error/validation", json={})

    assert response.status_code == 422
    payload = response.json()
    assert payload["code"] == "validation_error"
    assert payload["message"] == "Request validation failed."
    assert payload["details"]["errors"][0]["loc"] == ["body", "name"]
    assert payload["details"]["request_id"] == response.headers["X-Request-ID"]


async def test_not_found_error_response_schema(app) -> None:
    async with _client(app) as client:
        response = await client.get("/error/not-found")

    assert response.status_code == status.HTTP_404_NOT_FOUND
    payload = response.json()
    assert payload["code"] == "not_found"
    assert payload["message"] == "Not Found"
    assert payload["details"]["request_id"] == response.headers["X-Request-ID"]


async def test_integrity_error_response_schema(app) -> None:
    @app.get("/error/database")
    async def trigger_integrity_error() -> None:  # pragma: no cover - defined in test
        raise IntegrityError("statement", {}, Exception("constraint"))

    async with _client(app) as client:
        response = await client.get("/error/database")

    assert response.status_code == status.HTTP_409_CONFLICT
    payload = response.json()
    assert payload["code"] == "db_integrity_error"
    assert payload["message"] == "Database integrity violation."


async def test_unhandled_error_hides_internal_details(app) -> None:
    @app.get("/error/unhandled")
    async def trigger_unhandled_error() -> None:  # pragma: no cover - defined in test
        raise RuntimeError("Sensitive detail")

    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.get("/error/unhandled")

    assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
    payload = response.json()
    assert payload["code"] == "server_error"
    assert payload["message"] == "Internal server error."
    assert "Sensitive" not in response.text


async def test_incoming_request_id_is_echoed(app) -> None:
    async with _client(app) as client:
        response = await client.get("/healthz", headers={"X-Request-ID": "abc-123"})

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {"status": "ok"}
    assert response.headers["X-Request-ID"] == "abc-123"


async def test_login_required_flashes_and_redirects() -> None:
    app = create_forms_app()

    @app.get("/members-only")
    async def members_only() -> None:  # pragma: no cover - defined in test
        raise LoginRequired("Members only.")

    async with _client(app) as client:
        response = await client.get("/members-only")
        assert response.status_code == status.HTTP_303_SEE_OTHER
        assert response.headers["location"] == "/login"

        home = await client.get("/")

    assert "Members only." in home.text


class _InMemoryHandler(logging.Handler):
    def __init__(self) -> None:
        super().__init__(level=logging.INFO)
        self.records: list[logging.LogRecord] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.records.append(record)


async def test_request_id_attached_to_logs(app) -> None:
    logger = logging.getLogger("tests.error_handling")
    handler = _InMemoryHandler()
    handler.addFilter(RequestContextFilter())
    logger.addHandler(handler)
    original_level = logger.level
    logger.setLevel(logging.INFO)

    @app.get("/log")
    async def emit_log() -> dict[str, str]:  # pragma: no cover - defined in test
        logger.info("Log entry")
        return {"status": "ok"}

    try:
        async with _client(app) as client:
            response = await client.get("/log")
    finally:
        logger.removeHandler(handler)
        logger.setLevel(original_level)
        handler.close()

    request_id = response.headers["X-Request-ID"]
    matching = [record for record in handler.records if record.getMessage() == "Log entry"]
    assert matching
    assert getattr(matching[0], "request_id", None) == request_id


async def test_field_errors_keeps_first_message_per_field() -> None:
    errors = [
        {"loc": ("body", "name"), "msg": "too short"},
        {"loc": ("body", "name"), "msg": "ignored"},
        {"loc": (), "msg": "whole form"},
    ]
    assert field_errors(errors) == {"name": "too short", "__root__": "whole form"}


async def test_submitted_values_drop_secrets() -> None:
    body = {"username": "ada", "password": "s3cret", "csrf_token": "abc", "count": 3}

    assert submitted_values(body) == {"username": "ada"}
    assert submitted_values(None) == {}
