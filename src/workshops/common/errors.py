"""Application-level exception handling helpers."""

from __future__ import annotations

import logging
from contextvars import Token
from http import HTTPStatus
from typing import Any, Callable, Mapping, Sequence

from fastapi import FastAPI, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.requests import Request
from starlette.responses import RedirectResponse, Response

from .context import REQUEST_ID_HEADER, bind_request_id, reset_request_id
from .schemas import ErrorResponse
from .session import add_flash_message

logger = logging.getLogger(__name__)

# Spelled out because the constant name differs across Starlette releases.
HTTP_422_UNPROCESSABLE = 422

ValidationRenderer = Callable[[Request, dict[str, str], dict[str, str]], Response | None]
NotFoundRenderer = Callable[[Request], Response | None]


class ApplicationError(Exception):
    """Base class for domain-specific errors."""

    def __init__(
        self,
        message: str,
        *,
        code: str = "application_error",
        status_code: int = status.HTTP_400_BAD_REQUEST,
        details: Any | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details


class NotFoundError(ApplicationError):
    """Error representing missing resources."""

    def __init__(
        self,
        message: str = "Resource not found.",
        *,
        code: str = "not_found",
        details: Any | None = None,
    ) -> None:
        super().__init__(
            message,
            code=code,
            status_code=status.HTTP_404_NOT_FOUND,
            details=details,
        )


class ValidationError(ApplicationError):
    """Error representing business validation failures."""

    def __init__(
        self,
        message: str = "Validation failed.",
        *,
        code: str = "validation_error",
        details: Any | None = None,
    ) -> None:
        super().__init__(
            message,
            code=code,
            status_code=HTTP_422_UNPROCESSABLE,
            details=details,
        )


class DatabaseIntegrityError(ApplicationError):
    """Error representing database integrity violations."""

    def __init__(
        self,
        message: str = "Database integrity violation.",
        *,
        code: str = "db_integrity_error",
        details: Any | None = None,
    ) -> None:
        super().__init__(
            message,
            code=code,
            status_code=status.HTTP_409_CONFLICT,
            details=details,
        )


class CsrfError(ApplicationError):
    """Raised when a mutating request carries a missing or stale CSRF token."""

    def __init__(self, message: str = "Invalid or missing CSRF token.") -> None:
        super().__init__(
            message,
            code="csrf_failed",
            status_code=status.HTTP_403_FORBIDDEN,
        )


class ServerError(ApplicationError):
    """Error representing unexpected server failures."""

    def __init__(
        self,
        message: str = "Internal server error.",
        *,
        code: str = "server_error",
        details: Any | None = None,
    ) -> None:
        super().__init__(
            message,
            code=code,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            details=details,
        )


class LoginRequired(Exception):
    """Raised by route guards when an anonymous visitor hits a protected page.

    The handler flashes ``message`` and redirects to ``login_path``.
    """

    def __init__(self, message: str, *, login_path: str = "/login") -> None:
        super().__init__(message)
        self.message = message
        self.login_path = login_path


_HTTP_STATUS_CODE_MAP: dict[int, str] = {
    status.HTTP_400_BAD_REQUEST: "bad_request",
    status.HTTP_401_UNAUTHORIZED: "unauthorized",
    status.HTTP_403_FORBIDDEN: "forbidden",
    status.HTTP_404_NOT_FOUND: "not_found",
    status.HTTP_405_METHOD_NOT_ALLOWED: "method_not_allowed",
    status.HTTP_409_CONFLICT: "conflict",
    413: "payload_too_large",
}


_UNECHOED_FIELDS = frozenset({"csrf_token", "password"})


def field_errors(errors: Sequence[Mapping[str, Any]]) -> dict[str, str]:
    """Collapse pydantic error entries into ``{field: first message}``."""

    collected: dict[str, str] = {}
    for error in errors:
        location = error.get("loc") or ()
        field = str(location[-1]) if location else "__root__"
        collected.setdefault(field, str(error.get("msg", "Invalid value.")))
    return collected


def submitted_values(body: Any) -> dict[str, str]:
    """Return the text fields of a rejected form body, minus secrets."""

    if not isinstance(body, Mapping):
        return {}
    return {
        str(key): value
        for key, value in body.items()
        if isinstance(value, str) and key not in _UNECHOED_FIELDS
    }


def _serialisable_errors(errors: Sequence[Mapping[str, Any]]) -> list[dict[str, Any]]:
    return [
        {
            "loc": [str(part) for part in error.get("loc", ())],
            "msg": str(error.get("msg", "")),
            "type": str(error.get("type", "")),
        }
        for error in errors
    ]


def _bind_request_context(request: Request) -> Token[str] | None:
    request_id = getattr(request.state, "request_id", None)
    if not request_id:
        return None
    return bind_request_id(request_id)


def _reset_request_context(token: Token[str] | None) -> None:
    if token is not None:
        reset_request_id(token)


def _merge_details_with_request(request: Request, details: Any | None) -> Any | None:
    request_id = getattr(request.state, "request_id", None)
    if not request_id:
        return details
    if details is None:
        return {"request_id": request_id}
    if isinstance(details, dict):
        return {"request_id": request_id, **details}
    return {"request_id": request_id, "detail": details}


def _error_response(
    request: Request,
    *,
    status_code: int,
    code: str,
    message: str,
    details: Any | None = None,
    headers: Mapping[str, str] | None = None,
) -> JSONResponse:
    payload = ErrorResponse(
        code=code,
        message=message,
        details=_merge_details_with_request(request, details),
    )
    response = JSONResponse(status_code=status_code, content=payload.model_dump())
    if headers:
        response.headers.update(headers)
    request_id = getattr(request.state, "request_id", None)
    if request_id:
        response.headers.setdefault(REQUEST_ID_HEADER, request_id)
    return response


def _http_exception_message(status_code: int, detail: Any) -> tuple[str, Any | None]:
    if isinstance(detail, str):
        return detail, None
    try:
        phrase = HTTPStatus(status_code).phrase
    except ValueError:
        phrase = "Error"
    if detail is None:
        return phrase, None
    if isinstance(detail, list):
        return phrase, {"errors": detail}
    return phrase, detail


def register_exception_handlers(
    app: FastAPI,
    *,
    validation_renderer: ValidationRenderer | None = None,
    not_found_renderer: NotFoundRenderer | None = None,
) -> None:
    """Register exception handlers with the provided FastAPI app.

    ``validation_renderer`` lets HTML workshops redisplay a form instead of
    returning the JSON envelope; ``not_found_renderer`` does the same for
    unknown routes. Either may return ``None`` to fall back to JSON.
    """

    @app.exception_handler(ApplicationError)
    async def _handle_application_error(request: Request, exc: ApplicationError) -> JSONResponse:
        token = _bind_request_context(request)
        try:
            log = logger.error if exc.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR else logger.warning
            log(
                "Application error encountered",
                extra={"code": exc.code, "status_code": exc.status_code},
            )
            return _error_response(
                request,
                status_code=exc.status_code,
                code=exc.code,
                message=exc.message,
                details=exc.details,
            )
        finally:
            _reset_request_context(token)

    @app.exception_handler(LoginRequired)
    async def _handle_login_required(request: Request, exc: LoginRequired) -> RedirectResponse:
        logger.info("Anonymous access redirected to login", extra={"path": request.url.path})
        add_flash_message(request.session, "danger", exc.message)
        return RedirectResponse(exc.login_path, status_code=status.HTTP_303_SEE_OTHER)

    @app.exception_handler(RequestValidationError)
    async def _handle_request_validation_error(
        request: Request,
        exc: RequestValidationError,
    ) -> Response:
        token = _bind_request_context(request)
        try:
            errors = _serialisable_errors(exc.errors())
            logger.warning("Request validation failed", extra={"errors": errors})
            if validation_renderer is not None:
                rendered = validation_renderer(request, field_errors(errors), submitted_values(exc.body))
                if rendered is not None:
                    return rendered
            return _error_response(
                request,
                status_code=HTTP_422_UNPROCESSABLE,
                code="validation_error",
                message="Request validation failed.",
                details={"errors": errors},
            )
        finally:
            _reset_request_context(token)

    @app.exception_handler(IntegrityError)
    async def _handle_integrity_error(request: Request, exc: IntegrityError) -> JSONResponse:
        token = _bind_request_context(request)
        try:
            logger.error("Database integrity error encountered.", exc_info=exc)
            return _error_response(
                request,
                status_code=status.HTTP_409_CONFLICT,
                code="db_integrity_error",
                message="Database integrity violation.",
            )
        finally:
            _reset_request_context(token)

    @app.exception_handler(StarletteHTTPException)
    async def _handle_http_exception(request: Request, exc: StarletteHTTPException) -> Response:
        token = _bind_request_context(request)
        try:
            code = _HTTP_STATUS_CODE_MAP.get(exc.status_code, "http_error")
            log = logger.error if exc.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR else logger.warning
            log(
                "HTTP exception raised",
                extra={"code": code, "status_code": exc.status_code, "path": request.url.path},
            )
            if exc.status_code == status.HTTP_404_NOT_FOUND and not_found_renderer is not None:
                rendered = not_found_renderer(request)
                if rendered is not None:
                    return rendered
            message, details = _http_exception_message(exc.status_code, exc.detail)
            return _error_response(
                request,
                status_code=exc.status_code,
                code=code,
                message=message,
                details=details,
                headers=exc.headers or None,
            )
        finally:
            _reset_request_context(token)

    @app.exception_handler(Exception)
    async def _handle_unhandled_exception(request: Request, exc: Exception) -> JSONResponse:
        token = _bind_request_context(request)
        try:
            logger.exception("Unhandled application error.")
            return _error_response(
                request,
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                code="server_error",
                message="Internal server error.",
            )
        finally:
            _reset_request_context(token)


__all__ = [
    "ApplicationError",
    "CsrfError",
    "DatabaseIntegrityError",
    "LoginRequired",
    "NotFoundError",
    "NotFoundRenderer",
    "ServerError",
    "ValidationError",
    "ValidationRenderer",
    "field_errors",
    "submitted_values",
    "register_exception_handlers",
]
