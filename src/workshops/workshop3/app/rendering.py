"""HTML fallbacks for validation failures and unknown URLs."""

from __future__ import annotations

from fastapi import Request, status
from starlette.responses import Response

from ...common.templates import template_response
from .editor import editor_context


def render_not_found(request: Request) -> Response:
    return template_response(
        request,
        "404.html",
        {"title": "Page Not Found", "url": str(request.url.path)},
        status_code=status.HTTP_404_NOT_FOUND,
    )


def render_form_errors(
    request: Request,
    errors: dict[str, str],
    values: dict[str, str],
) -> Response | None:
    """Redisplay the submitted form with field errors, or defer to the JSON handler."""

    if request.method != "POST":
        return None
    path = request.url.path
    if path == "/register":
        return template_response(
            request,
            "auth/register.html",
            {"title": "Register", "errors": errors, "form": values},
            status_code=status.HTTP_400_BAD_REQUEST,
        )
    if path == "/login":
        return template_response(
            request,
            "auth/login.html",
            {"title": "Log in", "errors": errors, "form": values},
            status_code=status.HTTP_400_BAD_REQUEST,
        )
    if path == "/create":
        editor = request.query_params.get("editor")
        return template_response(
            request,
            "wiki/create.html",
            editor_context(editor, errors=errors, form=values),
            status_code=status.HTTP_400_BAD_REQUEST,
        )
    return None
