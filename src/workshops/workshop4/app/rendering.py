"""HTML fallbacks for validation failures and unknown URLs."""

from __future__ import annotations

from fastapi import Request, status
from starlette.responses import Response

from ...common.templates import template_response

_AUTH_FORMS = {
    "/register": ("auth/register.html", "Register"),
    "/login": ("auth/login.html", "Log in"),
}


def _is_api_request(request: Request) -> bool:
    return request.url.path.startswith("/api/") or request.url.path == "/api"


def render_not_found(request: Request) -> Response | None:
    if _is_api_request(request):
        return None
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
    if request.method != "POST" or request.url.path not in _AUTH_FORMS:
        return None
    template_name, title = _AUTH_FORMS[request.url.path]
    return template_response(
        request,
        template_name,
        {"title": title, "errors": errors, "form": values},
        status_code=status.HTTP_400_BAD_REQUEST,
    )
