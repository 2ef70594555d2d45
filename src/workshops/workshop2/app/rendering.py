"""Redisplay the submitting form when its payload fails validation."""

from __future__ import annotations

from fastapi import Request, status
from starlette.responses import Response

from ...common.templates import template_response

# Longest prefix first so ``/contact_csrf`` is not shadowed by a shorter path.
FORM_VIEWS: tuple[tuple[str, str, str], ...] = (
    ("/contact_csrf", "contact_csrf.html", "Contact (CSRF)"),
    ("/share", "quotes/share.html", "Share a quote"),
    ("/search", "quotes/search.html", "Search quotes"),
)


def render_form_errors(
    request: Request,
    errors: dict[str, str],
    values: dict[str, str],
) -> Response | None:
    """Render the form matching the request path with field errors, or ``None``."""

    if request.method != "POST":
        return None
    for prefix, template_name, title in FORM_VIEWS:
        if request.url.path.startswith(prefix):
            return template_response(
                request,
                template_name,
                {"title": title, "errors": errors, "form": values},
                status_code=status.HTTP_400_BAD_REQUEST,
            )
    return None
