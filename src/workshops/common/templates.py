"""Jinja2 rendering helpers that inject session state into every page."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from fastapi import Request
from fastapi.templating import Jinja2Templates
from starlette.responses import Response

from .session import ensure_csrf_token, get_session_username, pop_flash_messages


def build_templates(directory: Path) -> Jinja2Templates:
    """Create the template environment an application registers on ``app.state``."""

    templates = Jinja2Templates(directory=str(directory))
    templates.env.trim_blocks = True
    templates.env.lstrip_blocks = True
    return templates


def _base_context(request: Request, extra: dict[str, Any] | None) -> dict[str, Any]:
    context = dict(extra or {})
    session = request.session

    context.setdefault("settings", getattr(request.app.state, "settings", None))
    context.setdefault("current_user", get_session_username(session))
    context.setdefault("form", {})
    context["csrf_token"] = ensure_csrf_token(session)
    context["messages"] = pop_flash_messages(session)
    return context


def template_response(
    request: Request,
    template_name: str,
    context: dict[str, Any] | None = None,
    *,
    status_code: int = 200,
) -> Response:
    """Render ``template_name`` with the application's template environment.

    Queued flash messages are consumed by this call.
    """

    templates: Jinja2Templates = request.app.state.templates
    payload = _base_context(request, context)
    return templates.TemplateResponse(request, template_name, payload, status_code=status_code)


__all__ = ["build_templates", "template_response"]
