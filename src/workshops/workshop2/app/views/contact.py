"""Contact forms with and without CSRF protection."""

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, Form, Request, status

from ....common.session import add_flash_message, validate_csrf_token
from ....common.templates import template_response
from ..forms import ContactForm

router = APIRouter(tags=["contact"])
logger = logging.getLogger(__name__)

FORM_EXPIRED_MESSAGE = "The form has expired. Please try again."


def _clean_text(raw: object) -> str:
    return str(raw or "").strip()


@router.get("/contact", name="contact:form")
async def contact_form(request: Request) -> object:
    return template_response(request, "contact.html", {"title": "Contact", "form": {}})


@router.post("/contact", name="contact:submit")
async def contact_submit(request: Request) -> object:
    """Accept an unprotected contact message; both fields are required."""

    form = await request.form()
    name = _clean_text(form.get("name"))
    message = _clean_text(form.get("message"))
    if not name or not message:
        return template_response(
            request,
            "contact.html",
            {
                "title": "Contact",
                "form": {"name": name, "message": message},
                "error": "Name and message are required",
            },
            status_code=status.HTTP_400_BAD_REQUEST,
        )

    logger.info("Received message from %s: %s", name, message)
    return template_response(
        request,
        "contact.html",
        {"title": "Contact", "form": {}, "submitted_name": name},
    )


@router.get("/contact_csrf", name="contact_csrf:form")
async def contact_csrf_form(request: Request) -> object:
    return template_response(request, "contact_csrf.html", {"title": "Contact (CSRF)", "errors": {}})


@router.post("/contact_csrf", name="contact_csrf:submit")
async def contact_csrf_submit(request: Request, form: Annotated[ContactForm, Form()]) -> object:
    if not validate_csrf_token(request.session, form.csrf_token):
        add_flash_message(request.session, "danger", FORM_EXPIRED_MESSAGE)
        return template_response(
            request,
            "contact_csrf.html",
            {"title": "Contact (CSRF)", "errors": {}},
            status_code=status.HTTP_400_BAD_REQUEST,
        )

    logger.info("Received from %s: %s", form.name, form.message)
    return template_response(
        request,
        "contact_csrf.html",
        {"title": "Contact (CSRF)", "errors": {}, "submitted_name": form.name},
    )
