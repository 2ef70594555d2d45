"""Registration, login and logout backed by the ``users`` table."""

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, Form, Request, status
from starlette.responses import RedirectResponse

from ....common.errors import ApplicationError
from ....common.session import add_flash_message, login_user, logout_user, validate_csrf_token
from ....common.templates import template_response
from ..deps import DatabaseSessionDependency
from ..forms import CredentialsForm
from ..services import AuthService

router = APIRouter(tags=["auth"])
logger = logging.getLogger(__name__)

FORM_EXPIRED_MESSAGE = "The form has expired. Please try again."


def _redirect(request: Request, route_name: str) -> RedirectResponse:
    return RedirectResponse(request.url_for(route_name), status_code=status.HTTP_303_SEE_OTHER)


@router.get("/register", name="auth:register")
async def register_form(request: Request) -> object:
    return template_response(request, "auth/register.html", {"title": "Register", "errors": {}})


@router.post("/register", name="auth:register:submit")
async def register_submit(
    request: Request,
    form: Annotated[CredentialsForm, Form()],
    session: DatabaseSessionDependency,
) -> RedirectResponse:
    if not validate_csrf_token(request.session, form.csrf_token):
        add_flash_message(request.session, "danger", FORM_EXPIRED_MESSAGE)
        return _redirect(request, "auth:register")

    try:
        await AuthService(session).register_user(username=form.username, password=form.password)
    except ApplicationError as exc:
        add_flash_message(request.session, "danger", exc.message)
        return _redirect(request, "auth:register")

    add_flash_message(request.session, "success", "Registration successful! Please log in.")
    return _redirect(request, "auth:login")


@router.get("/login", name="auth:login")
async def login_form(request: Request) -> object:
    return template_response(request, "auth/login.html", {"title": "Log in", "errors": {}})


@router.post("/login", name="auth:login:submit")
async def login_submit(
    request: Request,
    form: Annotated[CredentialsForm, Form()],
    session: DatabaseSessionDependency,
) -> RedirectResponse:
    """Check the credentials and remember both the user id and username."""

    if not validate_csrf_token(request.session, form.csrf_token):
        add_flash_message(request.session, "danger", FORM_EXPIRED_MESSAGE)
        return _redirect(request, "auth:login")

    user = await AuthService(session).authenticate_user(form.username, form.password)
    if user is None or user.id is None:
        logger.info("Rejected login", extra={"username": form.username})
        add_flash_message(request.session, "danger", "Invalid username or password.")
        return _redirect(request, "auth:login")

    login_user(request.session, user.username, user.id)
    logger.info("User logged in", extra={"user_id": user.id})
    add_flash_message(request.session, "success", "Logged in successfully!")
    return _redirect(request, "pages:home")


@router.get("/logout", name="auth:logout")
async def logout(request: Request) -> RedirectResponse:
    logout_user(request.session)
    return _redirect(request, "auth:login")
