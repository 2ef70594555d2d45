"""Registration, login and logout backed by the in-memory user table."""

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, Form, Request, status
from starlette.responses import RedirectResponse

from ....common.errors import ApplicationError
from ....common.session import add_flash_message, login_user, logout_user, validate_csrf_token
from ....common.templates import template_response
from ..forms import CredentialsForm
from ..services import AuthService
from ..store import DataStoreDependency

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
    store: DataStoreDependency,
) -> RedirectResponse:
    """Create an account and send the visitor to the login page."""

    if not validate_csrf_token(request.session, form.csrf_token):
        add_flash_message(request.session, "danger", FORM_EXPIRED_MESSAGE)
        return _redirect(request, "auth:register")

    try:
        AuthService(store).register_user(form.username, form.password)
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
    store: DataStoreDependency,
) -> RedirectResponse:
    if not validate_csrf_token(request.session, form.csrf_token):
        add_flash_message(request.session, "danger", FORM_EXPIRED_MESSAGE)
        return _redirect(request, "auth:login")

    user = AuthService(store).authenticate_user(form.username, form.password)
    if user is None:
        logger.info("Rejected login", extra={"username": form.username})
        add_flash_message(request.session, "danger", "Invalid username or password.")
        return _redirect(request, "auth:login")

    login_user(request.session, user.username)
    add_flash_message(request.session, "success", "Login successful!")
    return _redirect(request, "pages:home")


@router.get("/logout", name="auth:logout")
async def logout(request: Request) -> RedirectResponse:
    logout_user(request.session)
    return _redirect(request, "auth:login")
