from __future__ import annotations

from fastapi import APIRouter, Request

from ....common.templates import template_response
from ..config import SettingsDependency
from ..deps import LoginRequiredDependency

router = APIRouter(tags=["pages"])


@router.get("/", name="pages:home")
async def home(request: Request) -> object:
    """Render the landing page; the navbar reflects the session user."""

    return template_response(request, "home.html", {"title": "Home"})


@router.get("/profile", name="pages:profile")
async def profile(request: Request, username: LoginRequiredDependency) -> object:
    return template_response(request, "profile.html", {"title": "Profile", "username": username})


@router.get("/app", name="pages:spa")
async def single_page_app(
    request: Request,
    username: LoginRequiredDependency,
    settings: SettingsDependency,
) -> object:
    """Serve the React shell that talks to ``/api`` and ``/ws/chat``."""

    return template_response(
        request,
        "spa.html",
        {"title": "Tasks & chat", "username": username, "react_cdn_url": settings.react_cdn_url},
    )
