from __future__ import annotations

from fastapi import APIRouter, Request

from ....common.templates import template_response
from ..store import QuoteStoreDependency

router = APIRouter(tags=["pages"])

PROFILE_BIO = "Loves coding in JavaScript and exploring new technologies."
SHOPPING_LIST = ("Apples", "Oranges", "Bananas")

_STATUS_MESSAGES = {
    "active": "Your account is active. Enjoy all features!",
    "inactive": "Your account is inactive. Please contact support.",
}


@router.get("/", name="pages:home")
async def home(request: Request, store: QuoteStoreDependency) -> object:
    """Render the landing page with every shared quote."""

    return template_response(request, "index.html", {"title": "Quotes", "quotes": store.all()})


@router.get("/profile/{name}", name="pages:profile")
async def profile(request: Request, name: str) -> object:
    return template_response(
        request,
        "profile.html",
        {
            "title": f"{name}'s profile",
            "user": {"name": name, "bio": PROFILE_BIO, "shopping_list": list(SHOPPING_LIST)},
        },
    )


@router.get("/dashboard/{status}", name="pages:dashboard")
async def dashboard(request: Request, status: str) -> object:
    """Render the dashboard for an ``active``/``inactive`` (or unknown) account status."""

    return template_response(
        request,
        "dashboard.html",
        {
            "title": "Dashboard",
            "user_status": status,
            "status_message": _STATUS_MESSAGES.get(status, f"Unknown status: {status}"),
        },
    )
