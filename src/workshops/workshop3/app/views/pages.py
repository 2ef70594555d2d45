from __future__ import annotations

from fastapi import APIRouter, Request

from ....common.templates import template_response
from ..store import DataStoreDependency

router = APIRouter(tags=["pages"])


@router.get("/", name="pages:home")
@router.get("/home", include_in_schema=False)
async def home(request: Request, store: DataStoreDependency) -> object:
    """Render the landing page with the most recently created wiki pages."""

    recent = sorted(store.pages.values(), key=lambda page: page.created_at, reverse=True)[:5]
    return template_response(request, "home.html", {"title": "Home", "recent_pages": recent})
