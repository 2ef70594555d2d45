"""Share quotes and search them by author."""

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, Form, Request, status
from starlette.responses import RedirectResponse

from ....common.session import add_flash_message, validate_csrf_token
from ....common.templates import template_response
from ..forms import SearchQuotesForm, ShareQuoteForm
from ..store import QuoteStoreDependency
from .contact import FORM_EXPIRED_MESSAGE

router = APIRouter(tags=["quotes"])
logger = logging.getLogger(__name__)


@router.get("/share", name="quotes:share")
async def share_form(request: Request) -> object:
    return template_response(request, "quotes/share.html", {"title": "Share a quote", "errors": {}})


@router.post("/share", name="quotes:share:submit")
async def share_submit(
    request: Request,
    form: Annotated[ShareQuoteForm, Form()],
    store: QuoteStoreDependency,
) -> object:
    """Append a quote and send the visitor back to the home page."""

    if not validate_csrf_token(request.session, form.csrf_token):
        add_flash_message(request.session, "danger", FORM_EXPIRED_MESSAGE)
        return template_response(
            request,
            "quotes/share.html",
            {"title": "Share a quote", "errors": {}},
            status_code=status.HTTP_400_BAD_REQUEST,
        )

    store.add(form.author, form.quote)
    logger.info("New quote added by %s", form.author)
    add_flash_message(request.session, "success", "Quote shared!")
    return RedirectResponse(request.url_for("pages:home"), status_code=status.HTTP_303_SEE_OTHER)


@router.get("/search", name="quotes:search")
async def search_form(request: Request) -> object:
    return template_response(request, "quotes/search.html", {"title": "Search quotes", "errors": {}})


@router.post("/search", name="quotes:search:submit")
async def search_submit(
    request: Request,
    form: Annotated[SearchQuotesForm, Form()],
    store: QuoteStoreDependency,
) -> object:
    if not validate_csrf_token(request.session, form.csrf_token):
        add_flash_message(request.session, "danger", FORM_EXPIRED_MESSAGE)
        return template_response(
            request,
            "quotes/search.html",
            {"title": "Search quotes", "errors": {}},
            status_code=status.HTTP_400_BAD_REQUEST,
        )

    results = store.by_author(form.author)
    return template_response(
        request,
        "quotes/search.html",
        {"title": "Search quotes", "errors": {}, "author": form.author, "quotes": results},
    )
