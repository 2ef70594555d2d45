"""Wiki pages written in Markdown or with the Quill rich-text editor."""

from __future__ import annotations

import logging
from urllib.parse import quote
from typing import Annotated

from fastapi import APIRouter, Form, Request, status
from starlette.responses import RedirectResponse

from ....common.session import add_flash_message, validate_csrf_token
from ....common.templates import template_response
from ..deps import PageAuthorDependency
from ..editor import editor_context
from ..forms import PageForm
from ..rendering import render_not_found
from ..services import PageService
from ..store import DataStoreDependency, PageFormat

router = APIRouter(tags=["wiki"])
logger = logging.getLogger(__name__)


@router.get("/wiki", name="wiki:index")
async def list_pages(request: Request, store: DataStoreDependency) -> object:
    pages = PageService(store).list_pages()
    return template_response(request, "wiki/index.html", {"title": "Wiki", "pages": pages})


@router.get("/wiki/{page_name}", name="wiki:page")
async def show_page(request: Request, page_name: str, store: DataStoreDependency) -> object:
    service = PageService(store)
    page = service.get_page(page_name)
    if page is None:
        return render_not_found(request)
    return template_response(
        request,
        "wiki/page.html",
        {"title": page.title, "page": page, "html_content": service.render(page)},
    )


@router.get("/create", name="wiki:create")
async def create_form(request: Request, _: PageAuthorDependency, editor: str | None = None) -> object:
    return template_response(request, "wiki/create.html", editor_context(editor))


@router.post("/create", name="wiki:create:submit")
async def create_submit(
    request: Request,
    author: PageAuthorDependency,
    form: Annotated[PageForm, Form()],
    store: DataStoreDependency,
) -> object:
    """Store the page and redirect to it."""

    editor = "quill" if form.format is PageFormat.HTML else "markdown"
    if not validate_csrf_token(request.session, form.csrf_token):
        add_flash_message(request.session, "danger", "The form has expired. Please try again.")
        return template_response(
            request,
            "wiki/create.html",
            editor_context(editor, form={"title": form.title, "content": form.content}),
            status_code=status.HTTP_400_BAD_REQUEST,
        )

    page = PageService(store).save_page(
        title=form.title,
        content=form.content,
        author=author,
        page_format=form.format,
    )
    logger.info("Wiki page saved", extra={"page_title": page.title, "author": author})
    return RedirectResponse(
        request.url_for("wiki:page", page_name=quote(page.title, safe="")),
        status_code=status.HTTP_303_SEE_OTHER,
    )
