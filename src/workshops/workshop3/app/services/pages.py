"""Wiki page storage and rendering."""

from __future__ import annotations

import nh3
from markdown_it import MarkdownIt
from markupsafe import Markup

from ..store import DataStore, PageFormat, PageRecord

# Raw HTML in Markdown is escaped; single newlines become <br>.
_markdown = MarkdownIt("commonmark", {"html": False, "breaks": True}).enable("table")


def render_markdown(text: str) -> str:
    return _markdown.render(text)


def sanitize_html(html: str) -> str:
    """Strip scripts, event handlers and unknown tags from editor output."""

    return nh3.clean(html)


class PageService:
    def __init__(self, store: DataStore) -> None:
        self._store = store

    def get_page(self, title: str) -> PageRecord | None:
        return self._store.get_page(title)

    def list_pages(self) -> list[PageRecord]:
        return self._store.list_pages()

    def save_page(self, *, title: str, content: str, author: str, page_format: PageFormat) -> PageRecord:
        """Create or overwrite the page called ``title``.

        Rich-text bodies are sanitised on the way in so the stored copy is safe
        to render verbatim.
        """

        if page_format is PageFormat.HTML:
            content = sanitize_html(content)
        return self._store.save_page(
            PageRecord(title=title, content=content, author=author, format=page_format)
        )

    @staticmethod
    def render(page: PageRecord) -> Markup:
        if page.format is PageFormat.HTML:
            return Markup(page.content)
        return Markup(render_markdown(page.content))
