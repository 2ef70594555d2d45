"""In-memory user and page storage shared by the workshop's routes."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Annotated

from fastapi import Depends, Request


class PageFormat(str, Enum):
    """How a wiki page body is stored."""

    MARKDOWN = "markdown"
    HTML = "html"


@dataclass(slots=True)
class UserRecord:
    username: str
    password_hash: str
    avatar: str | None = None


@dataclass(slots=True)
class PageRecord:
    title: str
    content: str
    author: str
    format: PageFormat = PageFormat.MARKDOWN
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


@dataclass(slots=True)
class DataStore:
    """Plain key-value collections; nothing survives a restart."""

    users: dict[str, UserRecord] = field(default_factory=dict)
    pages: dict[str, PageRecord] = field(default_factory=dict)

    def get_user(self, username: str) -> UserRecord | None:
        return self.users.get(username)

    def add_user(self, user: UserRecord) -> UserRecord:
        self.users[user.username] = user
        return user

    def get_page(self, title: str) -> PageRecord | None:
        return self.pages.get(title)

    def save_page(self, page: PageRecord) -> PageRecord:
        """Store ``page`` under its title, replacing any previous version."""

        self.pages[page.title] = page
        return page

    def list_pages(self) -> list[PageRecord]:
        return sorted(self.pages.values(), key=lambda page: page.title.casefold())


def get_data_store(request: Request) -> DataStore:
    return request.app.state.data_store


DataStoreDependency = Annotated[DataStore, Depends(get_data_store)]
