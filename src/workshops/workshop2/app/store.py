"""Process-lifetime quote storage."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Annotated

from fastapi import Depends, Request


@dataclass(frozen=True, slots=True)
class Quote:
    author: str
    quote: str


@dataclass(slots=True)
class QuoteStore:
    """Append-only list of shared quotes, lost on restart."""

    quotes: list[Quote] = field(default_factory=list)

    def add(self, author: str, quote: str) -> Quote:
        record = Quote(author=author, quote=quote)
        self.quotes.append(record)
        return record

    def by_author(self, author: str) -> list[Quote]:
        """Return quotes whose author matches ``author`` case-insensitively."""

        needle = author.casefold()
        return [record for record in self.quotes if record.author.casefold() == needle]

    def all(self) -> list[Quote]:
        return list(self.quotes)


def get_quote_store(request: Request) -> QuoteStore:
    return request.app.state.quotes


QuoteStoreDependency = Annotated[QuoteStore, Depends(get_quote_store)]
