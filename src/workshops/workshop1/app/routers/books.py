"""Book lookup with a summary switch."""

from __future__ import annotations

from fastapi import APIRouter

from ....common.errors import NotFoundError
from ..catalog import find_book
from ..schemas import BookRead, BookSummary

router = APIRouter(tags=["books"])


@router.get("/{book_id}", response_model=BookRead | BookSummary, summary="Fetch a book")
async def read_book(book_id: int, summary: bool = False) -> BookRead | BookSummary:
    book = find_book(book_id)
    if book is None:
        raise NotFoundError("Book not found.")
    if summary:
        return BookSummary(title=book.title, author=book.author)
    return BookRead(id=book.id, title=book.title, author=book.author, price=book.price)
