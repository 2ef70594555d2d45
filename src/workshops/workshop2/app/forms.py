"""Form payloads validated by FastAPI before the view runs."""

from __future__ import annotations

from pydantic import BaseModel, Field


class CsrfProtectedForm(BaseModel):
    csrf_token: str = ""


class ContactForm(CsrfProtectedForm):
    name: str = Field(min_length=3, max_length=25)
    message: str = Field(max_length=200)


class ShareQuoteForm(CsrfProtectedForm):
    author: str = Field(min_length=3, max_length=25)
    quote: str = Field(min_length=20, max_length=300)


class SearchQuotesForm(CsrfProtectedForm):
    author: str = Field(min_length=3, max_length=25)
