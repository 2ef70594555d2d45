"""Form payloads for authentication and page editing."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from .store import PageFormat


class CsrfProtectedForm(BaseModel):
    csrf_token: str = ""


class CredentialsForm(CsrfProtectedForm):
    username: str = Field(min_length=3, max_length=150)
    password: str = Field(min_length=1)

    @field_validator("username")
    @classmethod
    def _strip_username(cls, value: str) -> str:
        stripped = value.strip()
        if len(stripped) < 3:
            raise ValueError("Username must be at least 3 characters.")
        return stripped


class PageForm(CsrfProtectedForm):
    title: str = Field(min_length=1, max_length=50)
    content: str = Field(min_length=1)
    format: PageFormat = PageFormat.MARKDOWN

    @field_validator("title")
    @classmethod
    def _reject_path_separators(cls, value: str) -> str:
        stripped = value.strip()
        if not stripped:
            raise ValueError("Title must not be blank.")
        if "/" in stripped:
            raise ValueError("Title must not contain '/'.")
        return stripped
