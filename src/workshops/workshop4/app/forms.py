"""Form payloads for the authentication views."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator


class CredentialsForm(BaseModel):
    csrf_token: str = ""
    username: str = Field(min_length=3, max_length=150)
    password: str = Field(min_length=1)

    @field_validator("username")
    @classmethod
    def _strip_username(cls, value: str) -> str:
        stripped = value.strip()
        if len(stripped) < 3:
            raise ValueError("Username must be at least 3 characters.")
        return stripped
