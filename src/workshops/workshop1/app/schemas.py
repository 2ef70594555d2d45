"""Response models for the routing workshop."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ProductRead(BaseModel):
    """A product priced in the requested currency."""

    model_config = ConfigDict(
        json_schema_extra={"example": {"id": 100, "name": "Laptop", "price": 1200, "currency": "USD"}}
    )

    id: int
    name: str
    price: int
    currency: str = Field(description="Currency code echoed from the query string")


class ProfileSummary(BaseModel):
    username: str


class ProfileRead(ProfileSummary):
    email: str
    role: str


class BookSummary(BaseModel):
    title: str
    author: str


class BookRead(BookSummary):
    id: int
    price: int
