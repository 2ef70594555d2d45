"""Plain-text greeting routes."""

from __future__ import annotations

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter(tags=["greetings"], default_response_class=PlainTextResponse)


@router.get("/", summary="Hello world")
async def hello_world() -> str:
    return "Hello, World!"


@router.get("/user/{username}", summary="Greet a user by name")
async def greet_user(username: str) -> str:
    """Echo the ``username`` path parameter back in a greeting."""

    return f"Hello, {username}!"


@router.get("/search", summary="Echo a search query")
async def search(query: str | None = None) -> str:
    if not query:
        return "Please provide a search query."
    return f"You are searching for: {query}"
