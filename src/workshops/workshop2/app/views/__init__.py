from __future__ import annotations

from fastapi import APIRouter

from . import contact, pages, quotes

router = APIRouter()
router.include_router(pages.router)
router.include_router(contact.router)
router.include_router(quotes.router)

__all__ = ["router"]
