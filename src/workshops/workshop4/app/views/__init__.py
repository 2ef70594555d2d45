from __future__ import annotations

from fastapi import APIRouter

from . import auth, pages

router = APIRouter()
router.include_router(pages.router)
router.include_router(auth.router)

__all__ = ["router"]
