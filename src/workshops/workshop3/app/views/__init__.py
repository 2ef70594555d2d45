from __future__ import annotations

from fastapi import APIRouter

from . import auth, pages, profile, wiki

router = APIRouter()
router.include_router(pages.router)
router.include_router(auth.router)
router.include_router(wiki.router)
router.include_router(profile.router)

__all__ = ["router"]
