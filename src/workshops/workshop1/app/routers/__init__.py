from __future__ import annotations

from fastapi import APIRouter

from . import books, greetings, products, profiles

router = APIRouter()
router.include_router(greetings.router)
router.include_router(products.router, prefix="/products")
router.include_router(profiles.router, prefix="/profile")
router.include_router(books.router, prefix="/books")

__all__ = ["router"]
