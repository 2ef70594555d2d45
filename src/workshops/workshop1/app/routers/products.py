"""Product lookup with an optional currency query parameter."""

from __future__ import annotations

import logging

from fastapi import APIRouter

from ....common.errors import NotFoundError
from ..catalog import find_product
from ..config import SettingsDependency
from ..schemas import ProductRead

router = APIRouter(tags=["products"])
logger = logging.getLogger(__name__)


@router.get("/{product_id}", response_model=ProductRead, summary="Fetch a product")
async def read_product(
    product_id: int,
    settings: SettingsDependency,
    currency: str | None = None,
) -> ProductRead:
    """Return a product with its price labelled in ``currency``."""

    product = find_product(product_id)
    if product is None:
        raise NotFoundError("Product not found.")
    resolved_currency = settings.default_currency if currency is None else currency
    logger.debug("Product lookup", extra={"product_id": product_id, "currency": resolved_currency})
    return ProductRead(id=product.id, name=product.name, price=product.price, currency=resolved_currency)
