"""Application service: Adjust Stock use case.

Applies a relative change (restock or withdrawal). The aggregate refuses
any change that would drive stock below zero.
"""

from __future__ import annotations

import logging

from catalog.domain.exceptions import NotFoundError
from catalog.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class AdjustStockHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str, delta: int) -> int:
        """Apply *delta* to the product's stock and return the new level."""
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise NotFoundError(f"Product with ID '{product_id}' not found")

        product.update_stock(delta)
        self._product_repo.save(product)

        logger.info(
            "Stock of product %s changed by %+d to %d", product_id, delta, product.stock
        )
        return product.stock
