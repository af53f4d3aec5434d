"""Application service: Change Product Status use case.

Maps a requested target status onto the aggregate's transition methods.
The aggregate decides whether the transition is allowed.
"""

from __future__ import annotations

import logging

from catalog.domain.exceptions import NotFoundError
from catalog.domain.model.product import ProductStatus
from catalog.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class ChangeStatusHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str, target: ProductStatus) -> None:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise NotFoundError(f"Product with ID '{product_id}' not found")

        if target == ProductStatus.ACTIVE:
            product.activate()
        elif target == ProductStatus.INACTIVE:
            product.deactivate()
        else:
            product.discontinue()

        self._product_repo.save(product)
        logger.info("Product %s is now %s", product_id, target.value)
