"""Application service: Update Product use cases.

Covers the detail fields (name, description, price) and the two
unconditional classification fields (category, SKU).
"""

from __future__ import annotations

import logging
from decimal import Decimal

from catalog.application.validation import (
    validate_category,
    validate_product_details,
    validate_sku,
)
from catalog.domain.exceptions import NotFoundError
from catalog.domain.model.product import Product
from catalog.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


def _load(product_repo: ProductRepository, product_id: str) -> Product:
    product = product_repo.get_by_id(product_id)
    if product is None:
        raise NotFoundError(f"Product with ID '{product_id}' not found")
    return product


class UpdateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        product_id: str,
        name: str,
        description: str,
        price: str | int | float | Decimal,
    ) -> None:
        """Update a product's name, description and price.

        Stock, SKU, category and status are not affected.
        """
        validate_product_details(name, description, price)

        product = _load(self._product_repo, product_id)
        product.update_details(name, description, price)
        self._product_repo.save(product)
        logger.info("Updated details of product %s", product_id)


class UpdateCategoryHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str, category: str | None) -> None:
        validate_category(category)

        product = _load(self._product_repo, product_id)
        product.update_category(category)
        self._product_repo.save(product)
        logger.info("Set category of product %s to %r", product_id, category)


class UpdateSkuHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str, sku: str | None) -> None:
        validate_sku(sku)

        product = _load(self._product_repo, product_id)
        product.update_sku(sku)
        self._product_repo.save(product)
        logger.info("Set SKU of product %s to %r", product_id, sku)
