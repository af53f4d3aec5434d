"""Application service: Create Product use case."""

from __future__ import annotations

import logging
from decimal import Decimal

from catalog.application.dto import ProductDTO, to_product_dto
from catalog.application.validation import validate_create_product
from catalog.domain.model.product import DEFAULT_LOW_STOCK_THRESHOLD, Product
from catalog.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class CreateProductHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        low_stock_threshold: int = DEFAULT_LOW_STOCK_THRESHOLD,
    ) -> None:
        self._product_repo = product_repo
        self._low_stock_threshold = low_stock_threshold

    def handle(
        self,
        name: str,
        description: str,
        price: str | int | float | Decimal,
        stock: int,
        sku: str | None = None,
        category: str | None = None,
    ) -> ProductDTO:
        """Add a new product to the catalog.

        Steps:
        1. Validate the whole request (reports every bad field).
        2. Let the Product aggregate enforce its invariants.
        3. Persist and return a DTO.
        """
        validate_create_product(name, description, price, stock, sku, category)

        product = Product.create(
            name=name,
            description=description,
            price=price,
            stock=stock,
            sku=sku,
            category=category,
        )
        self._product_repo.save(product)

        logger.info("Created product '%s' (%s)", product.name, product.id)
        return to_product_dto(product, self._low_stock_threshold)
