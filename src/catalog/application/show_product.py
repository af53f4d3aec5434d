"""Application service: Show Product use case (query)."""

from __future__ import annotations

from catalog.application.dto import ProductDTO, to_product_dto
from catalog.domain.exceptions import NotFoundError
from catalog.domain.model.product import DEFAULT_LOW_STOCK_THRESHOLD
from catalog.domain.repository.product_repository import ProductRepository


class ShowProductHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        low_stock_threshold: int = DEFAULT_LOW_STOCK_THRESHOLD,
    ) -> None:
        self._product_repo = product_repo
        self._low_stock_threshold = low_stock_threshold

    def handle(self, product_id: str) -> ProductDTO:
        product = self._product_repo.get_with_reviews(product_id)
        if product is None:
            raise NotFoundError(f"Product with ID '{product_id}' not found")
        return to_product_dto(product, self._low_stock_threshold)
