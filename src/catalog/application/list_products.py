"""Application service: List Products use case (query).

The filter -> count -> sort -> paginate -> project pipeline is a pure
function over a snapshot of products, so it can be exercised without any
repository at all. The handler only loads the snapshot and delegates.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable

from catalog.application.dto import PagedResult, to_list_item
from catalog.domain.exceptions import ValidationError
from catalog.domain.model.product import (
    DEFAULT_LOW_STOCK_THRESHOLD,
    Product,
    ProductStatus,
)
from catalog.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)

DEFAULT_PAGE_NUMBER = 1
DEFAULT_PAGE_SIZE = 10


@dataclass(frozen=True)
class ListProductsQuery:
    """Input: filter, sort and page parameters. ``None`` means "no constraint"."""

    page_number: int = DEFAULT_PAGE_NUMBER
    page_size: int = DEFAULT_PAGE_SIZE
    status: ProductStatus | None = None
    search_term: str | None = None
    category: str | None = None
    min_price: Decimal | None = None
    max_price: Decimal | None = None


def run_query(
    products: Iterable[Product],
    query: ListProductsQuery,
    low_stock_threshold: int = DEFAULT_LOW_STOCK_THRESHOLD,
) -> PagedResult:
    """Filter, count, sort by name, paginate and project *products*."""
    _validate(query)

    matches = [p for p in products if _matches(p, query)]
    total_count = len(matches)

    # Ordinal (code point) comparison, so "Zebra" sorts before "apple".
    matches.sort(key=lambda p: p.name)

    start = (query.page_number - 1) * query.page_size
    page = matches[start : start + query.page_size]

    return PagedResult(
        items=[to_list_item(p, low_stock_threshold) for p in page],
        total_count=total_count,
        page_number=query.page_number,
        page_size=query.page_size,
    )


def _validate(query: ListProductsQuery) -> None:
    errors: list[str] = []
    if query.page_number < 1:
        errors.append("Page number must be at least 1")
    if query.page_size < 1:
        errors.append("Page size must be at least 1")
    if (
        query.min_price is not None
        and query.max_price is not None
        and query.min_price > query.max_price
    ):
        errors.append("Minimum price cannot exceed maximum price")
    if errors:
        raise ValidationError("; ".join(errors), errors)


def _matches(product: Product, query: ListProductsQuery) -> bool:
    if query.status is not None and product.status != query.status:
        return False

    search_term = (query.search_term or "").strip()
    if search_term:
        term = search_term.lower()
        fields = (product.name, product.description, product.sku)
        if not any(f is not None and term in f.lower() for f in fields):
            return False

    category = (query.category or "").strip()
    if category:
        if product.category is None:
            return False
        if product.category.lower() != category.lower():
            return False

    price = product.price.amount
    if query.min_price is not None and price < query.min_price:
        return False
    if query.max_price is not None and price > query.max_price:
        return False

    return True


class ListProductsHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        low_stock_threshold: int = DEFAULT_LOW_STOCK_THRESHOLD,
    ) -> None:
        self._product_repo = product_repo
        self._low_stock_threshold = low_stock_threshold

    def handle(self, query: ListProductsQuery) -> PagedResult:
        snapshot = self._product_repo.list_all()
        result = run_query(snapshot, query, self._low_stock_threshold)
        logger.debug(
            "Listed %d of %d matching products (page %d, size %d)",
            len(result.items),
            result.total_count,
            query.page_number,
            query.page_size,
        )
        return result
