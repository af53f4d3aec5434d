"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the transport and application layers without
exposing the aggregate itself to the outside world.
"""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass, field
from datetime import datetime
from decimal import Decimal

from catalog.domain.model.product import (
    DEFAULT_LOW_STOCK_THRESHOLD,
    Product,
    ProductReview,
)


@dataclass(frozen=True)
class ProductListItemDTO:
    """Output: one row of the product list."""

    id: str
    name: str
    sku: str | None
    price: Decimal
    stock: int
    status: str
    category: str | None
    created_at: datetime
    is_low_stock: bool


@dataclass(frozen=True)
class ProductReviewDTO:
    id: str
    reviewer_name: str
    rating: int
    comment: str
    created_at: datetime


@dataclass(frozen=True)
class ProductDTO:
    """Output: a single product with its reviews, in insertion order."""

    id: str
    name: str
    description: str
    sku: str | None
    price: Decimal
    stock: int
    status: str
    category: str | None
    last_restocked_at: datetime | None
    created_at: datetime
    updated_at: datetime | None
    is_low_stock: bool
    average_rating: float | None
    reviews: list[ProductReviewDTO] = field(default_factory=list)


@dataclass(frozen=True)
class PagedResult:
    """One page of list items plus the pre-pagination match count."""

    items: list[ProductListItemDTO]
    total_count: int
    page_number: int
    page_size: int

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_count / self.page_size)

    @property
    def has_previous_page(self) -> bool:
        return self.page_number > 1

    @property
    def has_next_page(self) -> bool:
        return self.page_number < self.total_pages

    def to_dict(self) -> dict:
        data = asdict(self)
        data["total_pages"] = self.total_pages
        data["has_previous_page"] = self.has_previous_page
        data["has_next_page"] = self.has_next_page
        return data


# --- Mapping ------------------------------------------------------------------


def to_list_item(
    product: Product, low_stock_threshold: int = DEFAULT_LOW_STOCK_THRESHOLD
) -> ProductListItemDTO:
    return ProductListItemDTO(
        id=product.id,
        name=product.name,
        sku=product.sku,
        price=product.price.amount,
        stock=product.stock,
        status=product.status.value,
        category=product.category,
        created_at=product.created_at,
        is_low_stock=product.is_low_stock(low_stock_threshold),
    )


def to_review_dto(review: ProductReview) -> ProductReviewDTO:
    return ProductReviewDTO(
        id=review.id,
        reviewer_name=review.reviewer_name,
        rating=review.rating,
        comment=review.comment,
        created_at=review.created_at,
    )


def to_product_dto(
    product: Product, low_stock_threshold: int = DEFAULT_LOW_STOCK_THRESHOLD
) -> ProductDTO:
    return ProductDTO(
        id=product.id,
        name=product.name,
        description=product.description,
        sku=product.sku,
        price=product.price.amount,
        stock=product.stock,
        status=product.status.value,
        category=product.category,
        last_restocked_at=product.last_restocked_at,
        created_at=product.created_at,
        updated_at=product.updated_at,
        is_low_stock=product.is_low_stock(low_stock_threshold),
        average_rating=product.average_rating,
        reviews=[to_review_dto(r) for r in product.reviews],
    )
