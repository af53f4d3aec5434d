"""Abstract repository for the Product aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON, SQL, in-memory)
live in the infrastructure layer.

Every method returns fully-materialized aggregates, reviews included.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal

from catalog.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def get_by_id(self, product_id: str) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def get_with_reviews(self, product_id: str) -> Product | None:
        """Return a product with its review collection loaded, or None."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return a snapshot of every product in the catalog."""

    @abstractmethod
    def list_active(self) -> list[Product]:
        """Return every product whose status is ACTIVE."""

    @abstractmethod
    def list_by_price_range(
        self, min_price: Decimal, max_price: Decimal
    ) -> list[Product]:
        """Return products priced within [min_price, max_price]."""

    @abstractmethod
    def save(self, product: Product) -> None:
        """Persist a new or updated product, then drain its pending events."""
