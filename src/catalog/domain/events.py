"""Domain events raised by the Product aggregate.

Events are immutable records of state transitions. The aggregate only
queues them in its outbox; the persistence layer drains the outbox after
a successful save and hands the events to whatever sink it was given.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING

from catalog.domain.model.value_objects import utc_now

if TYPE_CHECKING:
    from catalog.domain.model.product import ProductStatus


@dataclass(frozen=True, kw_only=True)
class DomainEvent:
    event_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    occurred_on: datetime = field(default_factory=utc_now)

    @property
    def event_type(self) -> str:
        return type(self).__name__


@dataclass(frozen=True, kw_only=True)
class ProductCreated(DomainEvent):
    product_id: str
    name: str
    price: Decimal


@dataclass(frozen=True, kw_only=True)
class ProductUpdated(DomainEvent):
    product_id: str
    name: str


@dataclass(frozen=True, kw_only=True)
class ProductStockChanged(DomainEvent):
    product_id: str
    new_stock: int
    delta: int


@dataclass(frozen=True, kw_only=True)
class ProductStatusChanged(DomainEvent):
    product_id: str
    new_status: ProductStatus


@dataclass(frozen=True, kw_only=True)
class ProductReviewAdded(DomainEvent):
    product_id: str
    rating: int
