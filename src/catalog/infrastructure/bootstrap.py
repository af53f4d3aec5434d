"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from catalog.infrastructure.config import settings
from catalog.infrastructure.event_log import log_domain_events
from catalog.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)


def product_repository() -> JsonProductRepository:
    return JsonProductRepository(
        settings.DATA_DIR / "products.json", event_sink=log_domain_events
    )


def low_stock_threshold() -> int:
    return settings.LOW_STOCK_THRESHOLD


def default_page_size() -> int:
    return settings.DEFAULT_PAGE_SIZE
