"""JSON-file-backed implementation of ProductRepository.

``_to_raw`` / ``_to_domain`` form the mapping layer: stored records are
turned back into aggregates through the plain dataclass constructors,
never through ``Product.create()``, so reconstitution neither re-runs
business validation nor raises domain events.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime
from decimal import Decimal
from pathlib import Path

from catalog.domain.model.product import Product, ProductReview, ProductStatus
from catalog.domain.model.value_objects import EntityIdentity, Money
from catalog.domain.repository.product_repository import ProductRepository
from catalog.infrastructure.event_log import EventSink

logger = logging.getLogger(__name__)


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path, event_sink: EventSink | None = None) -> None:
        self._file_path = file_path
        self._event_sink = event_sink
        self._ensure_file()

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: str) -> Product | None:
        for raw in self._load_raw():
            if raw["id"] == product_id:
                return self._to_domain(raw)
        return None

    def get_with_reviews(self, product_id: str) -> Product | None:
        # Reviews are stored inline with their product, so every load is complete.
        return self.get_by_id(product_id)

    def list_all(self) -> list[Product]:
        return [self._to_domain(raw) for raw in self._load_raw()]

    def list_active(self) -> list[Product]:
        return [p for p in self.list_all() if p.status == ProductStatus.ACTIVE]

    def list_by_price_range(
        self, min_price: Decimal, max_price: Decimal
    ) -> list[Product]:
        return [
            p for p in self.list_all() if min_price <= p.price.amount <= max_price
        ]

    def save(self, product: Product) -> None:
        records = self._load_raw()

        # Upsert: replace if exists, otherwise append
        replaced = False
        for i, raw in enumerate(records):
            if raw["id"] == product.id:
                records[i] = self._to_raw(product)
                replaced = True
                break
        if not replaced:
            records.append(self._to_raw(product))

        self._persist_raw(records)

        events = product.pull_events()
        if events and self._event_sink is not None:
            self._event_sink(events)
        logger.debug("Saved product %s (%d events drained)", product.id, len(events))

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(product: Product) -> dict:
        return {
            "id": product.id,
            "name": product.name,
            "description": product.description,
            "sku": product.sku,
            "price": str(product.price.amount),
            "currency": product.price.currency,
            "stock": product.stock,
            "status": product.status.value,
            "category": product.category,
            "last_restocked_at": _dump_dt(product.last_restocked_at),
            "created_at": product.created_at.isoformat(),
            "updated_at": _dump_dt(product.updated_at),
            "reviews": [
                {
                    "id": review.id,
                    "reviewer_name": review.reviewer_name,
                    "rating": review.rating,
                    "comment": review.comment,
                    "created_at": review.created_at.isoformat(),
                }
                for review in product.reviews
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        reviews = [
            ProductReview(
                identity=EntityIdentity(
                    id=r["id"], created_at=datetime.fromisoformat(r["created_at"])
                ),
                product_id=raw["id"],
                reviewer_name=r["reviewer_name"],
                rating=r["rating"],
                comment=r.get("comment", ""),
            )
            for r in raw.get("reviews", [])
        ]
        return Product(
            identity=EntityIdentity(
                id=raw["id"],
                created_at=datetime.fromisoformat(raw["created_at"]),
                updated_at=_load_dt(raw.get("updated_at")),
            ),
            name=raw["name"],
            description=raw.get("description", ""),
            price=Money(Decimal(raw["price"]), raw.get("currency", "USD")),
            stock=raw["stock"],
            status=ProductStatus(raw["status"]),
            sku=raw.get("sku"),
            category=raw.get("category"),
            last_restocked_at=_load_dt(raw.get("last_restocked_at")),
            reviews=reviews,
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist_raw(self, records: list[dict]) -> None:
        self._file_path.write_text(
            json.dumps(records, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")


def _dump_dt(value: datetime | None) -> str | None:
    return value.isoformat() if value is not None else None


def _load_dt(value: str | None) -> datetime | None:
    return datetime.fromisoformat(value) if value else None
