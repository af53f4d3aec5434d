"""Tests for the JSON-file product repository and its mapping layer."""

import json
from decimal import Decimal

import pytest

from catalog.domain.model.product import Product, ProductStatus
from catalog.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)


@pytest.fixture
def sink():
    received = []
    return received


@pytest.fixture
def repo(tmp_path, sink):
    return JsonProductRepository(tmp_path / "data" / "products.json", event_sink=sink.extend)


class TestJsonProductRepository:

    def test_creates_missing_file(self, tmp_path):
        path = tmp_path / "nested" / "products.json"
        JsonProductRepository(path)
        assert json.loads(path.read_text(encoding="utf-8")) == []

    def test_round_trips_full_aggregate(self, repo):
        product = Product.create("Widget", "desc", "9.99", 5, sku="WD-1", category="Gadgets")
        product.update_stock(3)
        product.add_review("Alice", 4, "Nice")
        product.add_review("Bob", 2, "")
        product.deactivate()
        repo.save(product)

        loaded = repo.get_with_reviews(product.id)
        assert loaded == product
        assert loaded.price.amount == Decimal("9.99")
        assert loaded.status == ProductStatus.INACTIVE
        assert loaded.last_restocked_at == product.last_restocked_at
        assert loaded.updated_at == product.updated_at
        assert [r.reviewer_name for r in loaded.reviews] == ["Alice", "Bob"]
        assert loaded.reviews[0].product_id == product.id

    def test_reconstituted_product_has_no_pending_events(self, repo):
        product = Product.create("Widget", "", "1", 1)
        repo.save(product)
        assert repo.get_by_id(product.id).pending_events == ()

    def test_save_drains_events_into_sink(self, repo, sink):
        product = Product.create("Widget", "", "1", 1)
        product.update_stock(2)
        repo.save(product)
        assert [e.event_type for e in sink] == ["ProductCreated", "ProductStockChanged"]
        assert product.pending_events == ()

    def test_save_without_events_does_not_call_sink(self, repo, sink):
        product = Product.create("Widget", "", "1", 1)
        repo.save(product)
        sink.clear()
        product.update_sku("X")
        repo.save(product)
        assert sink == []

    def test_save_upserts(self, repo):
        product = Product.create("Widget", "", "1", 1)
        repo.save(product)
        product.update_details("Gizmo", "", "2")
        repo.save(product)

        assert len(repo.list_all()) == 1
        assert repo.get_by_id(product.id).name == "Gizmo"

    def test_missing_id_returns_none(self, repo):
        assert repo.get_by_id("missing") is None
        assert repo.get_with_reviews("missing") is None

    def test_list_active(self, repo):
        active = Product.create("A", "", "1", 1)
        retired = Product.create("B", "", "1", 1)
        retired.discontinue()
        repo.save(active)
        repo.save(retired)
        assert [p.id for p in repo.list_active()] == [active.id]

    def test_list_by_price_range_is_inclusive(self, repo):
        for name, price in [("A", "5"), ("B", "10"), ("C", "15"), ("D", "20")]:
            repo.save(Product.create(name, "", price, 1))
        found = repo.list_by_price_range(Decimal("10"), Decimal("15"))
        assert sorted(p.name for p in found) == ["B", "C"]

    def test_discontinued_rules_survive_reload(self, repo):
        from catalog.domain.exceptions import InvalidOperationError

        product = Product.create("Widget", "", "1", 1)
        product.discontinue()
        repo.save(product)

        loaded = repo.get_by_id(product.id)
        with pytest.raises(InvalidOperationError):
            loaded.activate()
