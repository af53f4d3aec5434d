"""Integration tests for the product command handlers.

Uses the in-memory fake repository, no file I/O.
"""

from decimal import Decimal

import pytest

from catalog.application.change_status import ChangeStatusHandler
from catalog.application.create_product import CreateProductHandler
from catalog.application.update_product import (
    UpdateCategoryHandler,
    UpdateProductHandler,
    UpdateSkuHandler,
)
from catalog.domain.events import ProductCreated, ProductStatusChanged, ProductUpdated
from catalog.domain.exceptions import InvalidOperationError, NotFoundError, ValidationError
from catalog.domain.model.product import Product, ProductStatus
from tests.fakes import FakeProductRepository


def _setup():
    widget = Product.create("Widget", "desc", "9.99", 5)
    repo = FakeProductRepository([widget])
    return repo, widget


class TestCreateProduct:

    def test_creates_and_persists(self):
        repo = FakeProductRepository()
        dto = CreateProductHandler(repo).handle(
            name="Widget", description="desc", price="9.99", stock=5,
            sku="WD-1", category="Gadgets",
        )
        saved = repo.get_by_id(dto.id)
        assert saved is not None
        assert saved.name == "Widget"
        assert dto.price == Decimal("9.99")
        assert dto.status == "Active"
        assert dto.reviews == []

    def test_created_event_is_drained_on_save(self):
        repo = FakeProductRepository()
        dto = CreateProductHandler(repo).handle("Widget", "", "1", 1)
        (event,) = repo.published
        assert isinstance(event, ProductCreated)
        assert event.product_id == dto.id
        assert repo.get_by_id(dto.id).pending_events == ()

    def test_reports_every_bad_field(self):
        repo = FakeProductRepository()
        with pytest.raises(ValidationError) as exc_info:
            CreateProductHandler(repo).handle("", "d" * 1001, "-1", -2)
        assert exc_info.value.errors == [
            "Name is required",
            "Description cannot exceed 1000 characters",
            "Price cannot be negative",
            "Stock cannot be negative",
        ]
        assert repo.list_all() == []
        assert repo.published == []

    def test_long_sku_rejected(self):
        repo = FakeProductRepository()
        with pytest.raises(ValidationError, match="SKU cannot exceed"):
            CreateProductHandler(repo).handle("Widget", "", "1", 1, sku="S" * 65)


class TestUpdateProduct:

    def test_updates_details(self):
        repo, widget = _setup()
        UpdateProductHandler(repo).handle(widget.id, "Gizmo", "new", "12.00")
        saved = repo.get_by_id(widget.id)
        assert saved.name == "Gizmo"
        assert saved.price.amount == Decimal("12.00")
        assert saved.stock == 5
        assert [type(e) for e in repo.published] == [ProductUpdated]

    def test_unknown_product(self):
        repo, _ = _setup()
        with pytest.raises(NotFoundError, match="not found"):
            UpdateProductHandler(repo).handle("missing", "Gizmo", "", "1")

    def test_invalid_input_is_rejected_before_loading(self):
        repo, widget = _setup()
        with pytest.raises(ValidationError, match="Name is required"):
            UpdateProductHandler(repo).handle(widget.id, "", "", "1")
        assert repo.saves == 0

    def test_update_category(self):
        repo, widget = _setup()
        UpdateCategoryHandler(repo).handle(widget.id, "Tools")
        assert repo.get_by_id(widget.id).category == "Tools"
        assert repo.published == []

    def test_update_sku(self):
        repo, widget = _setup()
        UpdateSkuHandler(repo).handle(widget.id, "WD-2")
        assert repo.get_by_id(widget.id).sku == "WD-2"

    def test_category_for_unknown_product(self):
        repo, _ = _setup()
        with pytest.raises(NotFoundError):
            UpdateCategoryHandler(repo).handle("missing", "Tools")


class TestChangeStatus:

    @pytest.mark.parametrize(
        "target", [ProductStatus.INACTIVE, ProductStatus.DISCONTINUED, ProductStatus.ACTIVE]
    )
    def test_moves_to_target(self, target):
        repo, widget = _setup()
        ChangeStatusHandler(repo).handle(widget.id, target)
        assert repo.get_by_id(widget.id).status == target
        (event,) = repo.published
        assert isinstance(event, ProductStatusChanged)
        assert event.new_status == target

    def test_discontinued_cannot_be_reactivated(self):
        repo, widget = _setup()
        handler = ChangeStatusHandler(repo)
        handler.handle(widget.id, ProductStatus.DISCONTINUED)

        with pytest.raises(InvalidOperationError):
            handler.handle(widget.id, ProductStatus.ACTIVE)
        assert repo.get_by_id(widget.id).status == ProductStatus.DISCONTINUED
        assert repo.saves == 1

    def test_unknown_product(self):
        repo, _ = _setup()
        with pytest.raises(NotFoundError):
            ChangeStatusHandler(repo).handle("missing", ProductStatus.INACTIVE)
