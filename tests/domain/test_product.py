"""Unit tests for Product construction and detail updates."""

from decimal import Decimal

import pytest

from catalog.domain.events import ProductCreated, ProductUpdated
from catalog.domain.exceptions import ValidationError
from catalog.domain.model.product import Product, ProductStatus
from catalog.domain.model.value_objects import Money


def _make_product(**overrides) -> Product:
    """Helper to build a valid product with its creation event drained."""
    fields = dict(name="Widget", description="desc", price="9.99", stock=5)
    fields.update(overrides)
    product = Product.create(**fields)
    product.pull_events()
    return product


class TestProductCreation:

    def test_happy_path(self):
        product = Product.create("Widget", "desc", 9.99, 5)
        assert product.name == "Widget"
        assert product.description == "desc"
        assert product.price == Money(Decimal("9.99"))
        assert product.stock == 5
        assert product.status == ProductStatus.ACTIVE
        assert product.last_restocked_at is None
        assert product.updated_at is None
        assert product.reviews == []

    def test_optional_sku_and_category(self):
        product = Product.create("Widget", "", "1", 0, sku="W-1", category="Tools")
        assert product.sku == "W-1"
        assert product.category == "Tools"

    def test_assigns_unique_ids(self):
        a = Product.create("A", "", "1", 0)
        b = Product.create("B", "", "1", 0)
        assert a.id != b.id

    def test_created_at_is_set(self):
        product = Product.create("Widget", "", "1", 0)
        assert product.created_at is not None
        assert product.created_at.tzinfo is not None

    def test_name_is_trimmed(self):
        product = Product.create("  Widget  ", "", "1", 0)
        assert product.name == "Widget"

    def test_zero_price_and_stock_accepted(self):
        product = Product.create("Freebie", "", "0", 0)
        assert product.price.amount == Decimal("0")
        assert product.stock == 0

    def test_raises_created_event(self):
        product = Product.create("Widget", "desc", "9.99", 5)
        events = product.pending_events
        assert len(events) == 1
        assert isinstance(events[0], ProductCreated)
        assert events[0].product_id == product.id
        assert events[0].name == "Widget"
        assert events[0].price == Decimal("9.99")


class TestProductCreationValidation:

    def test_empty_name_rejected(self):
        with pytest.raises(ValidationError, match="name cannot be empty"):
            Product.create("", "desc", "9.99", 5)

    def test_whitespace_name_rejected(self):
        with pytest.raises(ValidationError, match="name cannot be empty"):
            Product.create("   ", "desc", "9.99", 5)

    def test_name_over_200_chars_rejected(self):
        with pytest.raises(ValidationError, match="200 characters"):
            Product.create("x" * 201, "desc", "9.99", 5)

    def test_name_of_200_chars_accepted(self):
        product = Product.create("x" * 200, "desc", "9.99", 5)
        assert len(product.name) == 200

    def test_negative_price_rejected(self):
        with pytest.raises(ValidationError, match="Price cannot be negative"):
            Product.create("Widget", "desc", "-0.01", 5)

    def test_non_numeric_price_rejected(self):
        with pytest.raises(ValidationError, match="Invalid price"):
            Product.create("Widget", "desc", "cheap", 5)

    def test_negative_stock_rejected(self):
        with pytest.raises(ValidationError, match="Stock cannot be negative"):
            Product.create("Widget", "desc", "9.99", -1)

    def test_non_integer_stock_rejected(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            Product.create("Widget", "desc", "9.99", 2.5)


class TestUpdateDetails:

    def test_replaces_name_description_and_price(self):
        product = _make_product(stock=7, sku="W-1", category="Tools")
        product.update_details("Gizmo", "new desc", "19.50")

        assert product.name == "Gizmo"
        assert product.description == "new desc"
        assert product.price == Money.of("19.50")
        # untouched
        assert product.stock == 7
        assert product.sku == "W-1"
        assert product.category == "Tools"
        assert product.status == ProductStatus.ACTIVE

    def test_stamps_updated_at(self):
        product = _make_product()
        product.update_details("Gizmo", "", "1")
        assert product.updated_at is not None
        assert product.updated_at >= product.created_at

    def test_raises_updated_event(self):
        product = _make_product()
        product.update_details("Gizmo", "", "1")
        (event,) = product.pending_events
        assert isinstance(event, ProductUpdated)
        assert event.product_id == product.id
        assert event.name == "Gizmo"

    def test_blank_name_rejected_and_state_unchanged(self):
        product = _make_product()
        with pytest.raises(ValidationError):
            product.update_details(" ", "", "1")
        assert product.name == "Widget"
        assert product.updated_at is None
        assert product.pending_events == ()

    def test_negative_price_rejected(self):
        product = _make_product()
        with pytest.raises(ValidationError, match="Price cannot be negative"):
            product.update_details("Widget", "", "-5")
        assert product.price == Money.of("9.99")


class TestCategoryAndSku:

    def test_update_category(self):
        product = _make_product()
        product.update_category("Garden")
        assert product.category == "Garden"
        assert product.updated_at is not None
        assert product.pending_events == ()

    def test_clear_category(self):
        product = _make_product(category="Garden")
        product.update_category(None)
        assert product.category is None

    def test_update_sku(self):
        product = _make_product()
        product.update_sku("SKU-42")
        assert product.sku == "SKU-42"
        assert product.updated_at is not None
        assert product.pending_events == ()


class TestOutbox:

    def test_pull_events_drains(self):
        product = Product.create("Widget", "", "1", 1)
        product.update_sku("X")
        product.update_details("Widget 2", "", "2")

        events = product.pull_events()
        assert [e.event_type for e in events] == ["ProductCreated", "ProductUpdated"]
        assert product.pending_events == ()
        assert product.pull_events() == []

    def test_events_have_identity_and_timestamp(self):
        product = Product.create("Widget", "", "1", 1)
        (event,) = product.pull_events()
        assert event.event_id
        assert event.occurred_on.tzinfo is not None

    def test_reconstituted_product_has_no_events(self):
        stored = Product.create("Widget", "", "1", 1)
        copy = Product(
            identity=stored.identity,
            name=stored.name,
            description=stored.description,
            price=stored.price,
            stock=stored.stock,
        )
        assert copy.pending_events == ()
