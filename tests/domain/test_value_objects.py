"""Unit tests for domain value objects."""

from decimal import Decimal

import pytest

from catalog.domain.exceptions import ValidationError
from catalog.domain.model.value_objects import EntityIdentity, Money


# ── Money ────────────────────────────────────────────────────────────────────


class TestMoney:

    def test_creation(self):
        m = Money(Decimal("10.50"))
        assert m.amount == Decimal("10.50")
        assert m.currency == "USD"

    def test_of_factory_from_string(self):
        assert Money.of("25.99").amount == Decimal("25.99")

    def test_of_factory_from_float_keeps_decimal_digits(self):
        assert Money.of(9.99).amount == Decimal("9.99")

    def test_negative_amount_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Money(Decimal("-1"))

    def test_non_finite_rejected(self):
        with pytest.raises(ValidationError, match="finite"):
            Money.of("NaN")

    def test_garbage_rejected(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Money.of("ten")

    def test_str_formatting(self):
        assert str(Money.of("15")) == "$15.00"
        assert str(Money.of("9.5")) == "$9.50"

    def test_equality_by_value(self):
        assert Money.of("1.50") == Money(Decimal("1.50"))


# ── EntityIdentity ───────────────────────────────────────────────────────────


class TestEntityIdentity:

    def test_new_assigns_id_and_created_at(self):
        identity = EntityIdentity.new()
        assert identity.id
        assert identity.created_at.tzinfo is not None
        assert identity.updated_at is None

    def test_touch_stamps_updated_at(self):
        identity = EntityIdentity.new()
        stamped = identity.touch()
        assert identity.updated_at == stamped
        assert stamped >= identity.created_at
