"""Value Objects shared across the domain.

Value Objects are compared by value, not identity. They encapsulate
validation so invalid values can never exist.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal, InvalidOperation

from catalog.domain.exceptions import ValidationError


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class Money:
    """Non-negative monetary amount.

    Uses Decimal to avoid floating-point rounding errors that would be
    unacceptable for prices and price-range filters.
    """

    amount: Decimal
    currency: str = "USD"

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if not self.amount.is_finite():
            raise ValidationError(f"Money amount must be finite, got {self.amount}")
        if self.amount < Decimal("0"):
            raise ValidationError(
                f"Money amount cannot be negative, got {self.amount}"
            )

    def __str__(self) -> str:
        return f"${self.amount:.2f}"

    @staticmethod
    def of(amount: str | float | int | Decimal) -> Money:
        """Convenient factory that coerces to Decimal safely."""
        if isinstance(amount, bool):
            raise ValidationError(f"Invalid money amount: {amount!r}")
        try:
            return Money(Decimal(str(amount)))
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc


@dataclass
class EntityIdentity:
    """Identity and audit timestamps embedded in every entity.

    ``id`` and ``created_at`` never change once assigned; ``updated_at``
    is stamped through ``touch()`` by each business method.
    """

    id: str
    created_at: datetime
    updated_at: datetime | None = field(default=None)

    @staticmethod
    def new() -> EntityIdentity:
        return EntityIdentity(id=str(uuid.uuid4()), created_at=utc_now())

    def touch(self) -> datetime:
        self.updated_at = utc_now()
        return self.updated_at
