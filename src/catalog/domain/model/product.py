"""Product aggregate, the core of the domain.

The Product is an aggregate root that owns its reviews. Every business
method re-validates its own inputs, stamps ``updated_at`` and queues a
domain event where one is documented. Nothing outside this module
mutates a Product except the persistence mapping layer when it
reconstitutes stored state.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal, InvalidOperation
from enum import Enum

from catalog.domain.events import (
    DomainEvent,
    ProductCreated,
    ProductReviewAdded,
    ProductStatusChanged,
    ProductStockChanged,
    ProductUpdated,
)
from catalog.domain.exceptions import InvalidOperationError, ValidationError
from catalog.domain.model.value_objects import EntityIdentity, Money


class ProductStatus(Enum):
    ACTIVE = "Active"
    INACTIVE = "Inactive"
    DISCONTINUED = "Discontinued"


# ---------------------------------------------------------------------------
# Constants for business rules
# ---------------------------------------------------------------------------
NAME_MAX_LENGTH = 200
DESCRIPTION_MAX_LENGTH = 1000
SKU_MAX_LENGTH = 64
CATEGORY_MAX_LENGTH = 100
REVIEWER_NAME_MAX_LENGTH = 100
COMMENT_MAX_LENGTH = 500
MIN_RATING = 1
MAX_RATING = 5
DEFAULT_LOW_STOCK_THRESHOLD = 10


@dataclass
class ProductReview:
    """A review left on a product.

    Has no lifecycle of its own: reviews are only ever created through
    ``Product.add_review`` and are never removed individually.
    """

    identity: EntityIdentity
    product_id: str
    reviewer_name: str
    rating: int
    comment: str = ""

    @property
    def id(self) -> str:
        return self.identity.id

    @property
    def created_at(self) -> datetime:
        return self.identity.created_at

    @staticmethod
    def create(
        product_id: str, reviewer_name: str, rating: int, comment: str
    ) -> ProductReview:
        if not reviewer_name or not reviewer_name.strip():
            raise ValidationError("Reviewer name is required")
        if len(reviewer_name.strip()) > REVIEWER_NAME_MAX_LENGTH:
            raise ValidationError(
                f"Reviewer name cannot exceed {REVIEWER_NAME_MAX_LENGTH} characters"
            )
        if isinstance(rating, bool) or not isinstance(rating, int):
            raise ValidationError(
                f"Rating must be an integer, got {type(rating).__name__}"
            )
        if rating < MIN_RATING or rating > MAX_RATING:
            raise ValidationError(
                f"Rating must be between {MIN_RATING} and {MAX_RATING}"
            )
        return ProductReview(
            identity=EntityIdentity.new(),
            product_id=product_id,
            reviewer_name=reviewer_name.strip(),
            rating=rating,
            comment=comment or "",
        )


@dataclass
class Product:
    """Aggregate root for the catalog.

    Use the ``Product.create()`` factory for new products. It enforces
    all business rules and raises ``ProductCreated``. The ``__init__`` is
    intentionally simple so the repository can reconstitute persisted
    products without re-validating or re-raising events.

    Invariants:
    - ``price`` and ``stock`` are never negative
    - ``name`` is never blank
    - a DISCONTINUED product never leaves that status
    """

    identity: EntityIdentity
    name: str
    description: str
    price: Money
    stock: int
    status: ProductStatus = ProductStatus.ACTIVE
    sku: str | None = None
    category: str | None = None
    last_restocked_at: datetime | None = None
    reviews: list[ProductReview] = field(default_factory=list)
    _events: list[DomainEvent] = field(
        default_factory=list, init=False, repr=False, compare=False
    )

    # --- Factory (used for NEW products only) ---------------------------------

    @staticmethod
    def create(
        name: str,
        description: str,
        price: Money | Decimal | str | int | float,
        stock: int,
        sku: str | None = None,
        category: str | None = None,
    ) -> Product:
        """Create a new product, enforcing all invariants."""
        clean_name = _require_name(name)
        money = _require_price(price)
        _require_stock(stock, "Stock")

        product = Product(
            identity=EntityIdentity.new(),
            name=clean_name,
            description=description or "",
            price=money,
            stock=stock,
            sku=sku,
            category=category,
        )
        product._record(
            ProductCreated(product_id=product.id, name=product.name, price=money.amount)
        )
        return product

    # --- Identity -------------------------------------------------------------

    @property
    def id(self) -> str:
        return self.identity.id

    @property
    def created_at(self) -> datetime:
        return self.identity.created_at

    @property
    def updated_at(self) -> datetime | None:
        return self.identity.updated_at

    # --- Details --------------------------------------------------------------

    def update_details(
        self,
        name: str,
        description: str,
        price: Money | Decimal | str | int | float,
    ) -> None:
        """Replace name, description and price.

        Stock, SKU, category and status are left untouched.
        """
        clean_name = _require_name(name)
        money = _require_price(price)

        self.name = clean_name
        self.description = description or ""
        self.price = money
        self.identity.touch()
        self._record(ProductUpdated(product_id=self.id, name=self.name))

    def update_category(self, category: str | None) -> None:
        self.category = category
        self.identity.touch()

    def update_sku(self, sku: str | None) -> None:
        self.sku = sku
        self.identity.touch()

    # --- Stock ----------------------------------------------------------------

    def update_stock(self, delta: int) -> None:
        """Apply a relative stock change.

        A positive delta counts as a restock. Raises InvalidOperationError
        (leaving stock unchanged) if the result would go negative.
        """
        if isinstance(delta, bool) or not isinstance(delta, int):
            raise ValidationError(
                f"Stock change must be an integer, got {type(delta).__name__}"
            )
        if self.stock + delta < 0:
            raise InvalidOperationError(
                f"Insufficient stock for {self.name} "
                f"(have {self.stock}, change {delta})"
            )

        self.stock += delta
        now = self.identity.touch()
        if delta > 0:
            self.last_restocked_at = now
        self._record(
            ProductStockChanged(product_id=self.id, new_stock=self.stock, delta=delta)
        )

    def set_stock(self, new_stock: int) -> None:
        """Overwrite the stock level, reporting the difference as the delta."""
        _require_stock(new_stock, "Stock")

        delta = new_stock - self.stock
        self.stock = new_stock
        self.identity.touch()
        self._record(
            ProductStockChanged(product_id=self.id, new_stock=self.stock, delta=delta)
        )

    def is_in_stock(self) -> bool:
        return self.stock > 0

    def is_low_stock(self, threshold: int = DEFAULT_LOW_STOCK_THRESHOLD) -> bool:
        """True when some stock is left but no more than *threshold*.

        A product with zero stock is out of stock, not low on stock.
        """
        return 0 < self.stock <= threshold

    # --- State transitions ----------------------------------------------------

    def activate(self) -> None:
        """Transition INACTIVE|ACTIVE -> ACTIVE."""
        self._ensure_not_discontinued("activate")
        self._change_status(ProductStatus.ACTIVE)

    def deactivate(self) -> None:
        """Transition ACTIVE|INACTIVE -> INACTIVE."""
        self._ensure_not_discontinued("deactivate")
        self._change_status(ProductStatus.INACTIVE)

    def discontinue(self) -> None:
        """Transition any status -> DISCONTINUED (terminal)."""
        self._change_status(ProductStatus.DISCONTINUED)

    # --- Reviews --------------------------------------------------------------

    def add_review(self, reviewer_name: str, rating: int, comment: str) -> ProductReview:
        review = ProductReview.create(self.id, reviewer_name, rating, comment)
        self.reviews.append(review)
        self.identity.touch()
        self._record(ProductReviewAdded(product_id=self.id, rating=review.rating))
        return review

    @property
    def average_rating(self) -> float | None:
        if not self.reviews:
            return None
        return round(sum(r.rating for r in self.reviews) / len(self.reviews), 2)

    # --- Outbox ---------------------------------------------------------------

    @property
    def pending_events(self) -> tuple[DomainEvent, ...]:
        return tuple(self._events)

    def pull_events(self) -> list[DomainEvent]:
        """Return and clear queued events. Called by persistence after a save."""
        events, self._events = self._events, []
        return events

    # --- Internal helpers -----------------------------------------------------

    def _record(self, event: DomainEvent) -> None:
        self._events.append(event)

    def _ensure_not_discontinued(self, action: str) -> None:
        if self.status == ProductStatus.DISCONTINUED:
            raise InvalidOperationError(
                f"Cannot {action} product '{self.name}': it is discontinued"
            )

    def _change_status(self, new_status: ProductStatus) -> None:
        self.status = new_status
        self.identity.touch()
        self._record(ProductStatusChanged(product_id=self.id, new_status=new_status))


def _require_name(name: str) -> str:
    if not name or not name.strip():
        raise ValidationError("Product name cannot be empty")
    clean = name.strip()
    if len(clean) > NAME_MAX_LENGTH:
        raise ValidationError(
            f"Product name cannot exceed {NAME_MAX_LENGTH} characters"
        )
    return clean


def _require_price(price: Money | Decimal | str | int | float) -> Money:
    if isinstance(price, Money):
        return price
    if isinstance(price, bool):
        raise ValidationError(f"Invalid price: {price!r}")
    try:
        amount = Decimal(str(price))
    except (InvalidOperation, ValueError) as exc:
        raise ValidationError(f"Invalid price: {price!r}") from exc
    if amount.is_finite() and amount < 0:
        raise ValidationError("Price cannot be negative")
    return Money(amount)


def _require_stock(value: int, label: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(
            f"{label} must be an integer, got {type(value).__name__}"
        )
    if value < 0:
        raise ValidationError(f"{label} cannot be negative")
