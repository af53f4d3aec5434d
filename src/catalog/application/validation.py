"""Request validators for product commands.

These check a whole request at once and report every failing field in
``ValidationError.errors``, so a caller can show all problems together.
The aggregate still enforces its own invariants on every call.
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation

from catalog.domain.exceptions import ValidationError
from catalog.domain.model.product import (
    CATEGORY_MAX_LENGTH,
    COMMENT_MAX_LENGTH,
    DESCRIPTION_MAX_LENGTH,
    MAX_RATING,
    MIN_RATING,
    NAME_MAX_LENGTH,
    REVIEWER_NAME_MAX_LENGTH,
    SKU_MAX_LENGTH,
)


def validate_product_details(name: str, description: str, price: object) -> None:
    errors: list[str] = []
    _check_text(errors, "Name", name, NAME_MAX_LENGTH, required=True)
    _check_text(errors, "Description", description, DESCRIPTION_MAX_LENGTH)
    _check_price(errors, price)
    _raise_if_any(errors)


def validate_create_product(
    name: str,
    description: str,
    price: object,
    stock: int,
    sku: str | None = None,
    category: str | None = None,
) -> None:
    errors: list[str] = []
    _check_text(errors, "Name", name, NAME_MAX_LENGTH, required=True)
    _check_text(errors, "Description", description, DESCRIPTION_MAX_LENGTH)
    _check_price(errors, price)
    if isinstance(stock, bool) or not isinstance(stock, int):
        errors.append("Stock must be an integer")
    elif stock < 0:
        errors.append("Stock cannot be negative")
    _check_text(errors, "SKU", sku, SKU_MAX_LENGTH)
    _check_text(errors, "Category", category, CATEGORY_MAX_LENGTH)
    _raise_if_any(errors)


def validate_sku(sku: str | None) -> None:
    errors: list[str] = []
    _check_text(errors, "SKU", sku, SKU_MAX_LENGTH)
    _raise_if_any(errors)


def validate_category(category: str | None) -> None:
    errors: list[str] = []
    _check_text(errors, "Category", category, CATEGORY_MAX_LENGTH)
    _raise_if_any(errors)


def validate_review(reviewer_name: str, rating: int, comment: str) -> None:
    errors: list[str] = []
    _check_text(
        errors, "Reviewer name", reviewer_name, REVIEWER_NAME_MAX_LENGTH, required=True
    )
    if isinstance(rating, bool) or not isinstance(rating, int):
        errors.append("Rating must be an integer")
    elif not MIN_RATING <= rating <= MAX_RATING:
        errors.append(f"Rating must be between {MIN_RATING} and {MAX_RATING}")
    _check_text(errors, "Comment", comment, COMMENT_MAX_LENGTH)
    _raise_if_any(errors)


# --- Internal helpers ---------------------------------------------------------


def _check_text(
    errors: list[str],
    label: str,
    value: str | None,
    max_length: int,
    required: bool = False,
) -> None:
    if value is None or not value.strip():
        if required:
            errors.append(f"{label} is required")
        return
    if len(value.strip()) > max_length:
        errors.append(f"{label} cannot exceed {max_length} characters")


def _check_price(errors: list[str], price: object) -> None:
    if isinstance(price, bool):
        errors.append("Price must be a number")
        return
    try:
        amount = Decimal(str(price))
    except (InvalidOperation, ValueError):
        errors.append("Price must be a number")
        return
    if not amount.is_finite():
        errors.append("Price must be a number")
    elif amount < 0:
        errors.append("Price cannot be negative")


def _raise_if_any(errors: list[str]) -> None:
    if errors:
        raise ValidationError("; ".join(errors), errors)
