"""Application service: Add Review use case."""

from __future__ import annotations

import logging

from catalog.application.dto import ProductReviewDTO, to_review_dto
from catalog.application.validation import validate_review
from catalog.domain.exceptions import NotFoundError
from catalog.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class AddReviewHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self, product_id: str, reviewer_name: str, rating: int, comment: str = ""
    ) -> ProductReviewDTO:
        validate_review(reviewer_name, rating, comment)

        product = self._product_repo.get_with_reviews(product_id)
        if product is None:
            raise NotFoundError(f"Product with ID '{product_id}' not found")

        review = product.add_review(reviewer_name, rating, comment)
        self._product_repo.save(product)

        logger.info("Review %s (%d stars) added to product %s", review.id, rating, product_id)
        return to_review_dto(review)
