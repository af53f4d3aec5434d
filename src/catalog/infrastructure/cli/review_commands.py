"""CLI commands for product reviews."""

from __future__ import annotations

import click

from catalog.application.add_review import AddReviewHandler
from catalog.infrastructure.bootstrap import product_repository
from catalog.infrastructure.cli.output import json_option, run


@click.command("add")
@click.option("--product-id", required=True, help="Product ID.")
@click.option("--reviewer", required=True, help="Reviewer name.")
@click.option("--rating", required=True, type=int, help="Rating from 1 to 5.")
@click.option("--comment", default="", help="Review text.")
@json_option
def review_add(
    product_id: str, reviewer: str, rating: int, comment: str, as_json: bool
) -> None:
    """Add a review to a product."""
    handler = AddReviewHandler(product_repo=product_repository())

    dto = run(lambda: handler.handle(product_id, reviewer, rating, comment), as_json)
    if as_json:
        return
    click.echo(f"Review {dto.id} ({dto.rating}/5) added to product {product_id}.")
