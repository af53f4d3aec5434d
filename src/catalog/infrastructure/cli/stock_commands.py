"""CLI commands for product stock."""

from __future__ import annotations

import click

from catalog.application.adjust_stock import AdjustStockHandler
from catalog.application.set_stock import SetStockHandler
from catalog.infrastructure.bootstrap import product_repository
from catalog.infrastructure.cli.output import json_option, run


@click.command("adjust")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--delta", required=True, type=int, help="Change in stock (negative to withdraw).")
@json_option
def stock_adjust(product_id: str, delta: int, as_json: bool) -> None:
    """Restock or withdraw stock by a relative amount."""
    handler = AdjustStockHandler(product_repo=product_repository())

    new_stock = run(lambda: handler.handle(product_id, delta), as_json)
    if as_json:
        return
    click.echo(f"Stock of product {product_id} is now {new_stock}.")


@click.command("set")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--quantity", required=True, type=int, help="Total quantity in stock.")
@json_option
def stock_set(product_id: str, quantity: int, as_json: bool) -> None:
    """Set the stock level of a product."""
    handler = SetStockHandler(product_repo=product_repository())

    run(lambda: handler.handle(product_id, quantity), as_json)
    if as_json:
        return
    click.echo(f"Stock of product {product_id} set to {quantity}.")
