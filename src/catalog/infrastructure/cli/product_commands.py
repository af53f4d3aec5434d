"""CLI commands for the Product aggregate."""

from __future__ import annotations

from decimal import Decimal

import click

from catalog.application.change_status import ChangeStatusHandler
from catalog.application.create_product import CreateProductHandler
from catalog.application.dto import ProductDTO
from catalog.application.list_products import ListProductsHandler, ListProductsQuery
from catalog.application.show_product import ShowProductHandler
from catalog.application.update_product import (
    UpdateCategoryHandler,
    UpdateProductHandler,
    UpdateSkuHandler,
)
from catalog.domain.model.product import ProductStatus
from catalog.infrastructure.bootstrap import (
    default_page_size,
    low_stock_threshold,
    product_repository,
)
from catalog.infrastructure.cli.output import json_option, parse_decimal, run

_STATUS_CHOICE = click.Choice([s.value for s in ProductStatus], case_sensitive=False)


@click.command("list")
@click.option("--page", "page_number", default=1, show_default=True, type=int, help="Page number (1-based).")
@click.option("--page-size", default=None, type=int, help="Items per page.")
@click.option("--status", default=None, type=_STATUS_CHOICE, help="Only products with this status.")
@click.option("--search", "search_term", default=None, help="Match name, description or SKU.")
@click.option("--category", default=None, help="Only products in this category.")
@click.option("--min-price", default=None, callback=parse_decimal, help="Lowest price, inclusive.")
@click.option("--max-price", default=None, callback=parse_decimal, help="Highest price, inclusive.")
@json_option
def product_list(
    page_number: int,
    page_size: int | None,
    status: str | None,
    search_term: str | None,
    category: str | None,
    min_price: Decimal | None,
    max_price: Decimal | None,
    as_json: bool,
) -> None:
    """List products with filtering and pagination."""
    query = ListProductsQuery(
        page_number=page_number,
        page_size=page_size if page_size is not None else default_page_size(),
        status=ProductStatus(status) if status else None,
        search_term=search_term,
        category=category,
        min_price=min_price,
        max_price=max_price,
    )
    handler = ListProductsHandler(
        product_repo=product_repository(),
        low_stock_threshold=low_stock_threshold(),
    )

    page = run(lambda: handler.handle(query), as_json)
    if as_json:
        return

    if not page.items:
        click.echo(f"No products found ({page.total_count} matching).")
        return

    click.echo(f"{'ID':<36}  {'Name':<24} {'SKU':<12} {'Price':>10} {'Stock':>6} {'Status':<12}")
    click.echo("-" * 106)
    for item in page.items:
        flag = " (low)" if item.is_low_stock else ""
        click.echo(
            f"{item.id:<36}  {item.name:<24} {item.sku or '-':<12} "
            f"{'$' + format(item.price, '.2f'):>10} {item.stock:>6} {item.status:<12}{flag}"
        )
    click.echo("-" * 106)
    click.echo(
        f"Page {page.page_number} of {page.total_pages} "
        f"({page.total_count} matching products)"
    )


def _display_product(dto: ProductDTO) -> None:
    """Shared formatting for displaying a single product."""
    click.echo(f"Product {dto.id}  (status={dto.status})")
    click.echo(f"Name:        {dto.name}")
    click.echo(f"Description: {dto.description}")
    click.echo(f"SKU:         {dto.sku or '-'}")
    click.echo(f"Category:    {dto.category or '-'}")
    click.echo(f"Price:       ${dto.price:.2f}")
    low = "  (low stock)" if dto.is_low_stock else ""
    click.echo(f"Stock:       {dto.stock}{low}")
    click.echo(f"Created:     {dto.created_at.strftime('%Y-%m-%d %H:%M UTC')}")
    if dto.last_restocked_at is not None:
        click.echo(f"Restocked:   {dto.last_restocked_at.strftime('%Y-%m-%d %H:%M UTC')}")

    if not dto.reviews:
        return

    click.echo()
    click.echo(f"Reviews (average {dto.average_rating}):")
    for r in dto.reviews:
        click.echo(f"  [{r.rating}/5] {r.reviewer_name}: {r.comment}")


@click.command("show")
@click.option("--id", "product_id", required=True, help="Product ID to display.")
@json_option
def product_show(product_id: str, as_json: bool) -> None:
    """Show details of a product, including its reviews."""
    handler = ShowProductHandler(
        product_repo=product_repository(),
        low_stock_threshold=low_stock_threshold(),
    )

    dto = run(lambda: handler.handle(product_id), as_json)
    if as_json:
        return
    _display_product(dto)


@click.command("create")
@click.option("--name", required=True, help="Product name.")
@click.option("--description", default="", help="Product description.")
@click.option("--price", required=True, help="Price (e.g. 15.00).")
@click.option("--stock", default=0, show_default=True, type=int, help="Initial stock.")
@click.option("--sku", default=None, help="Stock keeping unit.")
@click.option("--category", default=None, help="Category name.")
@json_option
def product_create(
    name: str,
    description: str,
    price: str,
    stock: int,
    sku: str | None,
    category: str | None,
    as_json: bool,
) -> None:
    """Add a new product to the catalog."""
    handler = CreateProductHandler(
        product_repo=product_repository(),
        low_stock_threshold=low_stock_threshold(),
    )

    dto = run(
        lambda: handler.handle(
            name=name,
            description=description,
            price=price,
            stock=stock,
            sku=sku,
            category=category,
        ),
        as_json,
    )
    if as_json:
        return
    click.echo(f"Product {dto.id} '{dto.name}' created at ${dto.price:.2f}")


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--name", required=True, help="New name.")
@click.option("--description", default="", help="New description.")
@click.option("--price", required=True, help="New price (e.g. 29.99).")
@json_option
def product_update(
    product_id: str, name: str, description: str, price: str, as_json: bool
) -> None:
    """Update a product's name, description and price."""
    handler = UpdateProductHandler(product_repo=product_repository())

    run(lambda: handler.handle(product_id, name, description, price), as_json)
    if as_json:
        return
    click.echo(f"Product {product_id} updated.")


@click.command("categorize")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--category", default=None, help="Category name; omit to clear.")
@json_option
def product_categorize(product_id: str, category: str | None, as_json: bool) -> None:
    """Set or clear a product's category."""
    handler = UpdateCategoryHandler(product_repo=product_repository())

    run(lambda: handler.handle(product_id, category), as_json)
    if as_json:
        return
    click.echo(f"Product {product_id} category set to {category or '-'}.")


@click.command("set-sku")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--sku", default=None, help="New SKU; omit to clear.")
@json_option
def product_set_sku(product_id: str, sku: str | None, as_json: bool) -> None:
    """Set or clear a product's SKU."""
    handler = UpdateSkuHandler(product_repo=product_repository())

    run(lambda: handler.handle(product_id, sku), as_json)
    if as_json:
        return
    click.echo(f"Product {product_id} SKU set to {sku or '-'}.")


def _status_command(name: str, target: ProductStatus, help_text: str) -> click.Command:
    @click.command(name, help=help_text)
    @click.option("--id", "product_id", required=True, help="Product ID.")
    @json_option
    def command(product_id: str, as_json: bool) -> None:
        handler = ChangeStatusHandler(product_repo=product_repository())

        run(lambda: handler.handle(product_id, target), as_json)
        if as_json:
            return
        click.echo(f"Product {product_id} is now {target.value}.")

    return command


product_activate = _status_command(
    "activate", ProductStatus.ACTIVE, "Make a product available again."
)
product_deactivate = _status_command(
    "deactivate", ProductStatus.INACTIVE, "Temporarily withdraw a product."
)
product_discontinue = _status_command(
    "discontinue", ProductStatus.DISCONTINUED, "Permanently retire a product."
)
