import logging
import time

import click

from catalog.infrastructure.cli.product_commands import (
    product_activate,
    product_categorize,
    product_create,
    product_deactivate,
    product_discontinue,
    product_list,
    product_set_sku,
    product_show,
    product_update,
)
from catalog.infrastructure.cli.review_commands import review_add
from catalog.infrastructure.cli.stock_commands import stock_adjust, stock_set
from catalog.infrastructure.logging_config import setup_logging

logger = logging.getLogger(__name__)

_COMMAND_PATH = "catalog.command_path"
_STARTED_AT = "catalog.started_at"


class CatalogGroup(click.Group):
    """Group that logs the start and completion of every leaf command.

    Sub-groups created with ``@group()`` share this class, and the
    resolved command names are collected in ``ctx.meta``, which every
    context in the chain shares. Only the root group reports completion.
    """

    group_class = type

    def resolve_command(self, ctx, args):
        cmd_name, cmd, rest = super().resolve_command(ctx, args)
        if cmd is not None:
            path = ctx.meta.setdefault(_COMMAND_PATH, [])
            path.append(cmd.name)
            if not isinstance(cmd, click.Group):
                ctx.meta[_STARTED_AT] = time.perf_counter()
                logger.info("Starting command %s", " ".join(path))
        return cmd_name, cmd, rest

    def invoke(self, ctx):
        if ctx.parent is not None:
            return super().invoke(ctx)

        exit_code = 0
        try:
            return super().invoke(ctx)
        except click.exceptions.Exit as exc:
            exit_code = exc.exit_code
            raise
        except click.ClickException as exc:
            exit_code = exc.exit_code
            raise
        except Exception:
            exit_code = 1
            raise
        finally:
            _log_completion(ctx, exit_code)


def _log_completion(ctx: click.Context, exit_code: int) -> None:
    started = ctx.meta.get(_STARTED_AT)
    if started is None:
        return
    elapsed_ms = (time.perf_counter() - started) * 1000
    logger.info(
        "Completed command %s - exit %d - %.1fms",
        " ".join(ctx.meta[_COMMAND_PATH]),
        exit_code,
        elapsed_ms,
    )


@click.group(cls=CatalogGroup)
@click.option("--log-level", default=None, help="Override LOG_LEVEL (e.g. DEBUG).")
def cli(log_level: str | None) -> None:
    """Catalog: product catalog service"""
    setup_logging(log_level)


@cli.group()
def product() -> None:
    """Manage products."""


@cli.group()
def stock() -> None:
    """Manage product stock."""


@cli.group()
def review() -> None:
    """Manage product reviews."""


# Register subcommands
product.add_command(product_activate)
product.add_command(product_categorize)
product.add_command(product_create)
product.add_command(product_deactivate)
product.add_command(product_discontinue)
product.add_command(product_list)
product.add_command(product_set_sku)
product.add_command(product_show)
product.add_command(product_update)
stock.add_command(stock_adjust)
stock.add_command(stock_set)
review.add_command(review_add)
