"""Shared output helpers for CLI commands."""

from __future__ import annotations

import json
import logging
from decimal import Decimal, InvalidOperation
from typing import Any, Callable

import click

from catalog.application.result import Result
from catalog.domain.exceptions import DomainException

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "An internal error occurred"


def run(fn: Callable[[], Any], as_json: bool) -> Any:
    """Invoke a handler call, translating errors for the terminal.

    Domain errors become a failure envelope (with *as_json*) or a
    ClickException. Any other exception is logged with its traceback and
    reported as a generic internal error. A failure exits with status 1.
    """
    try:
        data = fn()
    except DomainException as exc:
        if as_json:
            _fail(Result.from_exception(exc))
        raise click.ClickException(str(exc))
    except Exception:
        logger.exception("An unhandled exception occurred")
        if as_json:
            _fail(Result.failure(INTERNAL_ERROR_MESSAGE))
        raise click.ClickException(INTERNAL_ERROR_MESSAGE)

    if as_json:
        _echo(Result.success(data))
    return data


def _echo(result: Result) -> None:
    click.echo(json.dumps(result.to_dict(), indent=2, default=str))


def _fail(result: Result) -> None:
    _echo(result)
    click.get_current_context().exit(1)


def parse_decimal(
    ctx: click.Context, param: click.Parameter, value: str | None
) -> Decimal | None:
    """click callback: parse an optional decimal option."""
    if value is None:
        return None
    try:
        amount = Decimal(value)
    except InvalidOperation:
        raise click.BadParameter(f"'{value}' is not a valid amount.")
    if not amount.is_finite():
        raise click.BadParameter(f"'{value}' is not a valid amount.")
    return amount


json_option = click.option(
    "--json", "as_json", is_flag=True, default=False, help="Print a JSON result envelope."
)
