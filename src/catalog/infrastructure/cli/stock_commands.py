"""CLI commands for stock reservation (used by the order workflow)."""

from __future__ import annotations

import click

from catalog.application.reserve_stock import ReserveStockHandler
from catalog.application.return_stock import ReturnStockHandler
from catalog.infrastructure.bootstrap import product_repository
from catalog.infrastructure.cli.options import HANDLED_ERRORS


@click.command("reserve")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--quantity", required=True, type=click.IntRange(min=1), help="Units to reserve.")
def stock_reserve(product_id: int, quantity: int) -> None:
    """Take units out of stock."""
    handler = ReserveStockHandler(product_repo=product_repository())

    try:
        handler.handle(product_id, quantity)
    except HANDLED_ERRORS as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Reserved {quantity} of product #{product_id}.")


@click.command("return")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--quantity", required=True, type=click.IntRange(min=1), help="Units to return.")
def stock_return(product_id: int, quantity: int) -> None:
    """Put units back into stock."""
    handler = ReturnStockHandler(product_repo=product_repository())

    try:
        handler.handle(product_id, quantity)
    except HANDLED_ERRORS as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Returned {quantity} of product #{product_id}.")
