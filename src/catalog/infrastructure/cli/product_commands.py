"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from catalog.application.delete_product import DeleteProductHandler
from catalog.application.edit_product import EditProductHandler
from catalog.application.get_product import GetProductHandler
from catalog.application.list_products import ListProductsHandler
from catalog.infrastructure.bootstrap import organization_lookup, product_repository
from catalog.infrastructure.cli.options import (
    HANDLED_ERRORS,
    caller_from,
    display_product,
    identity_options,
    product_field_options,
    product_input_from,
)


@click.command("show")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
def product_show(product_id: int) -> None:
    """Show a product with its current discount."""
    handler = GetProductHandler(
        product_repo=product_repository(),
        organizations=organization_lookup(),
    )

    try:
        view = handler.handle(product_id)
    except HANDLED_ERRORS as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{view.id}")
    display_product(view)


@click.command("list")
def product_list() -> None:
    """List the products of active organizations."""
    handler = ListProductsHandler(
        product_repo=product_repository(),
        organizations=organization_lookup(),
    )

    try:
        views = handler.handle()
    except HANDLED_ERRORS as exc:
        raise click.ClickException(str(exc))

    if not views:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Price':>10} {'Now':>10} {'Stock':>7}")
    click.echo("-" * 57)
    for v in views:
        click.echo(
            f"{v.id:<6} {v.name:<20} {'$' + format(v.price, '.2f'):>10} "
            f"{'$' + format(v.effective_price, '.2f'):>10} {v.quantity_in_stock:>7}"
        )


@click.command("edit")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@product_field_options
@identity_options
def product_edit(product_id: int, user_id: int, username: str, admin: bool, **fields) -> None:
    """Replace a product's fields (owner or admin only)."""
    handler = EditProductHandler(
        product_repo=product_repository(),
        organizations=organization_lookup(),
    )

    try:
        view = handler.handle(
            caller_from(user_id, username, admin), product_id, product_input_from(**fields)
        )
    except HANDLED_ERRORS as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{view.id} updated")
    display_product(view)


@click.command("delete")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@identity_options
def product_delete(product_id: int, user_id: int, username: str, admin: bool) -> None:
    """Delete a product (owner or admin only)."""
    handler = DeleteProductHandler(
        product_repo=product_repository(),
        organizations=organization_lookup(),
    )

    try:
        handler.handle(caller_from(user_id, username, admin), product_id)
    except HANDLED_ERRORS as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} deleted.")
