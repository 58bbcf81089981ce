"""CLI commands for product creation requests."""

from __future__ import annotations

import click

from catalog.application.approve_request import ApproveRequestHandler
from catalog.application.reject_request import RejectRequestHandler
from catalog.application.show_request import ShowRequestHandler
from catalog.application.submit_request import SubmitRequestHandler
from catalog.infrastructure.bootstrap import (
    organization_lookup,
    product_repository,
    request_repository,
)
from catalog.infrastructure.cli.options import (
    HANDLED_ERRORS,
    caller_from,
    display_product,
    identity_options,
    product_field_options,
    product_input_from,
)


@click.command("submit")
@product_field_options
@identity_options
def request_submit(user_id: int, username: str, admin: bool, **fields) -> None:
    """Ask for a new product to be added (organization owner only)."""
    handler = SubmitRequestHandler(
        request_repo=request_repository(),
        organizations=organization_lookup(),
    )

    try:
        view = handler.handle(caller_from(user_id, username, admin), product_input_from(**fields))
    except HANDLED_ERRORS as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Request #{view.id} submitted  (status={view.status})")


@click.command("list")
def request_list() -> None:
    """List pending requests."""
    views = ShowRequestHandler(request_repo=request_repository()).list_all()

    if not views:
        click.echo("No pending requests.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Org':>6} {'Price':>10} {'Qty':>7}")
    click.echo("-" * 53)
    for v in views:
        click.echo(
            f"{v.id:<6} {v.name:<20} {v.organization_id:>6} "
            f"{'$' + format(v.price, '.2f'):>10} {v.quantity_in_stock:>7}"
        )


@click.command("show")
@click.option("--id", "request_id", required=True, type=int, help="Request ID.")
def request_show(request_id: int) -> None:
    """Show a pending request."""
    handler = ShowRequestHandler(request_repo=request_repository())

    try:
        view = handler.get(request_id)
    except HANDLED_ERRORS as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Request #{view.id}  (status={view.status})")
    display_product(view)


@click.command("approve")
@click.option("--id", "request_id", required=True, type=int, help="Request ID.")
def request_approve(request_id: int) -> None:
    """Approve a request, creating the product."""
    handler = ApproveRequestHandler(
        request_repo=request_repository(),
        product_repo=product_repository(),
    )

    try:
        view = handler.handle(request_id)
    except HANDLED_ERRORS as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Request #{request_id} approved — product #{view.id} '{view.name}' created.")


@click.command("reject")
@click.option("--id", "request_id", required=True, type=int, help="Request ID.")
def request_reject(request_id: int) -> None:
    """Reject and discard a request."""
    handler = RejectRequestHandler(request_repo=request_repository())

    try:
        handler.handle(request_id)
    except HANDLED_ERRORS as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Request #{request_id} rejected.")
