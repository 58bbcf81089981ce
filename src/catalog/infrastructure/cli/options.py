"""Option groups and parsing shared by several commands."""

from __future__ import annotations

from typing import Callable

import click

from catalog.application.dto import ProductInput, ProductView, RequestView
from catalog.domain.exceptions import DomainException, InfrastructureError
from catalog.domain.model.organization import CallerIdentity

# Errors a command reports as a failed command rather than a crash.
HANDLED_ERRORS = (DomainException, InfrastructureError)


def identity_options(command: Callable) -> Callable:
    """Add --user-id/--username/--admin, standing in for a verified token."""
    command = click.option("--admin", is_flag=True, default=False, help="Caller is an admin.")(command)
    command = click.option("--username", required=True, help="Caller's username.")(command)
    command = click.option("--user-id", required=True, type=int, help="Caller's user ID.")(command)
    return command


def product_field_options(command: Callable) -> Callable:
    """Add the owner-controlled product fields."""
    options = [
        click.option("--name", required=True, help="Product name."),
        click.option("--description", default=None, help="Product description."),
        click.option("--organization", "organization_id", required=True, type=int,
                     help="Owning organization ID."),
        click.option("--price", required=True, help="Price (e.g. 15.00)."),
        click.option("--quantity", required=True, type=click.IntRange(min=0),
                     help="Quantity in stock."),
        click.option("--tag", "tags", multiple=True, help="Tag (repeatable)."),
        click.option("--spec", "specs", multiple=True, help="Spec as 'name=value' (repeatable)."),
    ]
    for option in reversed(options):
        command = option(command)
    return command


def caller_from(user_id: int, username: str, admin: bool) -> CallerIdentity:
    return CallerIdentity(id=user_id, username=username, is_admin=admin)


def product_input_from(
    name: str,
    description: str | None,
    organization_id: int,
    price: str,
    quantity: int,
    tags: tuple[str, ...],
    specs: tuple[str, ...],
) -> ProductInput:
    return ProductInput(
        name=name,
        description=description,
        organization_id=organization_id,
        price=price,
        quantity_in_stock=quantity,
        tags=tags,
        specs=_parse_specs(specs),
    )


def _parse_specs(raw: tuple[str, ...]) -> dict[str, str]:
    """Parse ('color=red', 'size=L') into {'color': 'red', 'size': 'L'}."""
    specs: dict[str, str] = {}
    for pair in raw:
        if "=" not in pair:
            raise click.BadParameter(
                f"Invalid spec format '{pair}'. Expected 'name=value'.",
                param_hint="--spec",
            )
        key, value = pair.split("=", 1)
        if key.strip() in specs:
            raise click.BadParameter(f"Duplicate spec '{key.strip()}'.", param_hint="--spec")
        specs[key.strip()] = value.strip()
    return specs


def display_product(view: ProductView | RequestView) -> None:
    """Shared formatting for a product or a creation request."""
    click.echo(f"  Name:         {view.name}")
    if view.description:
        click.echo(f"  Description:  {view.description}")
    click.echo(f"  Organization: {view.organization_id}")
    click.echo(f"  Price:        ${view.price:.2f}")
    if isinstance(view, ProductView) and view.effective_price is not None:
        click.echo(f"  Now:          ${view.effective_price:.2f} (x{view.price_modifier})")
    click.echo(f"  In stock:     {view.quantity_in_stock}")
    if view.tags:
        click.echo(f"  Tags:         {', '.join(view.tags)}")
    for key, value in sorted(view.specs.items()):
        click.echo(f"  {key + ':':<13} {value}")
