import click

from catalog.infrastructure.cli.product_commands import (
    product_delete,
    product_edit,
    product_list,
    product_show,
)
from catalog.infrastructure.cli.request_commands import (
    request_approve,
    request_list,
    request_reject,
    request_show,
    request_submit,
)
from catalog.infrastructure.cli.stock_commands import stock_reserve, stock_return
from catalog.infrastructure.config import get_settings
from catalog.infrastructure.logging_config import configure_logging


@click.group()
def cli() -> None:
    """Catalog — organization-owned product catalog"""
    configure_logging(get_settings().log_level)


@cli.group()
def product() -> None:
    """Browse and manage products."""


@cli.group()
def stock() -> None:
    """Reserve and return stock."""


@cli.group()
def request() -> None:
    """Manage product creation requests."""


# Register subcommands
product.add_command(product_delete)
product.add_command(product_edit)
product.add_command(product_list)
product.add_command(product_show)
stock.add_command(stock_reserve)
stock.add_command(stock_return)
request.add_command(request_approve)
request.add_command(request_list)
request.add_command(request_reject)
request.add_command(request_show)
request.add_command(request_submit)
