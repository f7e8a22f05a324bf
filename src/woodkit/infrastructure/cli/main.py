import click

from woodkit.infrastructure.cli.order_commands import (
    order_cancel,
    order_confirm,
    order_create,
    order_list,
    order_ship,
    order_show,
)
from woodkit.infrastructure.cli.price_commands import price_quote
from woodkit.infrastructure.cli.product_commands import (
    product_add,
    product_list,
    product_preview,
    product_reprice,
    product_show,
)
from woodkit.infrastructure.config import get_settings
from woodkit.infrastructure.logging_config import setup_logging


@click.group()
def cli() -> None:
    """woodkit: configurable furniture kits, pricing and orders"""
    setup_logging(get_settings().log_level)


@cli.group()
def order() -> None:
    """Manage orders."""


@cli.group()
def product() -> None:
    """Manage the product catalog."""


@cli.group()
def price() -> None:
    """Price configured products."""


# Register subcommands
order.add_command(order_cancel)
order.add_command(order_confirm)
order.add_command(order_create)
order.add_command(order_list)
order.add_command(order_ship)
order.add_command(order_show)
product.add_command(product_add)
product.add_command(product_list)
product.add_command(product_preview)
product.add_command(product_reprice)
product.add_command(product_show)
price.add_command(price_quote)
