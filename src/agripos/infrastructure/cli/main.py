import logging

import click

from agripos.config import get_settings
from agripos.infrastructure import bootstrap
from agripos.infrastructure.cli.customer_commands import (
    customer_add,
    customer_areas,
    customer_delete,
    customer_history,
    customer_list,
    customer_lookup,
    customer_update,
)
from agripos.infrastructure.cli.order_commands import order_list, order_show
from agripos.infrastructure.cli.pos_commands import pos_checkout
from agripos.infrastructure.cli.product_commands import (
    product_add,
    product_delete,
    product_list,
    product_low_stock,
    product_update,
)


@click.group()
@click.option("--log-level", default=None, help="Logging level (default from AGRIPOS_LOG_LEVEL).")
def cli(log_level: str | None) -> None:
    """AgriPOS: shop counter and catalog for an agricultural-supply store"""
    level = (log_level or get_settings().log_level).upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@cli.command("ping")
def ping() -> None:
    """Check that the record store answers."""
    if bootstrap.record_store().ping():
        click.echo("ONLINE")
    else:
        raise click.ClickException("OFFLINE: the record store did not answer.")


@cli.group()
def product() -> None:
    """Manage products."""


@cli.group()
def customer() -> None:
    """Manage customers."""


@cli.group()
def order() -> None:
    """Browse orders."""


@cli.group()
def pos() -> None:
    """Ring up sales at the counter."""


# Register subcommands
product.add_command(product_add)
product.add_command(product_delete)
product.add_command(product_list)
product.add_command(product_low_stock)
product.add_command(product_update)
customer.add_command(customer_add)
customer.add_command(customer_areas)
customer.add_command(customer_delete)
customer.add_command(customer_history)
customer.add_command(customer_list)
customer.add_command(customer_lookup)
customer.add_command(customer_update)
order.add_command(order_list)
order.add_command(order_show)
pos.add_command(pos_checkout)
