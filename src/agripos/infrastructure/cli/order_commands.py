"""CLI commands for browsing orders."""

from __future__ import annotations

import click

from agripos.application.dto import OrderDTO
from agripos.application.list_orders import ListOrdersHandler
from agripos.application.show_order import ShowOrderHandler
from agripos.domain.exceptions import DomainException
from agripos.infrastructure.bootstrap import catalog_snapshot, order_repository


def display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order {dto.id}")
    click.echo(f"Customer: {dto.customer_name} ({dto.phone})")
    click.echo(f"Address:  {dto.address}")
    click.echo(f"Created:  {dto.created_at}")
    if dto.note:
        click.echo(f"Note:     {dto.note}")
    click.echo()
    click.echo(f"  {'Product':<28} {'Qty':>5} {'Price':>14} {'Total':>14}")
    click.echo(f"  {'-'*64}")
    for item in dto.items:
        click.echo(
            f"  {item.product_name:<28} {item.quantity:>5} {item.unit_price:>14} {item.line_total:>14}"
        )
    click.echo(f"  {'-'*64}")
    click.echo(f"  {'Order Total':<34} {dto.total:>29}")


@click.command("list")
@click.option("--query", default="", help="Search customer name or phone.")
def order_list(query: str) -> None:
    """List orders, newest first."""
    try:
        orders = ListOrdersHandler(catalog_snapshot()).handle(query)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not orders:
        click.echo("No matching orders.")
        return
    for o in orders:
        items = " • ".join(f"{i.product_name} x{i.quantity}" for i in o.items)
        click.echo(f"{o.created_at:<22} {o.customer_name:<22} {o.phone:<12} {o.total:>14}  {items}")


@click.command("show")
@click.option("--id", "order_id", required=True, help="Order ID to display.")
def order_show(order_id: str) -> None:
    """Show details of an existing order."""
    try:
        dto = ShowOrderHandler(order_repo=order_repository()).handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    display_order(dto)
