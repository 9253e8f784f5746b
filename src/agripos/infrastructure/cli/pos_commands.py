"""CLI commands for the point of sale."""

from __future__ import annotations

import click

from agripos.application.checkout import CheckoutFailed, CheckoutHandler
from agripos.application.dto import ContactForm, ItemSpec
from agripos.domain.exceptions import DomainException
from agripos.infrastructure.bootstrap import (
    customer_repository,
    order_repository,
    pos_session,
    product_repository,
)
from agripos.infrastructure.cli.order_commands import display_order


def _parse_items(raw: str) -> list[ItemSpec]:
    """Parse 'pr1:3,pr2:5' into ItemSpec list."""
    wanted: list[ItemSpec] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'ProductId:Quantity'."
            )
        product_id, qty_str = pair.rsplit(":", 1)
        try:
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid quantity '{qty_str}' for product '{product_id}'."
            )
        wanted.append(ItemSpec(product_id=product_id.strip(), quantity=qty))
    return wanted


@click.command("checkout")
@click.option("--items", required=True, help="Items as 'ProductId:Qty,ProductId:Qty'.")
@click.option("--phone", required=True, help="Customer phone number.")
@click.option("--name", required=True, help="Customer name.")
@click.option("--commune", default="", help="Commune.")
@click.option("--village", default="", help="Village.")
@click.option("--address", "address_detail", default="", help="Address detail.")
@click.option("--note", default="", help="Note stored on the order.")
def pos_checkout(
    items: str,
    phone: str,
    name: str,
    commune: str,
    village: str,
    address_detail: str,
    note: str,
) -> None:
    """Ring up a sale: fill the cart, then check out."""
    wanted = _parse_items(items)

    try:
        session = pos_session()
        for item in wanted:
            session.cart.add(item.product_id, item.quantity)

        handler = CheckoutHandler(
            session=session,
            product_repo=product_repository(),
            customer_repo=customer_repository(),
            order_repo=order_repository(),
        )
        result = handler.handle(
            ContactForm(
                phone=phone,
                name=name,
                commune=commune,
                village=village,
                address_detail=address_detail,
            ),
            note=note,
        )
    except CheckoutFailed as exc:
        raise click.ClickException(f"{exc}\nCheck the records above and correct them by hand.")
    except DomainException as exc:
        raise click.ClickException(str(exc))

    who = "new customer" if result.customer_created else "returning customer"
    click.echo(f"Done! Total: {result.total} ({who} {result.customer_id})")
    click.echo()
    display_order(result.order)
    if not result.catalog_refreshed:
        click.echo("Warning: catalog could not be reloaded; stock shown elsewhere may be stale.")
