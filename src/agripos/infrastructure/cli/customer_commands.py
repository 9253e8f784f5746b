"""CLI commands for the Customer aggregate."""

from __future__ import annotations

import click

from agripos.application.add_customer import AddCustomerHandler
from agripos.application.customer_areas import CustomerAreasHandler
from agripos.application.customer_history import CustomerHistoryHandler
from agripos.application.delete_customer import DeleteCustomerHandler
from agripos.application.dto import ContactForm
from agripos.application.list_customers import ListCustomersHandler, LookupCustomerHandler
from agripos.application.update_customer import UpdateCustomerHandler
from agripos.domain.exceptions import CustomerNotFound, DomainException
from agripos.infrastructure.bootstrap import catalog_snapshot, customer_repository


@click.command("list")
@click.option("--query", default="", help="Search name, phone, commune or village.")
def customer_list(query: str) -> None:
    """List customers."""
    try:
        customers = ListCustomersHandler(catalog_snapshot()).handle(query)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not customers:
        click.echo("No customers found.")
        return

    click.echo(f"{'ID':<26} {'Name':<24} {'Phone':<14} Address")
    click.echo("-" * 90)
    for c in customers:
        click.echo(
            f"{c.id:<26} {c.name:<24} {c.phone:<14} "
            f"{c.commune} • {c.village} • {c.address_detail}"
        )


@click.command("lookup")
@click.option("--phone", required=True, help="Phone number, exact match.")
def customer_lookup(phone: str) -> None:
    """Find the customer using a phone number."""
    try:
        dto = LookupCustomerHandler(catalog_snapshot()).handle(phone)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if dto is None:
        click.echo(f"No customer with phone {phone.strip()}; checkout will register a new one.")
        return
    click.echo(f"{dto.name} ({dto.phone}) [{dto.id}]")
    click.echo(f"{dto.commune} • {dto.village} • {dto.address_detail}")


@click.command("add")
@click.option("--name", required=True, help="Customer name.")
@click.option("--phone", required=True, help="Phone number (must be unused).")
@click.option("--commune", default="", help="Commune.")
@click.option("--village", default="", help="Village.")
@click.option("--address", "address_detail", default="", help="Address detail.")
def customer_add(name: str, phone: str, commune: str, village: str, address_detail: str) -> None:
    """Register a new customer."""
    form = ContactForm(
        phone=phone, name=name, commune=commune, village=village, address_detail=address_detail
    )
    try:
        handler = AddCustomerHandler(customer_repo=customer_repository(), catalog=catalog_snapshot())
        dto = handler.handle(form)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Customer {dto.id} '{dto.name}' ({dto.phone}) added.")


@click.command("update")
@click.option("--id", "customer_id", required=True, help="Customer ID.")
@click.option("--name", default=None, help="New name.")
@click.option("--phone", default=None, help="New phone number.")
@click.option("--commune", default=None, help="New commune.")
@click.option("--village", default=None, help="New village.")
@click.option("--address", "address_detail", default=None, help="New address detail.")
def customer_update(
    customer_id: str,
    name: str | None,
    phone: str | None,
    commune: str | None,
    village: str | None,
    address_detail: str | None,
) -> None:
    """Edit a customer. Options left out keep their current value."""
    try:
        catalog = catalog_snapshot()
        current = catalog.find_customer(customer_id)
        if current is None:
            raise CustomerNotFound(customer_id)
        form = ContactForm(
            phone=phone if phone is not None else current.phone,
            name=name if name is not None else current.name,
            commune=commune if commune is not None else current.commune,
            village=village if village is not None else current.village,
            address_detail=address_detail if address_detail is not None else current.address_detail,
        )
        dto = UpdateCustomerHandler(customer_repo=customer_repository(), catalog=catalog).handle(
            customer_id, form
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Customer {dto.id} updated: {dto.name} ({dto.phone})")


@click.command("delete")
@click.option("--id", "customer_id", required=True, help="Customer ID.")
def customer_delete(customer_id: str) -> None:
    """Delete a customer. Their orders stay in the history."""
    try:
        DeleteCustomerHandler(customer_repo=customer_repository()).handle(customer_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Customer {customer_id} deleted; past orders kept.")


@click.command("history")
@click.option("--id", "customer_id", required=True, help="Customer ID.")
def customer_history(customer_id: str) -> None:
    """Show a customer's purchases."""
    try:
        orders = CustomerHistoryHandler(catalog_snapshot()).handle(customer_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not orders:
        click.echo("No purchases yet.")
        return
    for o in orders:
        items = " • ".join(f"{i.product_name} x{i.quantity}" for i in o.items)
        click.echo(f"{o.id:<26} {o.created_at:<22} {o.total:>14}  {items}")


@click.command("areas")
def customer_areas() -> None:
    """Count customers per commune and village."""
    try:
        groups = CustomerAreasHandler(catalog_snapshot()).handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not groups:
        click.echo("No customers found.")
        return
    for group in groups:
        click.echo(f"{group.commune} ({group.customer_count} customers)")
        for v in group.villages:
            names = ", ".join(f"{c.name} ({c.phone})" for c in v.customers)
            click.echo(f"  {v.village} ({len(v.customers)}): {names}")
