"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from agripos.application.add_product import AddProductHandler
from agripos.application.delete_product import DeleteProductHandler
from agripos.application.dto import ProductForm
from agripos.application.list_products import ListProductsHandler
from agripos.application.low_stock import LowStockHandler
from agripos.application.update_product import UpdateProductHandler
from agripos.config import get_settings
from agripos.domain.exceptions import DomainException, ProductNotFound
from agripos.infrastructure.bootstrap import catalog_snapshot, product_repository


def _print_products(products) -> None:
    click.echo(f"{'ID':<26} {'Name':<28} {'Category':<16} {'Stock':>6} {'Price':>14}")
    click.echo("-" * 94)
    for p in products:
        click.echo(f"{p.id:<26} {p.name:<28} {p.category:<16} {p.stock:>6} {p.price:>14}")


@click.command("list")
@click.option("--category", default=None, help="Only this category.")
@click.option("--query", default="", help="Text to search in name and description.")
def product_list(category: str | None, query: str) -> None:
    """List products in the catalog."""
    try:
        products = ListProductsHandler(catalog_snapshot()).handle(category=category, query=query)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not products:
        click.echo("No products found.")
        return
    _print_products(products)


@click.command("low-stock")
def product_low_stock() -> None:
    """List products that are nearly sold out."""
    settings = get_settings()
    try:
        handler = LowStockHandler(
            catalog_snapshot(),
            threshold=settings.low_stock_threshold,
            limit=settings.low_stock_limit,
        )
        products = handler.handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not products:
        click.echo("No products running low.")
        return
    _print_products(products)


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--category", required=True, help="Category from the shop's list.")
@click.option("--price", required=True, help="Price in đồng (e.g. 120000).")
@click.option("--stock", default=0, type=int, help="Units in stock.")
@click.option("--image", "images", multiple=True, help="Image URL (repeatable).")
@click.option("--description", default="", help="Free-text description.")
def product_add(name: str, category: str, price: str, stock: int, images: tuple[str, ...], description: str) -> None:
    """Add a new product to the catalog."""
    form = ProductForm(
        name=name, category=category, price=price, stock=stock,
        images=list(images), description=description,
    )
    try:
        handler = AddProductHandler(product_repo=product_repository(), catalog=catalog_snapshot())
        dto = handler.handle(form)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {dto.id} '{dto.name}' added at {dto.price} ({dto.stock} in stock)")


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--name", default=None, help="New name.")
@click.option("--category", default=None, help="New category.")
@click.option("--price", default=None, help="New price in đồng.")
@click.option("--stock", default=None, type=int, help="New stock count.")
@click.option("--image", "images", multiple=True, help="Replace images (repeatable).")
@click.option("--description", default=None, help="New description.")
def product_update(
    product_id: str,
    name: str | None,
    category: str | None,
    price: str | None,
    stock: int | None,
    images: tuple[str, ...],
    description: str | None,
) -> None:
    """Edit a product. Options left out keep their current value."""
    try:
        catalog = catalog_snapshot()
        current = catalog.find_product(product_id)
        if current is None:
            raise ProductNotFound(product_id)
        form = ProductForm(
            name=name if name is not None else current.name,
            category=category if category is not None else current.category,
            price=price if price is not None else current.price.amount,
            stock=stock if stock is not None else current.stock,
            images=list(images) if images else list(current.images),
            description=description if description is not None else current.description,
        )
        dto = UpdateProductHandler(product_repo=product_repository(), catalog=catalog).handle(
            product_id, form
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {dto.id} updated: {dto.name}, {dto.price}, {dto.stock} in stock")


@click.command("delete")
@click.option("--id", "product_id", required=True, help="Product ID.")
def product_delete(product_id: str) -> None:
    """Remove a product from the catalog."""
    try:
        DeleteProductHandler(product_repo=product_repository()).handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {product_id} deleted.")
