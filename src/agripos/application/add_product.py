"""Application service: Add Product use case."""

from __future__ import annotations

from agripos.application.dto import ProductDTO, ProductForm, product_to_dto
from agripos.domain.exceptions import MissingRequiredField, ValidationError
from agripos.domain.model.identity import PRODUCT_PREFIX, new_id, utc_now
from agripos.domain.model.product import Product
from agripos.domain.model.shop_meta import ShopMeta
from agripos.domain.model.value_objects import Money
from agripos.domain.repository.product_repository import ProductRepository
from agripos.domain.service.catalog_snapshot import CatalogSnapshot


def clean_product_form(form: ProductForm, meta: ShopMeta) -> tuple[str, Money, int, list[str]]:
    """Validate form input shared by add and update.

    Returns the trimmed name, the price, the stock and the image list.
    """
    name = (form.name or "").strip()
    if not name:
        raise MissingRequiredField("name")
    meta.check_category(form.category)
    price = Money.of(form.price)
    if form.stock < 0:
        raise ValidationError(f"Stock for {name} cannot be negative, got {form.stock}")
    images = [url.strip() for url in form.images if url and url.strip()]
    return name, price, form.stock, images


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository, catalog: CatalogSnapshot) -> None:
        self._product_repo = product_repo
        self._catalog = catalog

    def handle(self, form: ProductForm) -> ProductDTO:
        """Add a new product to the catalog."""
        name, price, stock, images = clean_product_form(form, self._catalog.meta)
        now = utc_now()
        product = Product(
            id=new_id(PRODUCT_PREFIX),
            name=name,
            category=form.category,
            price=price,
            stock=stock,
            images=images,
            description=form.description,
            created_at=now,
            updated_at=now,
        )
        self._product_repo.create(product)
        return product_to_dto(product)
