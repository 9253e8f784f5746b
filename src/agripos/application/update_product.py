"""Application service: Update Product use case."""

from __future__ import annotations

from agripos.application.add_product import clean_product_form
from agripos.application.dto import ProductDTO, ProductForm, product_to_dto
from agripos.domain.exceptions import ProductNotFound
from agripos.domain.model.identity import utc_now
from agripos.domain.repository.product_repository import ProductRepository
from agripos.domain.service.catalog_snapshot import CatalogSnapshot


class UpdateProductHandler:

    def __init__(self, product_repo: ProductRepository, catalog: CatalogSnapshot) -> None:
        self._product_repo = product_repo
        self._catalog = catalog

    def handle(self, product_id: str, form: ProductForm) -> ProductDTO:
        """Overwrite a product's editable fields.

        This does NOT affect carts or existing orders; they captured a
        price snapshot when the line was added.
        """
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise ProductNotFound(product_id)

        name, price, stock, images = clean_product_form(form, self._catalog.meta)
        product.name = name
        product.category = form.category
        product.price = price
        product.stock = stock
        product.images = images
        product.description = form.description
        product.updated_at = utc_now()

        self._product_repo.replace(product)
        return product_to_dto(product)
