"""Application service: List Products query (reads the snapshot)."""

from __future__ import annotations

from agripos.application.dto import ProductDTO, product_to_dto
from agripos.domain.service.catalog_snapshot import CatalogSnapshot


class ListProductsHandler:

    def __init__(self, catalog: CatalogSnapshot) -> None:
        self._catalog = catalog

    def handle(self, category: str | None = None, query: str = "") -> list[ProductDTO]:
        """Products in *category* whose name or description contains *query*."""
        needle = query.strip().lower()
        result = []
        for product in self._catalog.products:
            if category and product.category != category:
                continue
            if needle and needle not in f"{product.name} {product.description}".lower():
                continue
            result.append(product_to_dto(product))
        return result
