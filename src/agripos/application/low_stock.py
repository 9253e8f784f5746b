"""Application service: Low Stock report."""

from __future__ import annotations

from agripos.application.dto import ProductDTO, product_to_dto
from agripos.domain.service.catalog_snapshot import CatalogSnapshot

DEFAULT_THRESHOLD = 5
DEFAULT_LIMIT = 10


class LowStockHandler:

    def __init__(
        self,
        catalog: CatalogSnapshot,
        threshold: int = DEFAULT_THRESHOLD,
        limit: int = DEFAULT_LIMIT,
    ) -> None:
        self._catalog = catalog
        self._threshold = threshold
        self._limit = limit

    def handle(self) -> list[ProductDTO]:
        """Products at or below the threshold, emptiest first."""
        low = [p for p in self._catalog.products if p.stock <= self._threshold]
        low.sort(key=lambda p: p.stock)
        return [product_to_dto(p) for p in low[: self._limit]]
