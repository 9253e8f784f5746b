"""Application service: List Orders query (reads the snapshot)."""

from __future__ import annotations

from agripos.application.dto import OrderDTO, order_to_dto
from agripos.domain.service.catalog_snapshot import CatalogSnapshot


class ListOrdersHandler:

    def __init__(self, catalog: CatalogSnapshot) -> None:
        self._catalog = catalog

    def handle(self, query: str = "") -> list[OrderDTO]:
        """Orders whose customer snapshot name or phone contains *query*."""
        return [order_to_dto(o) for o in self._catalog.orders if o.matches(query)]
