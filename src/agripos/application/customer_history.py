"""Application service: Customer purchase history."""

from __future__ import annotations

from agripos.application.dto import OrderDTO, order_to_dto
from agripos.domain.exceptions import CustomerNotFound
from agripos.domain.service.catalog_snapshot import CatalogSnapshot


class CustomerHistoryHandler:

    def __init__(self, catalog: CatalogSnapshot) -> None:
        self._catalog = catalog

    def handle(self, customer_id: str) -> list[OrderDTO]:
        """Orders placed by the customer, newest first.

        An order counts if it references the customer or if its snapshot
        carries the customer's phone (orders from before a re-registration).
        """
        customer = self._catalog.find_customer(customer_id)
        if customer is None:
            raise CustomerNotFound(customer_id)

        return [
            order_to_dto(o)
            for o in self._catalog.orders
            if o.customer_id == customer.id or o.customer_snapshot.phone == customer.phone
        ]
