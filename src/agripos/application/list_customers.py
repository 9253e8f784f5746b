"""Application service: customer queries over the snapshot."""

from __future__ import annotations

from agripos.application.dto import CustomerDTO, customer_to_dto
from agripos.domain.service.catalog_snapshot import CatalogSnapshot


class ListCustomersHandler:

    def __init__(self, catalog: CatalogSnapshot) -> None:
        self._catalog = catalog

    def handle(self, query: str = "") -> list[CustomerDTO]:
        """Customers whose name, phone, commune or village contains *query*."""
        needle = query.strip().lower()
        result = []
        for c in self._catalog.customers:
            haystack = f"{c.name} {c.phone} {c.commune} {c.village}".lower()
            if needle and needle not in haystack:
                continue
            result.append(customer_to_dto(c))
        return result


class LookupCustomerHandler:
    """Find the customer behind a phone number typed at the counter."""

    def __init__(self, catalog: CatalogSnapshot) -> None:
        self._catalog = catalog

    def handle(self, phone: str) -> CustomerDTO | None:
        phone = phone.strip()
        if not phone:
            return None
        customer = self._catalog.find_customer_by_phone(phone)
        return customer_to_dto(customer) if customer else None
