"""RecordStore-backed implementation of CustomerRepository."""

from __future__ import annotations

from agripos.domain.model.customer import Customer
from agripos.domain.repository.customer_repository import CustomerRepository
from agripos.infrastructure.persistence.record_store import (
    CUSTOMERS,
    RecordStore,
    decode_record,
    format_timestamp,
    parse_timestamp,
)

_FIELDS = {"id", "name", "phone", "commune", "village", "addressDetail", "createdAt"}


class StoreCustomerRepository(CustomerRepository):

    def __init__(self, store: RecordStore) -> None:
        self._store = store

    # --- CustomerRepository interface -----------------------------------------

    def get_by_id(self, customer_id: str) -> Customer | None:
        raw = self._store.get(CUSTOMERS, customer_id)
        return decode_record(CUSTOMERS, raw, self._to_domain) if raw is not None else None

    def list_all(self) -> list[Customer]:
        return [
            decode_record(CUSTOMERS, raw, self._to_domain)
            for raw in self._store.list(CUSTOMERS, sort="createdAt", descending=True)
        ]

    def create(self, customer: Customer) -> None:
        self._store.create(CUSTOMERS, self._to_raw(customer))

    def replace(self, customer: Customer) -> None:
        self._store.replace(CUSTOMERS, customer.id, self._to_raw(customer))

    def delete(self, customer_id: str) -> None:
        self._store.delete(CUSTOMERS, customer_id)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(customer: Customer) -> dict:
        return {
            **customer.extra,
            "id": customer.id,
            "name": customer.name,
            "phone": customer.phone,
            "commune": customer.commune,
            "village": customer.village,
            "addressDetail": customer.address_detail,
            "createdAt": format_timestamp(customer.created_at),
        }

    @staticmethod
    def _to_domain(raw: dict) -> Customer:
        return Customer(
            id=raw["id"],
            name=raw.get("name") or "",
            phone=raw.get("phone") or "",
            commune=raw.get("commune") or "",
            village=raw.get("village") or "",
            address_detail=raw.get("addressDetail") or "",
            created_at=parse_timestamp(raw.get("createdAt")),
            extra={k: v for k, v in raw.items() if k not in _FIELDS},
        )
