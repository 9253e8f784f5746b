"""RecordStore-backed implementation of OrderRepository."""

from __future__ import annotations

from agripos.domain.model.order import Order, OrderLineItem
from agripos.domain.model.value_objects import ContactDetails, Money, Quantity
from agripos.domain.repository.order_repository import OrderRepository
from agripos.infrastructure.persistence.record_store import (
    ORDERS,
    RecordStore,
    decode_record,
    format_timestamp,
    parse_timestamp,
)


class StoreOrderRepository(OrderRepository):

    def __init__(self, store: RecordStore) -> None:
        self._store = store

    # --- OrderRepository interface --------------------------------------------

    def get_by_id(self, order_id: str) -> Order | None:
        raw = self._store.get(ORDERS, order_id)
        return decode_record(ORDERS, raw, self._to_domain) if raw is not None else None

    def list_all(self) -> list[Order]:
        return [
            decode_record(ORDERS, raw, self._to_domain)
            for raw in self._store.list(ORDERS, sort="createdAt", descending=True)
        ]

    def create(self, order: Order) -> None:
        self._store.create(ORDERS, self._to_raw(order))

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(order: Order) -> dict:
        snapshot = order.customer_snapshot
        return {
            "id": order.id,
            "customerId": order.customer_id,
            "customerSnapshot": {
                "name": snapshot.name,
                "phone": snapshot.phone,
                "commune": snapshot.commune,
                "village": snapshot.village,
                "addressDetail": snapshot.address_detail,
            },
            "items": [
                {
                    "productId": item.product_id,
                    "name": item.product_name,
                    "price": item.unit_price.amount,
                    "qty": item.quantity.value,
                    "lineTotal": item.line_total.amount,
                }
                for item in order.items
            ],
            "total": order.total.amount,
            "createdAt": format_timestamp(order.created_at),
            "note": order.note,
        }

    @staticmethod
    def _to_domain(raw: dict) -> Order:
        snapshot = raw.get("customerSnapshot") or {}
        items = tuple(
            OrderLineItem(
                product_id=i.get("productId") or "",
                product_name=i.get("name") or "",
                quantity=Quantity(int(i["qty"])),
                unit_price=Money.of(i.get("price")),
            )
            for i in raw.get("items") or []
        )
        return Order(
            id=raw["id"],
            customer_id=raw.get("customerId") or "",
            customer_snapshot=ContactDetails(
                name=snapshot.get("name") or "",
                phone=snapshot.get("phone") or "",
                commune=snapshot.get("commune") or "",
                village=snapshot.get("village") or "",
                address_detail=snapshot.get("addressDetail") or "",
            ),
            items=items,
            total=Money.of(raw.get("total")),
            created_at=parse_timestamp(raw.get("createdAt")),
            note=raw.get("note") or "",
        )
