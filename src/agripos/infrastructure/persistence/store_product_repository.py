"""RecordStore-backed implementation of ProductRepository."""

from __future__ import annotations

from agripos.domain.model.product import Product
from agripos.domain.model.value_objects import Money
from agripos.domain.repository.product_repository import ProductRepository
from agripos.infrastructure.persistence.record_store import (
    PRODUCTS,
    RecordStore,
    decode_record,
    format_timestamp,
    parse_timestamp,
)

_FIELDS = {"id", "name", "category", "price", "stock", "images", "description", "createdAt", "updatedAt"}


class StoreProductRepository(ProductRepository):

    def __init__(self, store: RecordStore) -> None:
        self._store = store

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: str) -> Product | None:
        raw = self._store.get(PRODUCTS, product_id)
        return decode_record(PRODUCTS, raw, self._to_domain) if raw is not None else None

    def list_all(self) -> list[Product]:
        return [
            decode_record(PRODUCTS, raw, self._to_domain)
            for raw in self._store.list(PRODUCTS, sort="updatedAt", descending=True)
        ]

    def create(self, product: Product) -> None:
        self._store.create(PRODUCTS, self._to_raw(product))

    def replace(self, product: Product) -> None:
        self._store.replace(PRODUCTS, product.id, self._to_raw(product))

    def delete(self, product_id: str) -> None:
        self._store.delete(PRODUCTS, product_id)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(product: Product) -> dict:
        return {
            **product.extra,
            "id": product.id,
            "category": product.category,
            "name": product.name,
            "price": product.price.amount,
            "stock": product.stock,
            "description": product.description,
            "images": list(product.images),
            "createdAt": format_timestamp(product.created_at),
            "updatedAt": format_timestamp(product.updated_at),
        }

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        return Product(
            id=raw["id"],
            name=raw.get("name") or "",
            category=raw.get("category") or "",
            price=Money.of(raw.get("price")),
            stock=int(raw.get("stock") or 0),
            images=[url for url in raw.get("images") or [] if url],
            description=raw.get("description") or "",
            created_at=parse_timestamp(raw.get("createdAt")),
            updated_at=parse_timestamp(raw.get("updatedAt")),
            extra={k: v for k, v in raw.items() if k not in _FIELDS},
        )
