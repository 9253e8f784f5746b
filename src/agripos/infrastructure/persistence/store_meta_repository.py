"""RecordStore-backed implementation of MetaRepository."""

from __future__ import annotations

from agripos.domain.model.shop_meta import DEFAULT_SHOP_NAME, ShopMeta
from agripos.domain.repository.meta_repository import MetaRepository
from agripos.infrastructure.persistence.record_store import META, RecordStore, decode_record


class StoreMetaRepository(MetaRepository):

    def __init__(self, store: RecordStore) -> None:
        self._store = store

    def get(self) -> ShopMeta:
        return decode_record(META, self._store.get_document(META), self._to_domain)

    @staticmethod
    def _to_domain(raw: dict) -> ShopMeta:
        return ShopMeta(
            shop_name=raw.get("shopName") or DEFAULT_SHOP_NAME,
            categories=tuple(raw.get("categories") or ()),
        )
