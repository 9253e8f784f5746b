"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from agripos.application.session import PosSession
from agripos.config import get_settings
from agripos.domain.service.catalog_snapshot import CatalogSnapshot
from agripos.infrastructure.persistence.http_record_store import HttpRecordStore
from agripos.infrastructure.persistence.json_file_record_store import JsonFileRecordStore
from agripos.infrastructure.persistence.record_store import RecordStore
from agripos.infrastructure.persistence.store_customer_repository import (
    StoreCustomerRepository,
)
from agripos.infrastructure.persistence.store_meta_repository import StoreMetaRepository
from agripos.infrastructure.persistence.store_order_repository import StoreOrderRepository
from agripos.infrastructure.persistence.store_product_repository import (
    StoreProductRepository,
)

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def record_store() -> RecordStore:
    settings = get_settings()
    if settings.store_file is not None:
        logger.debug("Using JSON file store at %s", settings.store_file)
        return JsonFileRecordStore(settings.store_file)
    logger.debug("Using HTTP store at %s", settings.store_url)
    return HttpRecordStore(settings.store_url, timeout=settings.store_timeout)


def product_repository() -> StoreProductRepository:
    return StoreProductRepository(record_store())


def customer_repository() -> StoreCustomerRepository:
    return StoreCustomerRepository(record_store())


def order_repository() -> StoreOrderRepository:
    return StoreOrderRepository(record_store())


def meta_repository() -> StoreMetaRepository:
    return StoreMetaRepository(record_store())


def catalog_snapshot(load: bool = True) -> CatalogSnapshot:
    catalog = CatalogSnapshot(
        product_repo=product_repository(),
        customer_repo=customer_repository(),
        order_repo=order_repository(),
        meta_repo=meta_repository(),
    )
    if load:
        catalog.reload()
    return catalog


def pos_session() -> PosSession:
    return PosSession(catalog_snapshot())


def reset() -> None:
    """Forget cached settings and store (tests switch stores between runs)."""
    get_settings.cache_clear()
    record_store.cache_clear()
