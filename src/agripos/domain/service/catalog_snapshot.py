"""Domain service: Catalog Snapshot.

An in-memory, read-mostly cache of the store's product, customer and
order collections plus the shop meta.  It is refreshed wholesale by
``reload()`` and is the source of truth for stock levels while the
operator builds a cart.  Checkout does not trust it for stock: it
re-reads products from the store.

One snapshot belongs to one POS session; it is not shared.
"""

from __future__ import annotations

import logging

from agripos.domain.model.customer import Customer
from agripos.domain.model.order import Order
from agripos.domain.model.product import Product
from agripos.domain.model.shop_meta import ShopMeta
from agripos.domain.repository.customer_repository import CustomerRepository
from agripos.domain.repository.meta_repository import MetaRepository
from agripos.domain.repository.order_repository import OrderRepository
from agripos.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class CatalogSnapshot:

    def __init__(
        self,
        product_repo: ProductRepository,
        customer_repo: CustomerRepository,
        order_repo: OrderRepository,
        meta_repo: MetaRepository,
    ) -> None:
        self._product_repo = product_repo
        self._customer_repo = customer_repo
        self._order_repo = order_repo
        self._meta_repo = meta_repo

        self._meta = ShopMeta()
        self._products: list[Product] = []
        self._customers: list[Customer] = []
        self._orders: list[Order] = []
        self._loaded = False

    def reload(self) -> None:
        """Re-fetch every collection from the store.

        All collections are fetched before any is swapped in, so a failed
        reload leaves the previous snapshot intact.
        """
        meta = self._meta_repo.get()
        products = self._product_repo.list_all()
        customers = self._customer_repo.list_all()
        orders = self._order_repo.list_all()

        self._meta = meta
        self._products = products
        self._customers = customers
        self._orders = orders
        self._loaded = True
        logger.debug(
            "Catalog reloaded: %d products, %d customers, %d orders",
            len(products), len(customers), len(orders),
        )

    # --- Accessors ------------------------------------------------------------

    @property
    def loaded(self) -> bool:
        return self._loaded

    @property
    def meta(self) -> ShopMeta:
        return self._meta

    @property
    def products(self) -> tuple[Product, ...]:
        return tuple(self._products)

    @property
    def customers(self) -> tuple[Customer, ...]:
        return tuple(self._customers)

    @property
    def orders(self) -> tuple[Order, ...]:
        return tuple(self._orders)

    def find_product(self, product_id: str) -> Product | None:
        for product in self._products:
            if product.id == product_id:
                return product
        return None

    def find_customer(self, customer_id: str) -> Customer | None:
        for customer in self._customers:
            if customer.id == customer_id:
                return customer
        return None

    def find_customer_by_phone(self, phone: str) -> Customer | None:
        """Exact phone match; no normalisation of spacing or prefixes."""
        for customer in self._customers:
            if customer.phone == phone:
                return customer
        return None

    def find_order(self, order_id: str) -> Order | None:
        for order in self._orders:
            if order.id == order_id:
                return order
        return None
