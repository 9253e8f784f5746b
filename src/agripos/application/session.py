"""POS session state.

Holds the catalog snapshot and the cart for one operator terminal and
is handed explicitly to the handlers that need them.
"""

from __future__ import annotations

from enum import Enum

from agripos.domain.model.cart import Cart
from agripos.domain.service.catalog_snapshot import CatalogSnapshot


class View(Enum):
    DASHBOARD = "dashboard"
    PRODUCTS = "products"
    CUSTOMERS = "customers"
    POS = "pos"
    ORDERS = "orders"


class PosSession:

    def __init__(self, catalog: CatalogSnapshot) -> None:
        self.catalog = catalog
        self.cart = Cart(catalog)
        self.active_view = View.POS

    def refresh(self) -> None:
        """Reload the snapshot. The cart is kept as is."""
        self.catalog.reload()
