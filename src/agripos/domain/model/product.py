"""Product aggregate.

Products live independently of orders and carts. They have their own
lifecycle: prices change, stock is counted in and sold out, products are
added and removed from the catalog.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from agripos.domain.exceptions import InsufficientStock, InvalidQuantity
from agripos.domain.model.identity import utc_now
from agripos.domain.model.value_objects import Money


@dataclass
class Product:
    """A product in the catalog.

    Invariant: ``stock`` is never negative after a committed change.
    The ``__init__`` does not validate so the repository can reconstitute
    stored records as they are.

    ``extra`` holds record fields this application does not interpret;
    they are written back untouched.
    """

    id: str
    name: str
    category: str
    price: Money
    stock: int = 0
    images: list[str] = field(default_factory=list)
    description: str = ""
    created_at: datetime = field(default_factory=utc_now)
    updated_at: datetime = field(default_factory=utc_now)
    extra: dict = field(default_factory=dict, compare=False, repr=False)

    def has_stock_for(self, quantity: int) -> bool:
        return self.stock >= quantity

    def remove_stock(self, quantity: int, at: datetime | None = None) -> None:
        """Deduct sold units and stamp the update time.

        Raises InsufficientStock rather than letting stock go negative.
        """
        if quantity < 1:
            raise InvalidQuantity(f"Cannot remove {quantity} units of {self.name}")
        if quantity > self.stock:
            raise InsufficientStock(self.id, self.name, quantity, self.stock)
        self.stock -= quantity
        self.updated_at = at or utc_now()
