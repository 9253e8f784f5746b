"""Cart: the operator's pending sale for one POS session.

The cart is pure in-memory state.  It reads stock levels from the
session's catalog snapshot but never writes to it or to the store;
nothing is persisted until checkout.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from agripos.domain.exceptions import (
    IndexOutOfRange,
    InsufficientStock,
    InvalidQuantity,
    ProductNotFound,
)
from agripos.domain.model.order import OrderLineItem
from agripos.domain.model.value_objects import Money, Quantity

if TYPE_CHECKING:
    from agripos.domain.service.catalog_snapshot import CatalogSnapshot


@dataclass(frozen=True)
class CartLine:
    """One product in the cart.

    ``unit_price`` is copied from the product when the line is created
    and never follows later price changes.
    """

    product_id: str
    product_name: str
    unit_price: Money
    quantity: Quantity

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity.value

    def to_order_item(self) -> OrderLineItem:
        return OrderLineItem(
            product_id=self.product_id,
            product_name=self.product_name,
            quantity=self.quantity,
            unit_price=self.unit_price,
        )


class Cart:
    """Ordered, mutable collection of cart lines.

    Every failed operation leaves the cart exactly as it was.
    """

    def __init__(self, catalog: CatalogSnapshot) -> None:
        self._catalog = catalog
        self._lines: list[CartLine] = []

    # --- Read-only view -------------------------------------------------------

    @property
    def lines(self) -> tuple[CartLine, ...]:
        return tuple(self._lines)

    def __len__(self) -> int:
        return len(self._lines)

    @property
    def is_empty(self) -> bool:
        return not self._lines

    def total(self) -> Money:
        result = Money.zero()
        for line in self._lines:
            result = result + line.line_total
        return result

    # --- Mutations ------------------------------------------------------------

    def add(self, product_id: str, quantity: int) -> CartLine:
        """Add *quantity* units of a product, merging with an existing line.

        A merged line keeps the price it was first added at.
        """
        requested = Quantity(quantity)

        product = self._catalog.find_product(product_id)
        if product is None:
            raise ProductNotFound(product_id)

        index = self._index_of(product_id)
        existing = self._lines[index] if index is not None else None
        wanted = existing.quantity + requested.value if existing else requested
        if not product.has_stock_for(wanted.value):
            raise InsufficientStock(product.id, product.name, wanted.value, product.stock)

        if existing is not None:
            line = replace(existing, quantity=wanted)
            self._lines[index] = line
        else:
            line = CartLine(
                product_id=product.id,
                product_name=product.name,
                unit_price=product.price,
                quantity=requested,
            )
            self._lines.append(line)
        return line

    def adjust_quantity(self, index: int, delta: int) -> CartLine:
        """Change a line's quantity by *delta*.

        The result must stay at 1 or more; dropping a line goes through
        ``remove_line``.
        """
        line = self._line_at(index)
        target = line.quantity.value + delta
        if target < 1:
            raise InvalidQuantity(
                f"Quantity of {line.product_name} cannot go below 1; remove the line instead"
            )

        product = self._catalog.find_product(line.product_id)
        if product is None:
            raise ProductNotFound(line.product_id)
        if not product.has_stock_for(target):
            raise InsufficientStock(product.id, product.name, target, product.stock)

        updated = replace(line, quantity=line.quantity + delta)
        self._lines[index] = updated
        return updated

    def remove_line(self, index: int) -> CartLine:
        line = self._line_at(index)
        del self._lines[index]
        return line

    def clear(self) -> None:
        self._lines.clear()

    # --- Internal helpers -----------------------------------------------------

    def _index_of(self, product_id: str) -> int | None:
        for i, line in enumerate(self._lines):
            if line.product_id == product_id:
                return i
        return None

    def _line_at(self, index: int) -> CartLine:
        if not 0 <= index < len(self._lines):
            raise IndexOutOfRange(index, len(self._lines))
        return self._lines[index]
