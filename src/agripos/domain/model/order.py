"""Order aggregate.

An Order is written exactly once, at checkout, and never changes after.
It keeps its own copy of the customer's contact details and of every
cart line, so later edits to customers or products never alter history.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from agripos.domain.exceptions import EmptyCart, ValidationError
from agripos.domain.model.identity import utc_now
from agripos.domain.model.value_objects import ContactDetails, Money, Quantity


@dataclass(frozen=True)
class OrderLineItem:
    """Captures the price snapshot of a product at sale time."""

    product_id: str
    product_name: str
    quantity: Quantity
    unit_price: Money  # locked when the line entered the cart

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity.value


@dataclass(frozen=True)
class Order:
    """Aggregate root for completed sales.

    Use the ``Order.create()`` factory for new orders; it computes the
    total from the lines.  The ``__init__`` is intentionally simple so the
    repository can reconstitute stored orders without re-validating.

    ``customer_id`` is a weak reference: the customer may since have been
    deleted, ``customer_snapshot`` is what was sold to.
    """

    id: str
    customer_id: str
    customer_snapshot: ContactDetails
    items: tuple[OrderLineItem, ...]
    total: Money
    created_at: datetime = field(default_factory=utc_now)
    note: str = ""

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def create(
        order_id: str,
        customer_id: str,
        customer_snapshot: ContactDetails,
        items: list[OrderLineItem] | tuple[OrderLineItem, ...],
        note: str = "",
        created_at: datetime | None = None,
    ) -> Order:
        if not items:
            raise EmptyCart()
        if not customer_id:
            raise ValidationError("Order must reference a customer")

        total = Money.zero()
        for item in items:
            total = total + item.line_total

        return Order(
            id=order_id,
            customer_id=customer_id,
            customer_snapshot=customer_snapshot,
            items=tuple(items),
            total=total,
            created_at=created_at or utc_now(),
            note=(note or "").strip(),
        )

    # --- Queries --------------------------------------------------------------

    def matches(self, query: str) -> bool:
        """Case-insensitive match on the snapshot name or phone."""
        query = query.strip().lower()
        if not query:
            return True
        haystack = f"{self.customer_snapshot.name} {self.customer_snapshot.phone}".lower()
        return query in haystack
