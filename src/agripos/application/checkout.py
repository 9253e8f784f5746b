"""Application service: Checkout use case.

Turns the session's cart into a persisted order.  The steps run strictly
in sequence, each store call finishing before the next begins:

  1. Preconditions: cart not empty, phone and name entered.
  2. Stock check: every product is re-read from the store (not the
     snapshot) and must still cover its line.
  3. Customer: create a new customer or refresh the matching one.
  4. Order: persist the order with copies of the cart lines.
  5. Stock decrement: re-read and write back each product, one by one.
  6. Completion: clear the cart, reload the snapshot, switch to
     the order list.

Steps 3-5 are not transactional.  A failure there leaves whatever was
already written in place (a refreshed customer with no order, or some
products decremented and others not) and is reported as CheckoutFailed
with enough detail for the operator to reconcile by hand.  The cart is
never cleared on failure, so the whole checkout can be retried.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from agripos.application.dto import ContactForm, OrderDTO, order_to_dto
from agripos.application.session import PosSession, View
from agripos.domain.exceptions import (
    DomainException,
    EmptyCart,
    InsufficientStock,
    ProductVanished,
)
from agripos.domain.model.cart import CartLine
from agripos.domain.model.customer import Customer
from agripos.domain.model.identity import ORDER_PREFIX, new_id, utc_now
from agripos.domain.model.order import Order
from agripos.domain.model.value_objects import ContactDetails
from agripos.domain.repository.customer_repository import CustomerRepository
from agripos.domain.repository.order_repository import OrderRepository
from agripos.domain.repository.product_repository import ProductRepository
from agripos.domain.service.customer_resolver import CustomerResolver

logger = logging.getLogger(__name__)


class CheckoutState(Enum):
    IDLE = "IDLE"
    VALIDATING = "VALIDATING"
    RESOLVING_CUSTOMER = "RESOLVING_CUSTOMER"
    PERSISTING_ORDER = "PERSISTING_ORDER"
    DECREMENTING_STOCK = "DECREMENTING_STOCK"
    COMPLETED = "COMPLETED"
    FAILED = "FAILED"


@dataclass
class CheckoutProgress:
    """Side effects already written when a checkout stopped."""

    customer_id: str | None = None
    order_id: str | None = None
    decremented: list[str] = field(default_factory=list)

    def describe(self) -> str:
        parts = []
        if self.customer_id:
            parts.append(f"customer '{self.customer_id}' saved")
        if self.order_id:
            parts.append(f"order '{self.order_id}' saved")
        if self.decremented:
            parts.append(f"stock already reduced for {', '.join(self.decremented)}")
        return "; ".join(parts) or "nothing written"


class CheckoutFailed(DomainException):
    """A checkout step failed after the store had already been written to."""

    def __init__(self, state: CheckoutState, cause: DomainException, progress: CheckoutProgress) -> None:
        self.state = state
        self.cause = cause
        self.progress = progress
        super().__init__(
            f"Checkout failed during {state.value}: {cause} "
            f"[{progress.describe()}]"
        )


@dataclass(frozen=True)
class CheckoutResult:
    order: OrderDTO
    customer_id: str
    customer_created: bool
    total: str
    total_amount: int
    catalog_refreshed: bool


class CheckoutHandler:

    def __init__(
        self,
        session: PosSession,
        product_repo: ProductRepository,
        customer_repo: CustomerRepository,
        order_repo: OrderRepository,
    ) -> None:
        self._session = session
        self._product_repo = product_repo
        self._customer_repo = customer_repo
        self._order_repo = order_repo
        self._state = CheckoutState.IDLE

    @property
    def state(self) -> CheckoutState:
        return self._state

    def handle(self, form: ContactForm, note: str = "") -> CheckoutResult:
        """Check out the session's cart for the customer in *form*.

        Raises the precondition or stock error unchanged when nothing has
        been written yet, and CheckoutFailed once it has.
        """
        self._transition(CheckoutState.VALIDATING)
        try:
            lines = self._session.cart.lines
            if not lines:
                raise EmptyCart()
            contact = ContactDetails.entered(
                phone=form.phone,
                name=form.name,
                commune=form.commune,
                village=form.village,
                address_detail=form.address_detail,
            )
            self._revalidate_stock(lines)
        except DomainException:
            self._transition(CheckoutState.FAILED)
            raise

        now = utc_now()
        progress = CheckoutProgress()
        try:
            self._transition(CheckoutState.RESOLVING_CUSTOMER)
            customer, created = self._save_customer(contact, now)
            progress.customer_id = customer.id

            self._transition(CheckoutState.PERSISTING_ORDER)
            order = self._save_order(customer, contact, lines, note, now)
            progress.order_id = order.id

            self._transition(CheckoutState.DECREMENTING_STOCK)
            self._decrement_stock(lines, now, progress)
        except DomainException as exc:
            failed_at = self._state
            self._transition(CheckoutState.FAILED)
            logger.error(
                "Checkout stopped during %s: %s (%s)",
                failed_at.value, exc, progress.describe(),
            )
            raise CheckoutFailed(failed_at, exc, progress) from exc

        self._session.cart.clear()
        self._transition(CheckoutState.COMPLETED)
        logger.info(
            "Order %s completed for %s, total %s", order.id, contact.phone, order.total
        )

        refreshed = self._refresh_catalog()
        self._session.active_view = View.ORDERS
        return CheckoutResult(
            order=order_to_dto(order),
            customer_id=customer.id,
            customer_created=created,
            total=str(order.total),
            total_amount=order.total.amount,
            catalog_refreshed=refreshed,
        )

    # --- Steps ----------------------------------------------------------------

    def _revalidate_stock(self, lines: tuple[CartLine, ...]) -> None:
        for line in lines:
            product = self._product_repo.get_by_id(line.product_id)
            if product is None:
                raise ProductVanished(line.product_id, line.product_name)
            if not product.has_stock_for(line.quantity.value):
                raise InsufficientStock(
                    product.id, product.name, line.quantity.value, product.stock
                )

    def _save_customer(self, contact: ContactDetails, now: datetime) -> tuple[Customer, bool]:
        resolution = CustomerResolver(self._session.catalog).resolve(contact, now)
        if resolution.is_new:
            self._customer_repo.create(resolution.customer)
        else:
            self._customer_repo.replace(resolution.customer)
        return resolution.customer, resolution.is_new

    def _save_order(
        self,
        customer: Customer,
        contact: ContactDetails,
        lines: tuple[CartLine, ...],
        note: str,
        now: datetime,
    ) -> Order:
        order = Order.create(
            order_id=new_id(ORDER_PREFIX),
            customer_id=customer.id,
            customer_snapshot=contact,
            items=[line.to_order_item() for line in lines],
            note=note,
            created_at=now,
        )
        self._order_repo.create(order)
        return order

    def _decrement_stock(
        self, lines: tuple[CartLine, ...], now: datetime, progress: CheckoutProgress
    ) -> None:
        for line in lines:
            product = self._product_repo.get_by_id(line.product_id)
            if product is None:
                raise ProductVanished(line.product_id, line.product_name)
            product.remove_stock(line.quantity.value, at=now)
            self._product_repo.replace(product)
            progress.decremented.append(product.id)

    def _refresh_catalog(self) -> bool:
        """Reload the snapshot; the sale is already complete either way."""
        try:
            self._session.refresh()
        except DomainException as exc:
            logger.warning("Catalog reload after checkout failed: %s", exc)
            return False
        return True

    def _transition(self, state: CheckoutState) -> None:
        logger.debug("Checkout %s -> %s", self._state.value, state.value)
        self._state = state
