"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
Every error names the field or product that triggered it.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


# ---------------------------------------------------------------------------
# Validation failures
# ---------------------------------------------------------------------------


class InvalidQuantity(ValidationError):
    """A quantity is not a positive integer."""


class InsufficientStock(ValidationError):
    """A product does not have enough units in stock."""

    def __init__(self, product_id: str, product_name: str, requested: int, available: int) -> None:
        self.product_id = product_id
        self.product_name = product_name
        self.requested = requested
        self.available = available
        super().__init__(
            f"Insufficient stock for {product_name} "
            f"(need {requested}, have {available} available)"
        )


class MissingRequiredField(ValidationError):
    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"{field} is required")


class EmptyCart(ValidationError):
    def __init__(self) -> None:
        super().__init__("Cart is empty")


class IndexOutOfRange(ValidationError):
    def __init__(self, index: int, size: int) -> None:
        self.index = index
        self.size = size
        super().__init__(f"Cart line {index} does not exist (cart has {size} lines)")


class DuplicatePhone(ValidationError):
    """Another customer already uses this phone number."""

    def __init__(self, phone: str, existing_id: str) -> None:
        self.phone = phone
        self.existing_id = existing_id
        super().__init__(
            f"Phone {phone} already belongs to customer '{existing_id}'"
        )


class InvalidCategory(ValidationError):
    def __init__(self, category: str, allowed: list[str]) -> None:
        self.category = category
        self.allowed = list(allowed)
        super().__init__(
            f"Unknown category '{category}' (expected one of: {', '.join(allowed)})"
        )


# ---------------------------------------------------------------------------
# Missing entities
# ---------------------------------------------------------------------------


class ProductNotFound(EntityNotFoundError):
    def __init__(self, product_id: str) -> None:
        self.product_id = product_id
        super().__init__(f"Product with ID '{product_id}' not found")


class ProductVanished(EntityNotFoundError):
    """A product in the cart no longer exists in the store.

    The catalog snapshot is stale and should be reloaded.
    """

    def __init__(self, product_id: str, product_name: str = "") -> None:
        self.product_id = product_id
        self.product_name = product_name
        label = f"{product_name} ({product_id})" if product_name else product_id
        super().__init__(f"Product {label} no longer exists; reload the catalog")


class CustomerNotFound(EntityNotFoundError):
    def __init__(self, customer_id: str) -> None:
        self.customer_id = customer_id
        super().__init__(f"Customer with ID '{customer_id}' not found")


class OrderNotFound(EntityNotFoundError):
    def __init__(self, order_id: str) -> None:
        self.order_id = order_id
        super().__init__(f"Order '{order_id}' not found")


# ---------------------------------------------------------------------------
# Store failures
# ---------------------------------------------------------------------------


class StoreError(DomainException):
    """The record store could not be reached or rejected a request.

    The store's own message is kept verbatim in ``detail``.
    """

    def __init__(self, message: str, status_code: int | None = None, detail: str = "") -> None:
        self.status_code = status_code
        self.detail = detail
        super().__init__(message)
