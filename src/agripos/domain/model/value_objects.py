"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from agripos.domain.exceptions import InvalidQuantity, MissingRequiredField, ValidationError


@dataclass(frozen=True)
class Money:
    """Monetary amount in whole đồng.

    The shop prices everything in integer VND, so amounts are plain ints
    and no rounding can ever happen.
    """

    amount: int
    currency: str = "VND"

    def __post_init__(self) -> None:
        if isinstance(self.amount, bool) or not isinstance(self.amount, int):
            raise ValidationError(
                f"Money amount must be an integer, got {type(self.amount).__name__}"
            )
        if self.amount < 0:
            raise ValidationError(
                f"Money amount cannot be negative, got {self.amount}"
            )

    # --- Arithmetic helpers ---------------------------------------------------

    def __add__(self, other: Money) -> Money:
        self._assert_same_currency(other)
        return Money(self.amount + other.amount, self.currency)

    def __mul__(self, factor: int) -> Money:
        if not isinstance(factor, int):
            raise TypeError(f"Can only multiply Money by int, got {type(factor).__name__}")
        return Money(self.amount * factor, self.currency)

    def __lt__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount < other.amount

    def __le__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount <= other.amount

    def __gt__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount > other.amount

    def __ge__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount >= other.amount

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        # vi-VN grouping: 1.250.000 ₫
        return f"{self.amount:,}".replace(",", ".") + " ₫"

    # --- Internal helpers -----------------------------------------------------

    def _assert_same_currency(self, other: Money) -> None:
        if self.currency != other.currency:
            raise ValidationError(
                f"Cannot combine {self.currency} with {other.currency}"
            )

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def zero() -> Money:
        return Money(0)

    @staticmethod
    def of(amount: str | float | int | Decimal | None) -> Money:
        """Convenient factory that coerces store and CLI input safely.

        ``None`` and blank strings count as zero, like an empty price field.
        """
        if amount is None or (isinstance(amount, str) and not amount.strip()):
            return Money(0)
        try:
            value = Decimal(str(amount).strip())
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc
        if not value.is_finite():
            raise ValidationError(f"Invalid money amount: {amount!r}")
        if value != value.to_integral_value():
            raise ValidationError(f"Money amount must be whole đồng, got {amount!r}")
        return Money(int(value))


@dataclass(frozen=True)
class Quantity:
    """A positive integer quantity.

    Enforces the invariant that you cannot sell zero or negative items.
    """

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise InvalidQuantity(
                f"Quantity must be an integer, got {type(self.value).__name__}"
            )
        if self.value < 1:
            raise InvalidQuantity(f"Quantity must be at least 1, got {self.value}")

    def __add__(self, delta: int) -> Quantity:
        return Quantity(self.value + delta)

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class ContactDetails:
    """Customer contact fields as entered at the counter.

    Also used as the immutable customer snapshot stored on every order.
    Phone numbers are compared by exact string equality; only the
    surrounding whitespace is trimmed.
    """

    name: str
    phone: str
    commune: str = ""
    village: str = ""
    address_detail: str = ""

    @staticmethod
    def entered(
        phone: str | None,
        name: str | None,
        commune: str | None = "",
        village: str | None = "",
        address_detail: str | None = "",
    ) -> ContactDetails:
        """Build from raw form input, requiring phone and name."""
        phone = (phone or "").strip()
        name = (name or "").strip()
        if not phone:
            raise MissingRequiredField("phone")
        if not name:
            raise MissingRequiredField("name")
        return ContactDetails(
            name=name,
            phone=phone,
            commune=(commune or "").strip(),
            village=(village or "").strip(),
            address_detail=(address_detail or "").strip(),
        )
