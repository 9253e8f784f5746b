"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from agripos.domain.model.customer import Customer
from agripos.domain.model.order import Order
from agripos.domain.model.product import Product

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M UTC"


@dataclass(frozen=True)
class ItemSpec:
    """Input: a product the operator wants to ring up."""

    product_id: str
    quantity: int


@dataclass(frozen=True)
class ContactForm:
    """Input: contact fields typed at the counter, untrimmed."""

    phone: str
    name: str
    commune: str = ""
    village: str = ""
    address_detail: str = ""


@dataclass(frozen=True)
class ProductForm:
    """Input: product fields from the add/edit form."""

    name: str
    category: str
    price: str | int
    stock: int = 0
    images: list[str] = field(default_factory=list)
    description: str = ""


@dataclass(frozen=True)
class ProductDTO:
    id: str
    name: str
    category: str
    price: str  # formatted, e.g. "120.000 ₫"
    stock: int
    description: str
    updated_at: str


@dataclass(frozen=True)
class CustomerDTO:
    id: str
    name: str
    phone: str
    commune: str
    village: str
    address_detail: str
    created_at: str


@dataclass(frozen=True)
class OrderLineItemDTO:
    product_id: str
    product_name: str
    quantity: int
    unit_price: str
    line_total: str


@dataclass(frozen=True)
class OrderDTO:
    id: str
    customer_id: str
    customer_name: str
    phone: str
    address: str
    items: list[OrderLineItemDTO]
    total: str
    total_amount: int
    created_at: str
    note: str


# --- Mapping ------------------------------------------------------------------


def product_to_dto(product: Product) -> ProductDTO:
    return ProductDTO(
        id=product.id,
        name=product.name,
        category=product.category,
        price=str(product.price),
        stock=product.stock,
        description=product.description,
        updated_at=product.updated_at.strftime(TIMESTAMP_FORMAT),
    )


def customer_to_dto(customer: Customer) -> CustomerDTO:
    return CustomerDTO(
        id=customer.id,
        name=customer.name,
        phone=customer.phone,
        commune=customer.commune,
        village=customer.village,
        address_detail=customer.address_detail,
        created_at=customer.created_at.strftime(TIMESTAMP_FORMAT),
    )


def order_to_dto(order: Order) -> OrderDTO:
    snapshot = order.customer_snapshot
    return OrderDTO(
        id=order.id,
        customer_id=order.customer_id,
        customer_name=snapshot.name,
        phone=snapshot.phone,
        address=" • ".join([snapshot.commune, snapshot.village, snapshot.address_detail]),
        items=[
            OrderLineItemDTO(
                product_id=item.product_id,
                product_name=item.product_name,
                quantity=item.quantity.value,
                unit_price=str(item.unit_price),
                line_total=str(item.line_total),
            )
            for item in order.items
        ],
        total=str(order.total),
        total_amount=order.total.amount,
        created_at=order.created_at.strftime(TIMESTAMP_FORMAT),
        note=order.note,
    )
