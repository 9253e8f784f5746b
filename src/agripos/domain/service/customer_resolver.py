"""Domain service: Customer Resolver.

Decides whether the person at the counter is a known customer (exact
phone match in the catalog snapshot) or a new one, and builds the
record to persist.

Checkout deliberately never rejects a known phone: a match simply means
"this is that customer" and their contact fields are refreshed.  Phone
uniqueness is only enforced on direct customer edits through
``check_phone_unique``.
"""

from __future__ import annotations

from copy import deepcopy
from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from agripos.domain.exceptions import DuplicatePhone, MissingRequiredField
from agripos.domain.model.customer import Customer
from agripos.domain.model.identity import CUSTOMER_PREFIX, new_id, utc_now
from agripos.domain.model.value_objects import ContactDetails
from agripos.domain.service.catalog_snapshot import CatalogSnapshot


class ResolutionKind(Enum):
    CREATE = "CREATE"
    UPDATE = "UPDATE"


@dataclass(frozen=True)
class CustomerResolution:
    kind: ResolutionKind
    customer: Customer

    @property
    def is_new(self) -> bool:
        return self.kind is ResolutionKind.CREATE


class CustomerResolver:

    def __init__(self, catalog: CatalogSnapshot) -> None:
        self._catalog = catalog

    def resolve(self, contact: ContactDetails, now: datetime | None = None) -> CustomerResolution:
        """Return a create or update intent for *contact*.

        The snapshot's customer object is never mutated; an update intent
        carries a copy with the entered fields merged in.
        """
        if not contact.phone.strip():
            raise MissingRequiredField("phone")
        if not contact.name.strip():
            raise MissingRequiredField("name")

        existing = self._catalog.find_customer_by_phone(contact.phone)
        if existing is not None:
            merged = deepcopy(existing)
            merged.update_contact(contact)
            return CustomerResolution(ResolutionKind.UPDATE, merged)

        customer = Customer(
            id=new_id(CUSTOMER_PREFIX),
            name=contact.name,
            phone=contact.phone,
            commune=contact.commune,
            village=contact.village,
            address_detail=contact.address_detail,
            created_at=now or utc_now(),
        )
        return CustomerResolution(ResolutionKind.CREATE, customer)

    def check_phone_unique(self, phone: str, excluding_id: str | None = None) -> None:
        """Raise DuplicatePhone if another customer already holds *phone*."""
        for customer in self._catalog.customers:
            if customer.phone == phone and customer.id != excluding_id:
                raise DuplicatePhone(phone, customer.id)
