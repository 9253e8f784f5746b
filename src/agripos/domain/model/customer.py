"""Customer aggregate."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from agripos.domain.model.identity import utc_now
from agripos.domain.model.value_objects import ContactDetails


@dataclass
class Customer:
    """A shop customer, identified at the counter by phone number.

    Phone uniqueness is enforced by the application when records are
    edited, not by the store.
    """

    id: str
    name: str
    phone: str
    commune: str = ""
    village: str = ""
    address_detail: str = ""
    created_at: datetime = field(default_factory=utc_now)
    extra: dict = field(default_factory=dict, compare=False, repr=False)

    @property
    def contact(self) -> ContactDetails:
        return ContactDetails(
            name=self.name,
            phone=self.phone,
            commune=self.commune,
            village=self.village,
            address_detail=self.address_detail,
        )

    def update_contact(self, contact: ContactDetails) -> None:
        """Overwrite name and address fields; id, phone and created_at stay."""
        self.name = contact.name
        self.commune = contact.commune
        self.village = contact.village
        self.address_detail = contact.address_detail
