"""Application service: Update Customer use case.

Unlike checkout, a direct edit may change the phone number, so the new
number is checked against every other customer first.
"""

from __future__ import annotations

from agripos.application.dto import ContactForm, CustomerDTO, customer_to_dto
from agripos.domain.exceptions import CustomerNotFound
from agripos.domain.model.value_objects import ContactDetails
from agripos.domain.repository.customer_repository import CustomerRepository
from agripos.domain.service.catalog_snapshot import CatalogSnapshot
from agripos.domain.service.customer_resolver import CustomerResolver


class UpdateCustomerHandler:

    def __init__(self, customer_repo: CustomerRepository, catalog: CatalogSnapshot) -> None:
        self._customer_repo = customer_repo
        self._catalog = catalog

    def handle(self, customer_id: str, form: ContactForm) -> CustomerDTO:
        customer = self._customer_repo.get_by_id(customer_id)
        if customer is None:
            raise CustomerNotFound(customer_id)

        contact = ContactDetails.entered(
            phone=form.phone,
            name=form.name,
            commune=form.commune,
            village=form.village,
            address_detail=form.address_detail,
        )
        CustomerResolver(self._catalog).check_phone_unique(contact.phone, excluding_id=customer.id)

        customer.phone = contact.phone
        customer.update_contact(contact)
        self._customer_repo.replace(customer)
        return customer_to_dto(customer)
