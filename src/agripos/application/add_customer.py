"""Application service: Add Customer use case."""

from __future__ import annotations

from agripos.application.dto import ContactForm, CustomerDTO, customer_to_dto
from agripos.domain.model.customer import Customer
from agripos.domain.model.identity import CUSTOMER_PREFIX, new_id
from agripos.domain.model.value_objects import ContactDetails
from agripos.domain.repository.customer_repository import CustomerRepository
from agripos.domain.service.catalog_snapshot import CatalogSnapshot
from agripos.domain.service.customer_resolver import CustomerResolver


class AddCustomerHandler:

    def __init__(self, customer_repo: CustomerRepository, catalog: CatalogSnapshot) -> None:
        self._customer_repo = customer_repo
        self._catalog = catalog

    def handle(self, form: ContactForm) -> CustomerDTO:
        """Register a customer. The phone must not be in use yet."""
        contact = ContactDetails.entered(
            phone=form.phone,
            name=form.name,
            commune=form.commune,
            village=form.village,
            address_detail=form.address_detail,
        )
        CustomerResolver(self._catalog).check_phone_unique(contact.phone)

        customer = Customer(
            id=new_id(CUSTOMER_PREFIX),
            name=contact.name,
            phone=contact.phone,
            commune=contact.commune,
            village=contact.village,
            address_detail=contact.address_detail,
        )
        self._customer_repo.create(customer)
        return customer_to_dto(customer)
