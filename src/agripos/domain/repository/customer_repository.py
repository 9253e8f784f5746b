"""Abstract repository for Customer aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from agripos.domain.model.customer import Customer


class CustomerRepository(ABC):

    @abstractmethod
    def get_by_id(self, customer_id: str) -> Customer | None:
        """Return a customer by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Customer]:
        """Return every customer, newest first."""

    @abstractmethod
    def create(self, customer: Customer) -> None:
        """Persist a new customer."""

    @abstractmethod
    def replace(self, customer: Customer) -> None:
        """Overwrite the stored record of an existing customer."""

    @abstractmethod
    def delete(self, customer_id: str) -> None:
        """Remove a customer. Their past orders are kept."""
