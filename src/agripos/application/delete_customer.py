"""Application service: Delete Customer use case.

Orders keep their own customer snapshot, so history survives.
"""

from __future__ import annotations

from agripos.domain.exceptions import CustomerNotFound
from agripos.domain.repository.customer_repository import CustomerRepository


class DeleteCustomerHandler:

    def __init__(self, customer_repo: CustomerRepository) -> None:
        self._customer_repo = customer_repo

    def handle(self, customer_id: str) -> None:
        if self._customer_repo.get_by_id(customer_id) is None:
            raise CustomerNotFound(customer_id)
        self._customer_repo.delete(customer_id)
