"""Abstract repository for Order aggregate.

Orders are append-only: there is no replace or delete.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from agripos.domain.model.order import Order


class OrderRepository(ABC):

    @abstractmethod
    def get_by_id(self, order_id: str) -> Order | None:
        """Return an order by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Order]:
        """Return every order, newest first."""

    @abstractmethod
    def create(self, order: Order) -> None:
        """Persist a new order."""
