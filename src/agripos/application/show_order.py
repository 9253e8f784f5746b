"""Application service: Show Order query."""

from __future__ import annotations

from agripos.application.dto import OrderDTO, order_to_dto
from agripos.domain.exceptions import OrderNotFound
from agripos.domain.repository.order_repository import OrderRepository


class ShowOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: str) -> OrderDTO:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise OrderNotFound(order_id)
        return order_to_dto(order)
