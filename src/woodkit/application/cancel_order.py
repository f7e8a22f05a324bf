"""Application service: Cancel Order use case."""

from __future__ import annotations

from woodkit.domain.exceptions import EntityNotFoundError
from woodkit.domain.repository.order_repository import OrderRepository


class CancelOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: int) -> None:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")

        order.cancel()
        self._order_repo.save(order)
