"""Application service: Ship Order use case.

Marks a confirmed order as handed over to the carrier.
"""

from __future__ import annotations

from woodkit.domain.exceptions import EntityNotFoundError
from woodkit.domain.repository.order_repository import OrderRepository


class ShipOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: int) -> None:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")

        order.ship()
        self._order_repo.save(order)
