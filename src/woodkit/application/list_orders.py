"""Application service: List Orders use case (admin query)."""

from __future__ import annotations

from woodkit.application.dto import OrderDTO
from woodkit.domain.exceptions import ValidationError
from woodkit.domain.model.order import OrderStatus
from woodkit.domain.repository.order_repository import OrderRepository


class ListOrdersHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, status: str | None = None) -> list[OrderDTO]:
        """Return orders newest first, optionally filtered by status."""
        orders = self._order_repo.list_all()
        if status is not None:
            try:
                wanted = OrderStatus(status.upper())
            except ValueError:
                raise ValidationError(f"Unknown order status: '{status}'")
            orders = [o for o in orders if o.status == wanted]

        orders.sort(key=lambda o: (o.created_at, o.id or 0), reverse=True)
        return [OrderDTO.from_order(o) for o in orders]
