"""Application service: Create Order use case.

Orchestrates the flow between repositories and the pricing engine.
The server-side price is authoritative: whatever the client displayed,
each line is re-validated and re-priced here and the resulting
breakdown is locked onto the order.
"""

from __future__ import annotations

import logging
from decimal import Decimal

from woodkit.application.dto import ConfiguredItemSpec, OrderDTO
from woodkit.application.quote_price import load_purchasable
from woodkit.domain.model.order import DEFAULT_TAX_RATE, Order, OrderLineItem
from woodkit.domain.model.value_objects import Quantity
from woodkit.domain.repository.order_repository import OrderRepository
from woodkit.domain.repository.product_repository import ProductRepository
from woodkit.domain.service import calculate, validate

logger = logging.getLogger(__name__)


class CreateOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        product_repo: ProductRepository,
        tax_rate: Decimal = DEFAULT_TAX_RATE,
        currency: str = "NIS",
    ) -> None:
        self._order_repo = order_repo
        self._product_repo = product_repo
        self._tax_rate = tax_rate
        self._currency = currency

    def handle(
        self,
        customer_name: str,
        customer_email: str,
        item_specs: list[ConfiguredItemSpec],
    ) -> OrderDTO:
        """Create a new order.

        Steps:
        1. Resolve each product id to an active Product (fail if not found).
        2. Validate and price the requested configuration (snapshot).
        3. Let the Order aggregate validate all business rules.
        4. Persist and return a DTO.
        """
        line_items: list[OrderLineItem] = []

        for spec in item_specs:
            product = load_purchasable(self._product_repo, spec.product_id)

            normalized = validate(product.pricing, spec.configuration)
            breakdown = calculate(product.pricing, normalized)

            line_items.append(
                OrderLineItem(
                    product_id=product.id,
                    product_name=product.name,
                    configuration=normalized,
                    pricing=breakdown,  # <-- price snapshot
                    quantity=Quantity(spec.quantity),
                    currency=product.currency,
                )
            )

        order = Order.create(
            customer_name=customer_name,
            customer_email=customer_email,
            items=line_items,
            tax_rate=self._tax_rate,
            currency=self._currency,
        )
        self._order_repo.save(order)
        logger.info("Order #%s created, total %s", order.id, order.total)

        return OrderDTO.from_order(order)
