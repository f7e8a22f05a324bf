"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from woodkit.application.create_order import CreateOrderHandler
from woodkit.infrastructure.config import get_settings
from woodkit.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from woodkit.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)


def product_repository() -> JsonProductRepository:
    settings = get_settings()
    return JsonProductRepository(
        settings.data_dir / "products.json",
        minimum_price_ratio=settings.minimum_price_ratio,
    )


def order_repository() -> JsonOrderRepository:
    return JsonOrderRepository(get_settings().data_dir / "orders.json")


def create_order_handler() -> CreateOrderHandler:
    settings = get_settings()
    return CreateOrderHandler(
        order_repo=order_repository(),
        product_repo=product_repository(),
        tax_rate=settings.tax_rate,
        currency=settings.currency,
    )
