"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal

from woodkit.domain.model.order import Order
from woodkit.domain.model.price_breakdown import PriceBreakdown
from woodkit.domain.model.value_objects import CURRENCY_SYMBOLS, Money


def format_signed(amount: Decimal, currency: str) -> str:
    """Format an amount that may be negative, e.g. '-₪12.50'."""
    sign = "-" if amount < 0 else ""
    return f"{sign}{CURRENCY_SYMBOLS[currency]}{abs(amount):.2f}"


@dataclass(frozen=True)
class ConfiguredItemSpec:
    """Input: one configured product the customer wants to buy.

    ``configuration`` is the raw request shape:
    ``{"dimensions": {...}, "options": {...}, "color": "..."}``.
    """

    product_id: str
    configuration: dict = field(default_factory=dict)
    quantity: int = 1


@dataclass(frozen=True)
class PriceQuoteDTO:
    """Output: a price breakdown as displayed to the user."""

    product_id: str
    currency: str
    base_price: str
    size_adjustment: str
    wood_price: str
    options_cost: str
    color_cost: str
    total_price: str
    options: dict[str, str]
    minimum_applied: bool
    corrections: list[str]

    @staticmethod
    def from_breakdown(
        product_id: str,
        currency: str,
        breakdown: PriceBreakdown,
        corrections: list[str] | None = None,
    ) -> PriceQuoteDTO:
        return PriceQuoteDTO(
            product_id=product_id,
            currency=currency,
            base_price=format_signed(breakdown.base_price, currency),
            size_adjustment=format_signed(breakdown.size_adjustment, currency),
            wood_price=format_signed(breakdown.wood_price, currency),
            options_cost=format_signed(breakdown.options_cost, currency),
            color_cost=format_signed(breakdown.color_cost, currency),
            total_price=str(Money(breakdown.total_price, currency)),
            options={
                name: format_signed(cost, currency)
                for name, cost in breakdown.options.items()
            },
            minimum_applied=breakdown.minimum_applied,
            corrections=list(corrections or []),
        )


@dataclass(frozen=True)
class OrderLineItemDTO:
    """Output: a single line item as displayed to the user."""

    product_name: str
    quantity: int
    color: str
    options: list[str]
    unit_price: str  # formatted, e.g. "₪150.00"
    line_total: str


@dataclass(frozen=True)
class OrderDTO:
    """Output: a complete order as displayed to the user."""

    id: int
    customer_name: str
    status: str
    items: list[OrderLineItemDTO]
    subtotal: str
    tax: str
    total: str
    created_at: str

    @staticmethod
    def from_order(order: Order) -> OrderDTO:
        return OrderDTO(
            id=order.id,  # type: ignore[arg-type]
            customer_name=order.customer_name,
            status=order.status.value,
            items=[
                OrderLineItemDTO(
                    product_name=item.product_name,
                    quantity=item.quantity.value,
                    color=item.configuration.color,
                    options=sorted(item.pricing.options),
                    unit_price=str(item.unit_price),
                    line_total=str(item.line_total),
                )
                for item in order.items
            ],
            subtotal=str(order.subtotal),
            tax=str(order.tax),
            total=str(order.total),
            created_at=order.created_at.strftime("%Y-%m-%d %H:%M UTC"),
        )
