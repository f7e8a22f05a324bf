"""Order aggregate.

The Order is an aggregate root that owns its line items. Each line item
carries the configuration the customer chose and the PriceBreakdown that
was computed for it at submission time (price lock).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum

from woodkit.domain.exceptions import ValidationError
from woodkit.domain.model.configuration import NormalizedConfiguration
from woodkit.domain.model.price_breakdown import PriceBreakdown
from woodkit.domain.model.value_objects import Money, Quantity


class OrderStatus(Enum):
    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    SHIPPED = "SHIPPED"
    CANCELLED = "CANCELLED"


@dataclass(frozen=True)
class OrderLineItem:
    """A configured product at the price it was sold for."""

    product_id: str
    product_name: str
    configuration: NormalizedConfiguration
    pricing: PriceBreakdown  # locked at order-creation time
    quantity: Quantity
    currency: str = "NIS"

    @property
    def unit_price(self) -> Money:
        return Money(self.pricing.total_price, self.currency)

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity.value


# ---------------------------------------------------------------------------
# Constants for business rules
# ---------------------------------------------------------------------------
DEFAULT_TAX_RATE = Decimal("0.17")
MAX_LINE_ITEMS = 50


@dataclass
class Order:
    """Aggregate root for customer orders.

    Use the ``Order.create()`` factory for new orders. The ``__init__`` is
    intentionally simple so the repository can reconstitute persisted
    orders without re-validating or re-pricing them.
    """

    id: int | None
    customer_name: str
    customer_email: str
    items: list[OrderLineItem]
    tax_rate: Decimal = DEFAULT_TAX_RATE
    status: OrderStatus = OrderStatus.PENDING
    currency: str = "NIS"
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def create(
        customer_name: str,
        customer_email: str,
        items: list[OrderLineItem],
        tax_rate: Decimal = DEFAULT_TAX_RATE,
        currency: str = "NIS",
    ) -> Order:
        """Create a new order, enforcing all invariants."""
        if not customer_name or not customer_name.strip():
            raise ValidationError("Customer name is required")

        if not customer_email or "@" not in customer_email:
            raise ValidationError("A valid customer email is required")

        if not items:
            raise ValidationError("Order must contain at least one item")

        if len(items) > MAX_LINE_ITEMS:
            raise ValidationError(f"Maximum {MAX_LINE_ITEMS} items per order")

        if not Decimal("0") <= tax_rate <= Decimal("1"):
            raise ValidationError(f"Tax rate must be between 0 and 1, got {tax_rate}")

        for item in items:
            if item.currency != currency:
                raise ValidationError(
                    f"Cannot mix {item.currency} and {currency} items in one order"
                )

        return Order(
            id=None,
            customer_name=customer_name.strip(),
            customer_email=customer_email.strip().lower(),
            items=list(items),
            tax_rate=tax_rate,
            currency=currency,
        )

    # --- State transitions ----------------------------------------------------

    def confirm(self) -> None:
        """Transition PENDING -> CONFIRMED (payment received)."""
        if self.status != OrderStatus.PENDING:
            raise ValidationError(
                f"Cannot confirm order: current status is {self.status.value}, "
                f"expected PENDING"
            )
        self.status = OrderStatus.CONFIRMED

    def ship(self) -> None:
        """Transition CONFIRMED -> SHIPPED."""
        if self.status != OrderStatus.CONFIRMED:
            raise ValidationError(
                f"Cannot ship order in {self.status.value} status"
            )
        self.status = OrderStatus.SHIPPED

    def cancel(self) -> None:
        """Transition PENDING|CONFIRMED -> CANCELLED."""
        if self.status == OrderStatus.CANCELLED:
            raise ValidationError("Order is already cancelled")
        if self.status == OrderStatus.SHIPPED:
            raise ValidationError("Cannot cancel order in SHIPPED status")
        self.status = OrderStatus.CANCELLED

    # --- Computed properties --------------------------------------------------

    @property
    def subtotal(self) -> Money:
        result = Money.zero(self.currency)
        for item in self.items:
            result = result + item.line_total
        return result

    @property
    def tax(self) -> Money:
        return self.subtotal.scaled(self.tax_rate)

    @property
    def total(self) -> Money:
        return self.subtotal + self.tax
