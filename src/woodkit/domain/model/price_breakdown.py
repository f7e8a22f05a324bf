"""PriceBreakdown: the itemized result of a price calculation.

A breakdown is persisted verbatim onto an order line so that refunds and
audits can replay exactly what the customer was charged.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal


@dataclass(frozen=True)
class PriceBreakdown:
    """All amounts are rounded to 2 decimal places.

    Invariant: ``total_price == wood_price + options_cost + color_cost``
    unless the non-negativity floor kicked in, where
    ``wood_price == max(base_price + size_adjustment, minimum price)``.
    """

    base_price: Decimal
    size_adjustment: Decimal
    wood_price: Decimal
    options_cost: Decimal
    color_cost: Decimal
    total_price: Decimal
    options: dict[str, Decimal] = field(default_factory=dict)
    minimum_applied: bool = False

    def to_dict(self) -> dict:
        return {
            "basePrice": str(self.base_price),
            "sizeAdjustment": str(self.size_adjustment),
            "woodPrice": str(self.wood_price),
            "optionsCost": str(self.options_cost),
            "colorCost": str(self.color_cost),
            "totalPrice": str(self.total_price),
            "options": {name: str(cost) for name, cost in self.options.items()},
            "minimumApplied": self.minimum_applied,
        }

    @staticmethod
    def from_dict(raw: dict) -> PriceBreakdown:
        return PriceBreakdown(
            base_price=Decimal(raw["basePrice"]),
            size_adjustment=Decimal(raw["sizeAdjustment"]),
            wood_price=Decimal(raw["woodPrice"]),
            options_cost=Decimal(raw["optionsCost"]),
            color_cost=Decimal(raw["colorCost"]),
            total_price=Decimal(raw["totalPrice"]),
            options={name: Decimal(cost) for name, cost in raw.get("options", {}).items()},
            minimum_applied=raw.get("minimumApplied", False),
        )
