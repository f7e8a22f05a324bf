"""Domain service: Price Calculator.

A pure, deterministic transform from a PricingConfig and a
NormalizedConfiguration to a PriceBreakdown. No I/O and no hidden state:
identical inputs always produce an identical breakdown, which is what
allows a breakdown stored on an order to be replayed for audits.

Order of operations:
  1. size adjustment  = sum of (value - default) x multiplier
  2. wood price       = max(base + size adjustment, minimum price)
  3. options cost     = sum of selected, available option prices
  4. color cost       = round(wood price x modifier) + color adjustment
  5. total            = wood price + options cost + color cost, never < 0

The minimum price floors the wood price only; options and color are
always added on top of it.
"""

from __future__ import annotations

from decimal import Decimal

from woodkit.domain.model.configuration import NormalizedConfiguration
from woodkit.domain.model.price_breakdown import PriceBreakdown
from woodkit.domain.model.pricing_rules import (
    PricingConfig,
    is_no_color,
    require_complete,
)
from woodkit.domain.model.value_objects import ZERO, round_money, round_whole


class PriceCalculator:

    def calculate(
        self,
        config: PricingConfig,
        normalized: NormalizedConfiguration,
    ) -> PriceBreakdown:
        require_complete(config)

        base_price = round_money(config.base_price)
        size_adjustment = round_money(self._size_adjustment(config, normalized))

        floor = round_money(config.floor)
        unfloored = base_price + size_adjustment
        wood_price = max(unfloored, floor)

        itemized = self._itemized_options(config, normalized)
        options_cost = round_money(sum(itemized.values(), ZERO))

        color_cost = round_money(self._color_cost(config, normalized.color, wood_price))

        total_price = max(round_money(wood_price + options_cost + color_cost), ZERO)

        return PriceBreakdown(
            base_price=base_price,
            size_adjustment=size_adjustment,
            wood_price=wood_price,
            options_cost=options_cost,
            color_cost=color_cost,
            total_price=round_money(total_price),
            options={name: round_money(cost) for name, cost in itemized.items()},
            minimum_applied=unfloored < floor,
        )

    # --- Steps ----------------------------------------------------------------

    @staticmethod
    def _size_adjustment(
        config: PricingConfig, normalized: NormalizedConfiguration
    ) -> Decimal:
        total = ZERO
        for name, rule in config.dimensions.items():
            value = normalized.dimensions.get(name, rule.default)
            total += (value - rule.default) * rule.multiplier
        return total

    @staticmethod
    def _itemized_options(
        config: PricingConfig, normalized: NormalizedConfiguration
    ) -> dict[str, Decimal]:
        costs: dict[str, Decimal] = {}
        for name in normalized.selected_options:
            rule = config.options.get(name)
            if rule is not None and rule.available:
                costs[name.value] = rule.price
        return costs

    @staticmethod
    def _color_cost(config: PricingConfig, color: str, wood_price: Decimal) -> Decimal:
        rule = config.color_options
        if is_no_color(color) or not rule.enabled:
            return ZERO
        choice = rule.find(color)
        adjustment = choice.price_adjustment if choice is not None else ZERO
        return round_whole(wood_price * rule.price_modifier) + adjustment
