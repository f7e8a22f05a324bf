"""Application service: Update Pricing use case (admin).

Applies an administrator's edits to a product's pricing rules. Every
argument is optional; only the supplied fields change. The resulting
PricingConfig must pass the catalog invariants before it is saved.
"""

from __future__ import annotations

from dataclasses import replace

from woodkit.domain.exceptions import EntityNotFoundError, ValidationError
from woodkit.domain.model.pricing_rules import DimensionName, OptionName, PricingConfig
from woodkit.domain.model.product import Product, normalize_product_id
from woodkit.domain.model.value_objects import to_decimal
from woodkit.domain.repository.product_repository import ProductRepository


class UpdatePricingHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        product_id: str,
        base_price: str | None = None,
        minimum_price: str | None = None,
        dimension_multipliers: dict[str, str] | None = None,
        option_prices: dict[str, str] | None = None,
        option_availability: dict[str, bool] | None = None,
        color_modifier: str | None = None,
    ) -> Product:
        """Update a product's pricing rules.

        This does NOT affect any existing orders: each order line keeps
        the breakdown it was priced with.
        """
        product = self._product_repo.get_by_id(normalize_product_id(product_id))
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

        pricing = product.pricing
        if base_price is not None:
            pricing = replace(pricing, base_price=to_decimal(base_price))
        if minimum_price is not None:
            pricing = replace(pricing, minimum_price=to_decimal(minimum_price))
        if dimension_multipliers:
            pricing = self._with_multipliers(pricing, dimension_multipliers)
        if option_prices or option_availability:
            pricing = self._with_options(
                pricing, option_prices or {}, option_availability or {}
            )
        if color_modifier is not None:
            pricing = replace(
                pricing,
                color_options=replace(
                    pricing.color_options, price_modifier=to_decimal(color_modifier)
                ),
            )

        product.update_pricing(pricing)
        self._product_repo.save(product)
        return product

    # --- Internal helpers -----------------------------------------------------

    @staticmethod
    def _with_multipliers(
        pricing: PricingConfig, multipliers: dict[str, str]
    ) -> PricingConfig:
        dimensions = dict(pricing.dimensions)
        for key, value in multipliers.items():
            name = _resolve(DimensionName, key, "dimension")
            rule = dimensions.get(name)
            if rule is None:
                raise ValidationError(f"Product has no '{key}' dimension")
            dimensions[name] = replace(rule, multiplier=to_decimal(value))
        return replace(pricing, dimensions=dimensions)

    @staticmethod
    def _with_options(
        pricing: PricingConfig,
        prices: dict[str, str],
        availability: dict[str, bool],
    ) -> PricingConfig:
        options = dict(pricing.options)
        for key in list(prices) + list(availability):
            name = _resolve(OptionName, key, "option")
            rule = options.get(name)
            if rule is None:
                raise ValidationError(f"Product has no '{key}' option")
            if key in prices:
                rule = replace(rule, price=to_decimal(prices[key]))
            if key in availability:
                rule = replace(rule, available=availability[key])
            options[name] = rule
        return replace(pricing, options=options)


def _resolve(enum_type, key: str, kind: str):
    try:
        return enum_type(key)
    except ValueError:
        raise ValidationError(f"Unknown {kind}: '{key}'")
