"""The pricing engine's two entry points.

``validate`` makes a raw customer request safe to price and
``calculate`` prices it. Every caller (live preview, order submission,
admin preview) goes through these, so a charged price is computed in
exactly one place.
"""

from __future__ import annotations

from woodkit.domain.model.configuration import NormalizedConfiguration
from woodkit.domain.model.price_breakdown import PriceBreakdown
from woodkit.domain.model.pricing_rules import PricingConfig
from woodkit.domain.service.configuration_validator import ConfigurationValidator
from woodkit.domain.service.price_calculator import PriceCalculator

_validator = ConfigurationValidator()
_calculator = PriceCalculator()


def validate(config: PricingConfig, raw: object) -> NormalizedConfiguration:
    return _validator.validate(config, raw)


def calculate(config: PricingConfig, normalized: NormalizedConfiguration) -> PriceBreakdown:
    return _calculator.calculate(config, normalized)


def quote(config: PricingConfig, raw: object = None) -> PriceBreakdown:
    """Validate then calculate. ``raw=None`` prices the product's defaults."""
    return calculate(config, validate(config, raw))


__all__ = ["validate", "calculate", "quote"]
