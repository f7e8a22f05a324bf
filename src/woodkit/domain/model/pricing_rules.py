"""Pricing rules authored per product by an administrator.

A PricingConfig is immutable for the duration of a price calculation.
Admin edits produce a new PricingConfig; orders keep their own resolved
PriceBreakdown, so edits never alter placed orders.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum

from woodkit.domain.exceptions import InvalidProductError, ValidationError
from woodkit.domain.model.value_objects import ZERO, round_whole


class DimensionName(Enum):
    LENGTH = "length"
    WIDTH = "width"
    HEIGHT = "height"
    DEPTH = "depth"
    STEPS = "steps"


class OptionName(Enum):
    LACQUER = "lacquer"
    HANDRAIL = "handrail"
    PREMIUM_WOOD = "premium_wood"


# ---------------------------------------------------------------------------
# "No color" sentinel
# ---------------------------------------------------------------------------
NO_COLOR = "natural"
LEGACY_NO_COLOR_ALIASES = frozenset({"ללא צבע"})

DEFAULT_MINIMUM_PRICE_RATIO = Decimal("0.8")


def is_no_color(value: str | None) -> bool:
    return value == NO_COLOR or value in LEGACY_NO_COLOR_ALIASES


@dataclass(frozen=True)
class DimensionRule:
    """One adjustable measurement of a product.

    ``visible`` and ``editable`` only control UI exposure; they never
    change the calculated price.
    """

    min: Decimal
    max: Decimal
    default: Decimal
    multiplier: Decimal
    step: Decimal = Decimal("1")
    visible: bool = True
    editable: bool = True

    def clamp(self, value: Decimal) -> Decimal:
        return max(self.min, min(self.max, value))

    def check_invariants(self, name: str) -> None:
        if self.min > self.max:
            raise ValidationError(
                f"Invalid dimension range for {name}: min ({self.min}) "
                f"cannot be greater than max ({self.max})"
            )
        if not self.min <= self.default <= self.max:
            raise ValidationError(
                f"Invalid default value for {name}: {self.default} must be "
                f"between {self.min} and {self.max}"
            )
        if self.step <= ZERO:
            raise ValidationError(f"Step for {name} must be positive")


@dataclass(frozen=True)
class OptionRule:
    """A boolean add-on with a flat surcharge."""

    available: bool
    price: Decimal = ZERO


@dataclass(frozen=True)
class ColorChoice:
    value: str
    price_adjustment: Decimal = ZERO
    available: bool = True
    name: dict[str, str] = field(default_factory=dict)

    def label(self, language: str = "en") -> str:
        return self.name.get(language) or self.name.get("en") or self.value


@dataclass(frozen=True)
class ColorRule:
    """The color catalog of a product.

    ``price_modifier`` is proportional: 0.4 adds 40% of the wood price.
    """

    enabled: bool = False
    price_modifier: Decimal = ZERO
    options: tuple[ColorChoice, ...] = ()

    def find(self, value: str | None) -> ColorChoice | None:
        for choice in self.options:
            if choice.value == value:
                return choice
        return None

    def offers(self, value: str | None) -> bool:
        choice = self.find(value)
        return choice is not None and choice.available


@dataclass(frozen=True)
class PricingConfig:
    """A product's base price, price floor and rule sets.

    When ``minimum_price`` is left unset the floor is
    ``DEFAULT_MINIMUM_PRICE_RATIO`` of the base price in whole units.
    The catalog normally fills it explicitly at load time.
    """

    base_price: Decimal
    dimensions: dict[DimensionName, DimensionRule]
    options: dict[OptionName, OptionRule] = field(default_factory=dict)
    color_options: ColorRule = field(default_factory=ColorRule)
    minimum_price: Decimal | None = None

    @property
    def floor(self) -> Decimal:
        if self.minimum_price is not None:
            return self.minimum_price
        return round_whole(self.base_price * DEFAULT_MINIMUM_PRICE_RATIO)

    def check_invariants(self) -> None:
        """Reject catalog data the engine must never be handed.

        The price of the product's own default configuration is
        ``max(base_price, floor)``; requiring ``floor <= base_price`` keeps
        the product buyable at its advertised base price.
        """
        require_complete(self)
        if self.base_price < ZERO:
            raise ValidationError("Base price cannot be negative")
        if self.floor < ZERO:
            raise ValidationError("Minimum price cannot be negative")
        if self.floor > self.base_price:
            raise ValidationError(
                f"Minimum price {self.floor} exceeds base price {self.base_price}"
            )
        for name, rule in self.dimensions.items():
            rule.check_invariants(name.value)
        for name, option in self.options.items():
            if option.price < ZERO:
                raise ValidationError(f"Option price for {name.value} cannot be negative")
        values = [choice.value for choice in self.color_options.options]
        if len(values) != len(set(values)):
            raise ValidationError("Color values must be unique")


def require_complete(config: PricingConfig | None) -> PricingConfig:
    """Raise InvalidProductError unless ``config`` carries the required fields."""
    if config is None:
        raise InvalidProductError("Product has no pricing configuration")
    if getattr(config, "base_price", None) is None:
        raise InvalidProductError("Pricing configuration is missing basePrice")
    if getattr(config, "dimensions", None) is None:
        raise InvalidProductError("Pricing configuration is missing dimensions")
    return config
