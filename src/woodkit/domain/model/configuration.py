"""A customer's configuration after it has been made safe to price."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from woodkit.domain.model.pricing_rules import DimensionName, OptionName


class CorrectionKind(Enum):
    OUT_OF_RANGE_INPUT = "OUT_OF_RANGE_INPUT"
    NON_NUMERIC_INPUT = "NON_NUMERIC_INPUT"
    UNKNOWN_SELECTION_IGNORED = "UNKNOWN_SELECTION_IGNORED"


@dataclass(frozen=True)
class Correction:
    """A non-fatal fix the validator applied to the customer's input."""

    kind: CorrectionKind
    field: str
    detail: str


@dataclass(frozen=True)
class NormalizedConfiguration:
    """Output of the validator, input of the calculator.

    Every declared dimension has a value inside its range, options only
    hold declared keys, and ``color`` is either an offered color or the
    canonical "no color" sentinel.
    """

    dimensions: dict[DimensionName, Decimal]
    options: dict[OptionName, bool]
    color: str
    corrections: tuple[Correction, ...] = ()

    @property
    def selected_options(self) -> list[OptionName]:
        return [name for name, selected in self.options.items() if selected]

    def as_raw(self) -> dict:
        """Render back into the raw request shape (used for persistence)."""
        return {
            "dimensions": {name.value: value for name, value in self.dimensions.items()},
            "options": {name.value: selected for name, selected in self.options.items()},
            "color": self.color,
        }
