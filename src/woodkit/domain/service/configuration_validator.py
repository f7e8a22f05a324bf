"""Domain service: Configuration Validator.

Turns arbitrary caller input into a NormalizedConfiguration. The
validator never fails on bad user input: out-of-range values are
clamped, non-numeric values fall back to the rule default, and unknown
selections are dropped. Each fix is recorded as a Correction.

The only error it raises is InvalidProductError, when the pricing
configuration itself is incomplete.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from decimal import Decimal

from woodkit.domain.model.configuration import (
    Correction,
    CorrectionKind,
    NormalizedConfiguration,
)
from woodkit.domain.model.pricing_rules import (
    NO_COLOR,
    DimensionName,
    OptionName,
    PricingConfig,
    is_no_color,
    require_complete,
)
from woodkit.domain.model.value_objects import is_number, to_decimal

logger = logging.getLogger(__name__)


class ConfigurationValidator:

    def validate(self, config: PricingConfig, requested: object) -> NormalizedConfiguration:
        """Normalize a raw request of the shape
        ``{"dimensions": {...}, "options": {...}, "color": "..."}``.

        Anything that is not a mapping is treated as an empty request.
        """
        require_complete(config)
        raw = requested if isinstance(requested, Mapping) else {}
        corrections: list[Correction] = []

        dimensions = self._normalize_dimensions(config, raw.get("dimensions"), corrections)
        options = self._normalize_options(config, raw.get("options"), corrections)
        color = self._normalize_color(config, raw.get("color"), corrections)

        for correction in corrections:
            logger.debug(
                "Corrected %s (%s): %s",
                correction.field,
                correction.kind.value,
                correction.detail,
            )

        return NormalizedConfiguration(
            dimensions=dimensions,
            options=options,
            color=color,
            corrections=tuple(corrections),
        )

    # --- Public per-part operations -------------------------------------------

    def normalize_dimensions(
        self, config: PricingConfig, requested: object
    ) -> dict[DimensionName, Decimal]:
        require_complete(config)
        return self._normalize_dimensions(config, requested, [])

    def normalize_options(
        self, config: PricingConfig, requested: object
    ) -> dict[OptionName, bool]:
        require_complete(config)
        return self._normalize_options(config, requested, [])

    def normalize_color(self, config: PricingConfig, requested_color: object) -> str:
        require_complete(config)
        return self._normalize_color(config, requested_color, [])

    # --- Internal helpers -----------------------------------------------------

    @staticmethod
    def _normalize_dimensions(
        config: PricingConfig,
        requested: object,
        corrections: list[Correction],
    ) -> dict[DimensionName, Decimal]:
        values = requested if isinstance(requested, Mapping) else {}
        declared = {name.value for name in config.dimensions}

        for key in values:
            if key not in declared:
                corrections.append(
                    Correction(
                        CorrectionKind.UNKNOWN_SELECTION_IGNORED,
                        f"dimensions.{key}",
                        "dimension is not declared for this product",
                    )
                )

        result: dict[DimensionName, Decimal] = {}
        for name, rule in config.dimensions.items():
            if name.value not in values:
                result[name] = rule.default
                continue

            raw_value = values[name.value]
            if not is_number(raw_value):
                corrections.append(
                    Correction(
                        CorrectionKind.NON_NUMERIC_INPUT,
                        f"dimensions.{name.value}",
                        f"{raw_value!r} replaced by default {rule.default}",
                    )
                )
                result[name] = rule.default
                continue

            value = to_decimal(raw_value)
            clamped = rule.clamp(value)
            if clamped != value:
                corrections.append(
                    Correction(
                        CorrectionKind.OUT_OF_RANGE_INPUT,
                        f"dimensions.{name.value}",
                        f"{value} clamped to {clamped}",
                    )
                )
            result[name] = clamped
        return result

    @staticmethod
    def _normalize_options(
        config: PricingConfig,
        requested: object,
        corrections: list[Correction],
    ) -> dict[OptionName, bool]:
        values = requested if isinstance(requested, Mapping) else {}
        declared = {name.value: name for name in config.options}

        result: dict[OptionName, bool] = {}
        for key, selected in values.items():
            name = declared.get(key)
            if name is None:
                corrections.append(
                    Correction(
                        CorrectionKind.UNKNOWN_SELECTION_IGNORED,
                        f"options.{key}",
                        "option is not declared for this product",
                    )
                )
                continue
            result[name] = selected is True
        return result

    @staticmethod
    def _normalize_color(
        config: PricingConfig,
        requested_color: object,
        corrections: list[Correction],
    ) -> str:
        if requested_color is None:
            return NO_COLOR
        if isinstance(requested_color, str):
            if is_no_color(requested_color):
                return NO_COLOR
            if config.color_options.offers(requested_color):
                return requested_color
        corrections.append(
            Correction(
                CorrectionKind.UNKNOWN_SELECTION_IGNORED,
                "color",
                f"{requested_color!r} is not offered, using {NO_COLOR!r}",
            )
        )
        return NO_COLOR
