"""Unit tests for the ConfigurationValidator domain service."""

from decimal import Decimal

import pytest

from woodkit.domain.exceptions import InvalidProductError
from woodkit.domain.model.configuration import CorrectionKind
from woodkit.domain.model.pricing_rules import NO_COLOR, DimensionName, OptionName
from woodkit.domain.service import validate
from woodkit.domain.service.configuration_validator import ConfigurationValidator
from tests.builders import bookshelf_pricing, length_pricing, walnut_colors


def _kinds(normalized) -> list[CorrectionKind]:
    return [c.kind for c in normalized.corrections]


# ── Dimensions ───────────────────────────────────────────────────────────────


class TestDimensions:

    def test_missing_values_use_defaults(self):
        normalized = validate(bookshelf_pricing(), {})
        assert normalized.dimensions == {
            DimensionName.WIDTH: Decimal("80"),
            DimensionName.HEIGHT: Decimal("180"),
            DimensionName.DEPTH: Decimal("30"),
        }
        assert normalized.corrections == ()

    def test_in_range_value_kept(self):
        normalized = validate(length_pricing(), {"dimensions": {"length": 150}})
        assert normalized.dimensions[DimensionName.LENGTH] == Decimal("150")
        assert normalized.corrections == ()

    def test_below_min_clamped(self):
        normalized = validate(length_pricing(), {"dimensions": {"length": 10}})
        assert normalized.dimensions[DimensionName.LENGTH] == Decimal("50")
        assert _kinds(normalized) == [CorrectionKind.OUT_OF_RANGE_INPUT]

    def test_above_max_clamped(self):
        normalized = validate(length_pricing(), {"dimensions": {"length": 999.5}})
        assert normalized.dimensions[DimensionName.LENGTH] == Decimal("200")

    @pytest.mark.parametrize("value", ["150", None, True, float("nan"), [150]])
    def test_non_numeric_falls_back_to_default(self, value):
        normalized = validate(length_pricing(), {"dimensions": {"length": value}})
        assert normalized.dimensions[DimensionName.LENGTH] == Decimal("100")
        assert _kinds(normalized) == [CorrectionKind.NON_NUMERIC_INPUT]

    def test_undeclared_dimension_ignored(self):
        normalized = validate(length_pricing(), {"dimensions": {"steps": 4}})
        assert DimensionName.STEPS not in normalized.dimensions
        assert normalized.corrections[0].field == "dimensions.steps"
        assert _kinds(normalized) == [CorrectionKind.UNKNOWN_SELECTION_IGNORED]

    def test_float_value_converted_without_noise(self):
        normalized = validate(length_pricing(), {"dimensions": {"length": 100.1}})
        assert normalized.dimensions[DimensionName.LENGTH] == Decimal("100.1")

    def test_step_is_not_enforced(self):
        normalized = validate(length_pricing(), {"dimensions": {"length": 101.37}})
        assert normalized.dimensions[DimensionName.LENGTH] == Decimal("101.37")


# ── Options ──────────────────────────────────────────────────────────────────


class TestOptions:

    def test_declared_option_selected(self):
        normalized = validate(length_pricing(), {"options": {"lacquer": True}})
        assert normalized.options == {OptionName.LACQUER: True}
        assert normalized.selected_options == [OptionName.LACQUER]

    def test_unknown_option_dropped(self):
        normalized = validate(length_pricing(), {"options": {"handrail": True, "gold": True}})
        assert normalized.options == {}
        assert len(normalized.corrections) == 2

    def test_truthy_non_bool_is_not_selected(self):
        normalized = validate(length_pricing(), {"options": {"lacquer": "yes"}})
        assert normalized.options == {OptionName.LACQUER: False}
        assert normalized.selected_options == []

    def test_non_mapping_options_ignored(self):
        normalized = validate(length_pricing(), {"options": ["lacquer"]})
        assert normalized.options == {}


# ── Color ────────────────────────────────────────────────────────────────────


class TestColor:

    def _config(self):
        return length_pricing(colors=walnut_colors())

    def test_missing_color_is_natural(self):
        assert validate(self._config(), {}).color == NO_COLOR

    def test_offered_color_kept(self):
        assert validate(self._config(), {"color": "walnut"}).color == "walnut"

    def test_legacy_alias_maps_to_sentinel(self):
        normalized = validate(self._config(), {"color": "ללא צבע"})
        assert normalized.color == NO_COLOR
        assert normalized.corrections == ()

    @pytest.mark.parametrize("color", ["teal", "ebony", 7, ["walnut"]])
    def test_unknown_or_unavailable_color_replaced(self, color):
        normalized = validate(self._config(), {"color": color})
        assert normalized.color == NO_COLOR
        assert _kinds(normalized) == [CorrectionKind.UNKNOWN_SELECTION_IGNORED]


# ── Whole request ────────────────────────────────────────────────────────────


class TestValidate:

    @pytest.mark.parametrize("requested", [None, "garbage", 42, []])
    def test_non_mapping_request_treated_as_empty(self, requested):
        normalized = validate(length_pricing(), requested)
        assert normalized.dimensions == {DimensionName.LENGTH: Decimal("100")}
        assert normalized.options == {}
        assert normalized.color == NO_COLOR

    def test_validation_is_idempotent(self):
        config = length_pricing(colors=walnut_colors())
        raw = {
            "dimensions": {"length": 500},
            "options": {"lacquer": True, "gold": True},
            "color": "walnut",
        }
        first = validate(config, raw)
        second = validate(config, first.as_raw())
        assert second.dimensions == first.dimensions
        assert second.options == first.options
        assert second.color == first.color
        assert second.corrections == ()

    def test_incomplete_config_raises(self):
        with pytest.raises(InvalidProductError):
            validate(None, {})

    def test_per_part_operations(self):
        validator = ConfigurationValidator()
        config = length_pricing(colors=walnut_colors())
        assert validator.normalize_dimensions(config, {"length": 10}) == {
            DimensionName.LENGTH: Decimal("50"),
        }
        assert validator.normalize_options(config, {"lacquer": True}) == {
            OptionName.LACQUER: True,
        }
        assert validator.normalize_color(config, "teal") == NO_COLOR
