"""Mapping between catalog JSON documents and the pricing domain model.

This is the catalog-loading boundary. Everything the engine receives has
been migrated to the current shape and checked against the catalog
invariants here, so the calculator never has to second-guess its input.

Legacy shapes still found in older catalogs:

* ``length``/``width``/``height`` products predate the
  ``width``/``height``/``depth`` layout. When a product declares
  ``length`` but no ``depth``, ``width`` becomes ``depth`` and
  ``length`` becomes ``width``.
* dimension rules carrying ``priceModifier`` instead of ``multiplier``.
* ``colorOptions.options`` as a plain list of color names.
* products without ``minimumPrice``; the floor is then a configurable
  share of the base price, in whole currency units.

Unknown dimension and option keys are logged and dropped.
"""

from __future__ import annotations

import logging
from decimal import Decimal

from woodkit.domain.exceptions import InvalidProductError, ValidationError
from woodkit.domain.model.pricing_rules import (
    DEFAULT_MINIMUM_PRICE_RATIO,
    NO_COLOR,
    ColorChoice,
    ColorRule,
    DimensionName,
    DimensionRule,
    OptionName,
    OptionRule,
    PricingConfig,
    is_no_color,
)
from woodkit.domain.model.product import Product, ProductCategory, normalize_product_id
from woodkit.domain.model.value_objects import ZERO, round_whole, to_decimal

logger = logging.getLogger(__name__)


# --- Pricing ------------------------------------------------------------------


def pricing_from_raw(
    raw: dict,
    minimum_price_ratio: Decimal = DEFAULT_MINIMUM_PRICE_RATIO,
    source: str = "product",
) -> PricingConfig:
    """Build a PricingConfig from a catalog document, migrating legacy fields.

    Raises InvalidProductError when ``basePrice`` or ``dimensions`` is
    missing and ValidationError when the result breaks a catalog invariant.
    """
    if not isinstance(raw, dict):
        raise InvalidProductError(f"{source}: pricing document must be an object")
    if raw.get("basePrice") is None:
        raise InvalidProductError(f"{source}: missing basePrice")
    if not isinstance(raw.get("dimensions"), dict):
        raise InvalidProductError(f"{source}: missing dimensions")

    base_price = to_decimal(raw["basePrice"])
    minimum_raw = raw.get("minimumPrice")
    if minimum_raw is None:
        minimum_price = round_whole(base_price * minimum_price_ratio)
        logger.info("%s: minimumPrice unset, using %s", source, minimum_price)
    else:
        minimum_price = to_decimal(minimum_raw)

    config = PricingConfig(
        base_price=base_price,
        minimum_price=minimum_price,
        dimensions=_dimensions_from_raw(raw["dimensions"], source),
        options=_options_from_raw(raw.get("options") or {}, source),
        color_options=_colors_from_raw(raw.get("colorOptions"), source),
    )
    config.check_invariants()
    return config


def pricing_to_raw(config: PricingConfig) -> dict:
    return {
        "basePrice": str(config.base_price),
        "minimumPrice": str(config.floor),
        "dimensions": {
            name.value: {
                "min": str(rule.min),
                "max": str(rule.max),
                "default": str(rule.default),
                "step": str(rule.step),
                "multiplier": str(rule.multiplier),
                "visible": rule.visible,
                "editable": rule.editable,
            }
            for name, rule in config.dimensions.items()
        },
        "options": {
            name.value: {"available": rule.available, "price": str(rule.price)}
            for name, rule in config.options.items()
        },
        "colorOptions": {
            "enabled": config.color_options.enabled,
            "priceModifier": str(config.color_options.price_modifier),
            "options": [
                {
                    "value": choice.value,
                    "name": dict(choice.name),
                    "priceAdjustment": str(choice.price_adjustment),
                    "available": choice.available,
                }
                for choice in config.color_options.options
            ],
        },
    }


# --- Product ------------------------------------------------------------------


def product_from_raw(
    raw: dict,
    minimum_price_ratio: Decimal = DEFAULT_MINIMUM_PRICE_RATIO,
) -> Product:
    if not isinstance(raw, dict):
        raise ValidationError("Catalog entry must be an object")
    product_id = normalize_product_id(raw.get("productId"))
    if not product_id:
        raise ValidationError("Catalog entry without productId")
    try:
        category = ProductCategory(raw.get("category", "furniture"))
    except ValueError:
        raise ValidationError(f"{product_id}: unknown category {raw.get('category')!r}")

    return Product(
        id=product_id,
        name=_display_name(raw.get("name"), product_id),
        category=category,
        pricing=pricing_from_raw(raw, minimum_price_ratio, source=product_id),
        currency=raw.get("currency", "NIS"),
        is_active=raw.get("isActive", True),
    )


def product_to_raw(product: Product) -> dict:
    return {
        "productId": product.id,
        "name": product.name,
        "category": product.category.value,
        "currency": product.currency,
        "isActive": product.is_active,
        **pricing_to_raw(product.pricing),
    }


# --- Internal helpers -----------------------------------------------------------


def _display_name(raw_name: object, fallback: str) -> str:
    # Older documents hold {"en": ..., "he": ..., "es": ...}
    if isinstance(raw_name, dict):
        return raw_name.get("en") or next(iter(raw_name.values()), fallback)
    return raw_name or fallback


def _migrate_dimension_keys(raw_dims: dict, source: str) -> dict:
    if "length" not in raw_dims or "depth" in raw_dims:
        return raw_dims
    migrated = dict(raw_dims)
    if "width" in migrated:
        migrated["depth"] = migrated.pop("width")
    migrated["width"] = migrated.pop("length")
    logger.info("%s: migrated legacy length/width dimensions to width/depth", source)
    return migrated


def _dimensions_from_raw(raw_dims: dict, source: str) -> dict[DimensionName, DimensionRule]:
    result: dict[DimensionName, DimensionRule] = {}
    for key, rule in _migrate_dimension_keys(raw_dims, source).items():
        try:
            name = DimensionName(key)
        except ValueError:
            logger.warning("%s: dropping unknown dimension %r", source, key)
            continue
        if not isinstance(rule, dict):
            raise ValidationError(f"{source}: dimension {key!r} must be an object")
        multiplier = rule.get("multiplier", rule.get("priceModifier"))
        try:
            result[name] = DimensionRule(
                min=to_decimal(rule["min"]),
                max=to_decimal(rule["max"]),
                default=to_decimal(rule["default"]),
                multiplier=to_decimal(multiplier if multiplier is not None else 0),
                step=to_decimal(rule.get("step", 1)),
                visible=rule.get("visible", True),
                editable=rule.get("editable", True),
            )
        except KeyError as exc:
            raise ValidationError(f"{source}: dimension {key!r} is missing {exc.args[0]}")
    return result


def _options_from_raw(raw_options: dict, source: str) -> dict[OptionName, OptionRule]:
    result: dict[OptionName, OptionRule] = {}
    for key, rule in raw_options.items():
        try:
            name = OptionName(key)
        except ValueError:
            logger.warning("%s: dropping unknown option %r", source, key)
            continue
        result[name] = OptionRule(
            available=rule.get("available", True),
            price=to_decimal(rule.get("price", 0)),
        )
    return result


def _colors_from_raw(raw_colors: object, source: str) -> ColorRule:
    if not isinstance(raw_colors, dict):
        return ColorRule()

    choices: list[ColorChoice] = []
    for entry in raw_colors.get("options") or []:
        if isinstance(entry, str):
            value = NO_COLOR if is_no_color(entry) else entry
            choices.append(ColorChoice(value=value, name={"he": entry}))
            continue
        if not isinstance(entry, dict) or not entry.get("value"):
            logger.warning("%s: dropping malformed color entry %r", source, entry)
            continue
        name = entry.get("name")
        choices.append(
            ColorChoice(
                value=NO_COLOR if is_no_color(entry["value"]) else entry["value"],
                price_adjustment=to_decimal(entry.get("priceAdjustment", 0)),
                available=entry.get("available", True),
                name=dict(name) if isinstance(name, dict) else {"en": name or entry["value"]},
            )
        )

    return ColorRule(
        enabled=raw_colors.get("enabled", False),
        price_modifier=to_decimal(raw_colors.get("priceModifier", ZERO)),
        options=tuple(choices),
    )
