"""Shared parsing and error helpers for the CLI commands."""

from __future__ import annotations

import logging
from decimal import Decimal, InvalidOperation

import click

from woodkit.application.dto import ConfiguredItemSpec
from woodkit.domain.exceptions import DomainException, InvalidProductError

logger = logging.getLogger(__name__)


def parse_pairs(values: tuple[str, ...], option_name: str) -> dict[str, str]:
    """Parse ('width=90', 'height=180') into {'width': '90', 'height': '180'}."""
    result: dict[str, str] = {}
    for pair in values:
        if "=" not in pair:
            raise click.BadParameter(
                f"Invalid format '{pair}'. Expected 'name=value'.",
                param_hint=option_name,
            )
        key, value = pair.split("=", 1)
        result[key.strip()] = value.strip()
    return result


def build_configuration(
    dims: tuple[str, ...],
    options: tuple[str, ...],
    color: str | None,
) -> dict:
    """Turn CLI flags into the raw request shape the validator expects.

    Values that are not numbers are passed through untouched; the
    validator replaces them with the dimension's default.
    """
    dimensions: dict[str, object] = {}
    for key, value in parse_pairs(dims, "--dim").items():
        try:
            dimensions[key] = Decimal(value)
        except InvalidOperation:
            dimensions[key] = value
    return {
        "dimensions": dimensions,
        "options": {name.strip(): True for name in options},
        "color": color,
    }


def to_click_error(exc: DomainException) -> click.ClickException:
    if isinstance(exc, InvalidProductError):
        logger.warning("Pricing unavailable: %s", exc)
        return click.ClickException(f"Product configuration unavailable ({exc})")
    return click.ClickException(str(exc))


def parse_item(raw: str) -> ConfiguredItemSpec:
    """Parse 'bookshelf:2,width=100,lacquer,color=walnut' into a ConfiguredItemSpec.

    The first token is the product id with an optional ':quantity'. Every
    further token is a 'dimension=value' pair, 'color=value', or a bare
    option name.
    """
    tokens = [token.strip() for token in raw.split(",") if token.strip()]
    if not tokens:
        raise click.BadParameter("Empty item.", param_hint="--item")

    head = tokens[0]
    product_id, qty_str = head.rsplit(":", 1) if ":" in head else (head, "1")
    try:
        quantity = int(qty_str)
    except ValueError:
        raise click.BadParameter(
            f"Invalid quantity '{qty_str}' for product '{product_id}'.",
            param_hint="--item",
        )

    dims: list[str] = []
    options: list[str] = []
    color: str | None = None
    for token in tokens[1:]:
        if "=" not in token:
            options.append(token)
            continue
        key, value = token.split("=", 1)
        if key.strip() == "color":
            color = value.strip()
        else:
            dims.append(token)

    return ConfiguredItemSpec(
        product_id=product_id.strip(),
        configuration=build_configuration(tuple(dims), tuple(options), color),
        quantity=quantity,
    )
