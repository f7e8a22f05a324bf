"""CLI commands for the Product aggregate (catalog administration)."""

from __future__ import annotations

import json
from pathlib import Path

import click

from woodkit.application.add_product import AddProductHandler
from woodkit.application.preview_pricing import PreviewPricingHandler
from woodkit.application.update_pricing import UpdatePricingHandler
from woodkit.domain.exceptions import DomainException
from woodkit.infrastructure.bootstrap import product_repository
from woodkit.infrastructure.cli.parsing import parse_pairs, to_click_error
from woodkit.infrastructure.cli.price_commands import display_quote
from woodkit.infrastructure.config import get_settings
from woodkit.infrastructure.persistence.catalog_mapping import product_from_raw


@click.command("add")
@click.option(
    "--file",
    "file_path",
    required=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="JSON product document.",
)
def product_add(file_path: Path) -> None:
    """Add a new product to the catalog."""
    try:
        raw = json.loads(file_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise click.BadParameter(f"Not valid JSON: {exc}", param_hint="--file")
    handler = AddProductHandler(product_repo=product_repository())

    try:
        parsed = product_from_raw(raw, get_settings().minimum_price_ratio)
        product = handler.handle(
            product_id=parsed.id,
            name=parsed.name,
            category=parsed.category.value,
            pricing=parsed.pricing,
            currency=parsed.currency,
        )
    except DomainException as exc:
        raise to_click_error(exc)

    click.echo(f"Product '{product.id}' added at base price {product.pricing.base_price}")


@click.command("list")
def product_list() -> None:
    """List all products in the catalog."""
    repo = product_repository()
    try:
        products = repo.list_all()
    except DomainException as exc:
        raise to_click_error(exc)

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<24} {'Category':<10} {'Base':>10} {'Minimum':>10}  Active")
    click.echo("-" * 64)
    for p in products:
        click.echo(
            f"{p.id:<24} {p.category.value:<10} {p.pricing.base_price:>10} "
            f"{p.pricing.floor:>10}  {'yes' if p.is_active else 'no'}"
        )


@click.command("reprice")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--base-price", default=None, help="New base price.")
@click.option("--minimum-price", default=None, help="New minimum price.")
@click.option("--multiplier", "multipliers", multiple=True, help="Dimension multiplier as 'name=value'.")
@click.option("--option-price", "option_prices", multiple=True, help="Option price as 'name=value'.")
@click.option("--color-modifier", default=None, help="Proportional color surcharge, e.g. 0.4.")
def product_reprice(
    product_id: str,
    base_price: str | None,
    minimum_price: str | None,
    multipliers: tuple[str, ...],
    option_prices: tuple[str, ...],
    color_modifier: str | None,
) -> None:
    """Edit a product's pricing rules."""
    handler = UpdatePricingHandler(product_repo=product_repository())

    try:
        product = handler.handle(
            product_id=product_id,
            base_price=base_price,
            minimum_price=minimum_price,
            dimension_multipliers=parse_pairs(multipliers, "--multiplier"),
            option_prices=parse_pairs(option_prices, "--option-price"),
            color_modifier=color_modifier,
        )
    except DomainException as exc:
        raise to_click_error(exc)

    click.echo(
        f"Product '{product.id}' repriced "
        f"(base {product.pricing.base_price}, minimum {product.pricing.floor})"
    )


@click.command("preview")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--base-price", default=None, help="Draft base price to try.")
@click.option("--minimum-price", default=None, help="Draft minimum price to try.")
def product_preview(
    product_id: str,
    base_price: str | None,
    minimum_price: str | None,
) -> None:
    """Preview the default-configuration price, optionally with draft prices."""
    handler = PreviewPricingHandler(product_repo=product_repository())

    try:
        dto = handler.handle(product_id, base_price=base_price, minimum_price=minimum_price)
    except DomainException as exc:
        raise to_click_error(exc)

    display_quote(dto)


@click.command("show")
@click.option("--id", "product_id", required=True, help="Product ID.")
def product_show(product_id: str) -> None:
    """Show a product's pricing rules."""
    try:
        product = product_repository().get_by_id(product_id)
    except DomainException as exc:
        raise to_click_error(exc)
    if product is None:
        raise click.ClickException(f"Product with ID '{product_id}' not found")

    pricing = product.pricing
    click.echo(f"{product.name} ({product.id}, {product.category.value})")
    click.echo(f"  Base price: {pricing.base_price} {product.currency}")
    click.echo(f"  Minimum:    {pricing.floor} {product.currency}")
    click.echo("  Dimensions:")
    for name, rule in pricing.dimensions.items():
        click.echo(
            f"    {name.value:<8} {rule.min}-{rule.max} (default {rule.default}, "
            f"x{rule.multiplier} per unit)"
        )
    if pricing.options:
        click.echo("  Options:")
        for name, option in pricing.options.items():
            status = "" if option.available else "  [unavailable]"
            click.echo(f"    {name.value:<14} +{option.price}{status}")
    if pricing.color_options.enabled:
        click.echo(f"  Colors (modifier {pricing.color_options.price_modifier}):")
        for choice in pricing.color_options.options:
            status = "" if choice.available else "  [unavailable]"
            click.echo(f"    {choice.label():<14} +{choice.price_adjustment}{status}")
