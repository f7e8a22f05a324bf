"""CLI commands for pricing a configured product."""

from __future__ import annotations

import click

from woodkit.application.dto import PriceQuoteDTO
from woodkit.application.quote_price import QuotePriceHandler
from woodkit.domain.exceptions import DomainException
from woodkit.infrastructure.bootstrap import product_repository
from woodkit.infrastructure.cli.parsing import build_configuration, to_click_error


def display_quote(dto: PriceQuoteDTO) -> None:
    """Shared formatting for displaying a price breakdown."""
    click.echo(f"Product: {dto.product_id}")
    click.echo(f"  {'Base price':<20} {dto.base_price:>12}")
    click.echo(f"  {'Size adjustment':<20} {dto.size_adjustment:>12}")
    if dto.minimum_applied:
        click.echo(f"  {'Minimum price':<20} {dto.wood_price:>12}")
    for name, cost in dto.options.items():
        click.echo(f"  {name:<20} {cost:>12}")
    click.echo(f"  {'Color':<20} {dto.color_cost:>12}")
    click.echo(f"  {'-' * 33}")
    click.echo(f"  {'Total':<20} {dto.total_price:>12}")
    for note in dto.corrections:
        click.echo(f"  note: {note}")


@click.command("quote")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--dim", "dims", multiple=True, help="Dimension as 'name=value'.")
@click.option("--option", "options", multiple=True, help="Selected option name.")
@click.option("--color", default=None, help="Color value.")
def price_quote(
    product_id: str,
    dims: tuple[str, ...],
    options: tuple[str, ...],
    color: str | None,
) -> None:
    """Price a product for a given configuration."""
    handler = QuotePriceHandler(product_repo=product_repository())
    configuration = build_configuration(dims, options, color)

    try:
        dto = handler.handle(product_id, configuration)
    except DomainException as exc:
        raise to_click_error(exc)

    display_quote(dto)
