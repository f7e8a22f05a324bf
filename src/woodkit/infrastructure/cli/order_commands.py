"""CLI commands for the Order aggregate."""

from __future__ import annotations

import click

from woodkit.application.cancel_order import CancelOrderHandler
from woodkit.application.confirm_order import ConfirmOrderHandler
from woodkit.application.dto import OrderDTO
from woodkit.application.list_orders import ListOrdersHandler
from woodkit.application.ship_order import ShipOrderHandler
from woodkit.application.show_order import ShowOrderHandler
from woodkit.domain.exceptions import DomainException
from woodkit.infrastructure.bootstrap import create_order_handler, order_repository
from woodkit.infrastructure.cli.parsing import parse_item, to_click_error


def _display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order #{dto.id}  (status={dto.status})")
    click.echo(f"Customer: {dto.customer_name}")
    click.echo(f"Created:  {dto.created_at}")
    click.echo()
    click.echo(f"  {'Product':<24} {'Color':<10} {'Qty':>5} {'Price':>12} {'Total':>12}")
    click.echo(f"  {'-'*67}")
    for item in dto.items:
        click.echo(
            f"  {item.product_name:<24} {item.color:<10} {item.quantity:>5} "
            f"{item.unit_price:>12} {item.line_total:>12}"
        )
        if item.options:
            click.echo(f"    + {', '.join(item.options)}")
    click.echo(f"  {'-'*67}")
    click.echo(f"  {'Subtotal':<41} {dto.subtotal:>25}")
    click.echo(f"  {'VAT':<41} {dto.tax:>25}")
    click.echo(f"  {'Order Total':<41} {dto.total:>25}")


@click.command("create")
@click.option("--customer", required=True, help="Customer name.")
@click.option("--email", required=True, help="Customer email.")
@click.option(
    "--item",
    "items",
    required=True,
    multiple=True,
    help="Item as 'product[:qty],dim=value,option,color=value'. Repeat for more items.",
)
def order_create(customer: str, email: str, items: tuple[str, ...]) -> None:
    """Create a new order from one or more configured products."""
    specs = [parse_item(raw) for raw in items]

    try:
        dto = create_order_handler().handle(
            customer_name=customer, customer_email=email, item_specs=specs
        )
    except DomainException as exc:
        raise to_click_error(exc)

    _display_order(dto)


@click.command("list")
@click.option("--status", default=None, help="Only orders in this status.")
def order_list(status: str | None) -> None:
    """List orders, newest first."""
    handler = ListOrdersHandler(order_repo=order_repository())

    try:
        orders = handler.handle(status)
    except DomainException as exc:
        raise to_click_error(exc)

    if not orders:
        click.echo("No orders found.")
        return

    click.echo(f"{'ID':>5}  {'Status':<10} {'Customer':<24} {'Items':>5} {'Total':>14}  Created")
    click.echo("-" * 82)
    for dto in orders:
        click.echo(
            f"{dto.id:>5}  {dto.status:<10} {dto.customer_name:<24} "
            f"{len(dto.items):>5} {dto.total:>14}  {dto.created_at}"
        )


@click.command("show")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to display.")
def order_show(order_id: int) -> None:
    """Show details of an existing order."""
    handler = ShowOrderHandler(order_repo=order_repository())

    try:
        dto = handler.handle(order_id)
    except DomainException as exc:
        raise to_click_error(exc)

    _display_order(dto)


@click.command("confirm")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to confirm.")
def order_confirm(order_id: int) -> None:
    """Confirm a pending order (payment received)."""
    handler = ConfirmOrderHandler(order_repo=order_repository())

    try:
        handler.handle(order_id)
    except DomainException as exc:
        raise to_click_error(exc)

    click.echo(f"Order #{order_id} confirmed.")


@click.command("cancel")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to cancel.")
def order_cancel(order_id: int) -> None:
    """Cancel a pending or confirmed order."""
    handler = CancelOrderHandler(order_repo=order_repository())

    try:
        handler.handle(order_id)
    except DomainException as exc:
        raise to_click_error(exc)

    click.echo(f"Order #{order_id} cancelled.")


@click.command("ship")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to ship.")
def order_ship(order_id: int) -> None:
    """Mark a confirmed order as shipped."""
    handler = ShipOrderHandler(order_repo=order_repository())

    try:
        handler.handle(order_id)
    except DomainException as exc:
        raise to_click_error(exc)

    click.echo(f"Order #{order_id} shipped.")
