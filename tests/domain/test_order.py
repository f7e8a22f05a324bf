"""Unit tests for the Order aggregate."""

from decimal import Decimal

import pytest

from woodkit.domain.exceptions import ValidationError
from woodkit.domain.model.order import MAX_LINE_ITEMS, Order, OrderLineItem, OrderStatus
from woodkit.domain.model.value_objects import Money, Quantity
from woodkit.domain.service import quote, validate
from tests.builders import length_pricing


def _line(length: int = 150, qty: int = 1, currency: str = "NIS") -> OrderLineItem:
    config = length_pricing()
    raw = {"dimensions": {"length": length}}
    return OrderLineItem(
        product_id="shelf",
        product_name="Shelf",
        configuration=validate(config, raw),
        pricing=quote(config, raw),
        quantity=Quantity(qty),
        currency=currency,
    )


def _make_order(**overrides) -> Order:
    params = {
        "customer_name": "Dana",
        "customer_email": "Dana@Example.com",
        "items": [_line(150, 2)],
    }
    params.update(overrides)
    return Order.create(**params)


# ── Creation ─────────────────────────────────────────────────────────────────


class TestOrderCreation:

    def test_create_order(self):
        order = _make_order()
        assert order.id is None
        assert order.status == OrderStatus.PENDING
        assert order.customer_email == "dana@example.com"
        assert order.tax_rate == Decimal("0.17")

    def test_empty_name_rejected(self):
        with pytest.raises(ValidationError, match="Customer name is required"):
            _make_order(customer_name="   ")

    def test_invalid_email_rejected(self):
        with pytest.raises(ValidationError, match="valid customer email"):
            _make_order(customer_email="dana")

    def test_no_items_rejected(self):
        with pytest.raises(ValidationError, match="at least one item"):
            _make_order(items=[])

    def test_too_many_items_rejected(self):
        with pytest.raises(ValidationError, match=f"Maximum {MAX_LINE_ITEMS}"):
            _make_order(items=[_line() for _ in range(MAX_LINE_ITEMS + 1)])

    def test_tax_rate_out_of_range_rejected(self):
        with pytest.raises(ValidationError, match="Tax rate"):
            _make_order(tax_rate=Decimal("1.5"))

    def test_mixed_currency_rejected(self):
        with pytest.raises(ValidationError, match="Cannot mix"):
            _make_order(items=[_line(currency="USD")])


# ── Totals ───────────────────────────────────────────────────────────────────


class TestOrderTotals:

    def test_line_prices(self):
        item = _line(150, 2)
        assert item.unit_price == Money.of("150")
        assert item.line_total == Money.of("300")

    def test_subtotal_tax_total(self):
        order = _make_order(items=[_line(150, 2), _line(100, 1)])
        assert order.subtotal == Money.of("400")
        assert order.tax == Money.of("68.00")
        assert order.total == Money.of("468.00")

    def test_zero_tax_rate(self):
        order = _make_order(tax_rate=Decimal("0"))
        assert order.total == Money.of("300")


# ── Status transitions ───────────────────────────────────────────────────────


class TestOrderTransitions:

    def test_confirm(self):
        order = _make_order()
        order.confirm()
        assert order.status == OrderStatus.CONFIRMED

    def test_confirm_twice_rejected(self):
        order = _make_order()
        order.confirm()
        with pytest.raises(ValidationError, match="expected PENDING"):
            order.confirm()

    def test_ship_requires_confirmation(self):
        order = _make_order()
        with pytest.raises(ValidationError, match="Cannot ship order in PENDING"):
            order.ship()
        order.confirm()
        order.ship()
        assert order.status == OrderStatus.SHIPPED

    def test_cancel_pending_and_confirmed(self):
        pending = _make_order()
        pending.cancel()
        assert pending.status == OrderStatus.CANCELLED

        confirmed = _make_order()
        confirmed.confirm()
        confirmed.cancel()
        assert confirmed.status == OrderStatus.CANCELLED

    def test_cancel_twice_rejected(self):
        order = _make_order()
        order.cancel()
        with pytest.raises(ValidationError, match="already cancelled"):
            order.cancel()

    def test_cancel_shipped_rejected(self):
        order = _make_order()
        order.confirm()
        order.ship()
        with pytest.raises(ValidationError, match="SHIPPED"):
            order.cancel()
