"""JSON-file-backed implementation of OrderRepository.

Line items are stored with their configuration and price breakdown
exactly as they were computed; loading an order never re-prices it.
"""

from __future__ import annotations

import json
from datetime import datetime
from decimal import Decimal
from pathlib import Path

from woodkit.domain.model.configuration import NormalizedConfiguration
from woodkit.domain.model.order import Order, OrderLineItem, OrderStatus
from woodkit.domain.model.price_breakdown import PriceBreakdown
from woodkit.domain.model.pricing_rules import NO_COLOR, DimensionName, OptionName
from woodkit.domain.model.value_objects import Quantity
from woodkit.domain.repository.order_repository import OrderRepository


class JsonOrderRepository(OrderRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- OrderRepository interface --------------------------------------------

    def next_id(self) -> int:
        orders = self._load_raw()
        if not orders:
            return 1
        return max(o["id"] for o in orders) + 1

    def get_by_id(self, order_id: int) -> Order | None:
        for raw in self._load_raw():
            if raw["id"] == order_id:
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[Order]:
        return [self._to_domain(raw) for raw in self._load_raw()]

    def save(self, order: Order) -> None:
        orders = self._load_raw()

        if order.id is None:
            order.id = self.next_id()

        # Upsert: replace if exists, otherwise append
        replaced = False
        for i, raw in enumerate(orders):
            if raw["id"] == order.id:
                orders[i] = self._to_raw(order)
                replaced = True
                break
        if not replaced:
            orders.append(self._to_raw(order))

        self._persist_raw(orders)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(order: Order) -> dict:
        return {
            "id": order.id,
            "customer_name": order.customer_name,
            "customer_email": order.customer_email,
            "status": order.status.value,
            "currency": order.currency,
            "tax_rate": str(order.tax_rate),
            "created_at": order.created_at.isoformat(),
            "items": [
                {
                    "product_id": item.product_id,
                    "product_name": item.product_name,
                    "quantity": item.quantity.value,
                    "currency": item.currency,
                    "configuration": _configuration_to_raw(item.configuration),
                    "pricing": item.pricing.to_dict(),
                }
                for item in order.items
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> Order:
        items = [
            OrderLineItem(
                product_id=i["product_id"],
                product_name=i["product_name"],
                configuration=_configuration_from_raw(i["configuration"]),
                pricing=PriceBreakdown.from_dict(i["pricing"]),
                quantity=Quantity(i["quantity"]),
                currency=i.get("currency", "NIS"),
            )
            for i in raw["items"]
        ]
        return Order(
            id=raw["id"],
            customer_name=raw["customer_name"],
            customer_email=raw["customer_email"],
            items=items,
            tax_rate=Decimal(raw["tax_rate"]),
            status=OrderStatus(raw["status"]),
            currency=raw.get("currency", "NIS"),
            created_at=datetime.fromisoformat(raw["created_at"]),
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist_raw(self, orders: list[dict]) -> None:
        self._file_path.write_text(
            json.dumps(orders, indent=2, ensure_ascii=False) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")


def _configuration_to_raw(configuration: NormalizedConfiguration) -> dict:
    raw = configuration.as_raw()
    raw["dimensions"] = {key: str(value) for key, value in raw["dimensions"].items()}
    return raw


def _configuration_from_raw(raw: dict) -> NormalizedConfiguration:
    # Keys no longer in the enums (e.g. a retired dimension) are kept out
    # of the domain object; the locked breakdown still carries the price.
    known_dimensions = {name.value for name in DimensionName}
    known_options = {name.value for name in OptionName}

    dimensions = {}
    for key, value in raw.get("dimensions", {}).items():
        if key in known_dimensions:
            dimensions[DimensionName(key)] = Decimal(value)
    options = {}
    for key, selected in raw.get("options", {}).items():
        if key in known_options:
            options[OptionName(key)] = selected
    return NormalizedConfiguration(
        dimensions=dimensions,
        options=options,
        color=raw.get("color", NO_COLOR),
    )
