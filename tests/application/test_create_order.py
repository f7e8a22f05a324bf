"""Integration tests for the CreateOrder use case.

Uses in-memory fake repositories, no file I/O.
"""

from decimal import Decimal

import pytest

from woodkit.application.create_order import CreateOrderHandler
from woodkit.application.dto import ConfiguredItemSpec
from woodkit.application.update_pricing import UpdatePricingHandler
from woodkit.domain.exceptions import EntityNotFoundError, InvalidProductError, ValidationError
from woodkit.domain.model.pricing_rules import DimensionName
from woodkit.domain.model.product import Product
from tests.builders import bookshelf_pricing, length_pricing, make_product, walnut_colors
from tests.fakes import FakeOrderRepository, FakeProductRepository


def _setup(
    products: list[Product] | None = None,
) -> tuple[CreateOrderHandler, FakeOrderRepository, FakeProductRepository]:
    """Build handler with fake repos, optionally pre-loaded with products."""
    if products is None:
        products = [
            make_product("stairs", "Stairs", length_pricing(colors=walnut_colors())),
            make_product("bookshelf", "Bookshelf", bookshelf_pricing()),
            make_product("old-bench", "Old Bench", is_active=False),
        ]
    order_repo = FakeOrderRepository()
    product_repo = FakeProductRepository(products)
    handler = CreateOrderHandler(order_repo, product_repo)
    return handler, order_repo, product_repo


def _stairs(length=150, quantity=1, **extra) -> ConfiguredItemSpec:
    return ConfiguredItemSpec(
        "stairs", {"dimensions": {"length": length}, **extra}, quantity
    )


class TestCreateOrderHappyPath:

    def test_creates_order_with_correct_totals(self):
        handler, _, _ = _setup()
        dto = handler.handle("Dana", "dana@example.com", [
            _stairs(150, 2),
            ConfiguredItemSpec("bookshelf", {"options": {"lacquer": True}}),
        ])
        # 2 x 150 + (450 + 80) = 830; VAT 17% = 141.10
        assert dto.subtotal == "₪830.00"
        assert dto.tax == "₪141.10"
        assert dto.total == "₪971.10"
        assert dto.status == "PENDING"
        assert len(dto.items) == 2
        assert dto.items[1].options == ["lacquer"]

    def test_assigns_sequential_ids(self):
        handler, _, _ = _setup()
        dto1 = handler.handle("Dana", "dana@example.com", [_stairs()])
        dto2 = handler.handle("Noa", "noa@example.com", [_stairs()])
        assert dto1.id == 1
        assert dto2.id == 2

    def test_persists_normalized_configuration(self):
        handler, order_repo, _ = _setup()
        dto = handler.handle("Dana", "dana@example.com", [
            _stairs(500, color="teal"),
        ])
        saved = order_repo.get_by_id(dto.id)
        line = saved.items[0]
        assert line.configuration.dimensions[DimensionName.LENGTH] == Decimal("200")
        assert line.configuration.color == "natural"
        assert line.pricing.total_price == Decimal("200.00")

    def test_custom_tax_rate(self):
        order_repo = FakeOrderRepository()
        product_repo = FakeProductRepository([make_product("stairs", "Stairs")])
        handler = CreateOrderHandler(order_repo, product_repo, tax_rate=Decimal("0"))
        dto = handler.handle("Dana", "dana@example.com", [_stairs()])
        assert dto.total == "₪150.00"


class TestCreateOrderPriceLock:

    def test_price_snapshot_at_creation(self):
        handler, order_repo, product_repo = _setup()
        dto = handler.handle("Dana", "dana@example.com", [_stairs()])
        assert dto.subtotal == "₪150.00"

        UpdatePricingHandler(product_repo).handle(
            "stairs", base_price="300", dimension_multipliers={"length": "3"}
        )

        saved = order_repo.get_by_id(dto.id)
        assert str(saved.subtotal) == "₪150.00"
        assert saved.items[0].pricing.base_price == Decimal("100.00")


class TestCreateOrderValidation:

    def test_unknown_product(self):
        handler, _, _ = _setup()
        with pytest.raises(EntityNotFoundError, match="table"):
            handler.handle("Dana", "dana@example.com", [ConfiguredItemSpec("table")])

    def test_retired_product(self):
        handler, _, _ = _setup()
        with pytest.raises(InvalidProductError):
            handler.handle("Dana", "dana@example.com", [ConfiguredItemSpec("old-bench")])

    def test_empty_order(self):
        handler, _, _ = _setup()
        with pytest.raises(ValidationError, match="at least one item"):
            handler.handle("Dana", "dana@example.com", [])

    def test_zero_quantity(self):
        handler, order_repo, _ = _setup()
        with pytest.raises(ValidationError, match="must be positive"):
            handler.handle("Dana", "dana@example.com", [_stairs(quantity=0)])
        assert order_repo.get_by_id(1) is None
