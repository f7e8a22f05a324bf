"""Tests for environment-driven settings and the bootstrap wiring."""

from decimal import Decimal
from pathlib import Path

import pytest
from pydantic import ValidationError

from woodkit.infrastructure import bootstrap
from woodkit.infrastructure.config import Settings, get_settings


@pytest.fixture(autouse=True)
def _fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class TestSettings:

    def test_defaults(self, monkeypatch):
        for name in ("DATA_DIR", "TAX_RATE", "CURRENCY", "MINIMUM_PRICE_RATIO", "LOG_LEVEL"):
            monkeypatch.delenv(f"WOODKIT_{name}", raising=False)
        settings = Settings(_env_file=None)
        assert settings.data_dir == Path("data")
        assert settings.tax_rate == Decimal("0.17")
        assert settings.minimum_price_ratio == Decimal("0.8")
        assert settings.currency == "NIS"

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("WOODKIT_TAX_RATE", "0.18")
        monkeypatch.setenv("WOODKIT_CURRENCY", "EUR")
        settings = get_settings()
        assert settings.tax_rate == Decimal("0.18")
        assert settings.currency == "EUR"

    def test_tax_rate_out_of_range(self, monkeypatch):
        monkeypatch.setenv("WOODKIT_TAX_RATE", "1.7")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)


class TestBootstrap:

    def test_repositories_use_data_dir(self, monkeypatch, tmp_path):
        monkeypatch.setenv("WOODKIT_DATA_DIR", str(tmp_path))
        bootstrap.product_repository()
        bootstrap.order_repository()
        assert (tmp_path / "products.json").exists()
        assert (tmp_path / "orders.json").exists()

    def test_create_order_handler_uses_settings(self, monkeypatch, tmp_path):
        monkeypatch.setenv("WOODKIT_DATA_DIR", str(tmp_path))
        monkeypatch.setenv("WOODKIT_TAX_RATE", "0")
        handler = bootstrap.create_order_handler()
        assert handler._tax_rate == Decimal("0")
