"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

import json
from decimal import Decimal
from pathlib import Path

from woodkit.domain.model.pricing_rules import DEFAULT_MINIMUM_PRICE_RATIO
from woodkit.domain.model.product import Product, normalize_product_id
from woodkit.domain.repository.product_repository import ProductRepository
from woodkit.infrastructure.persistence.catalog_mapping import (
    product_from_raw,
    product_to_raw,
)


class JsonProductRepository(ProductRepository):

    def __init__(
        self,
        file_path: Path,
        minimum_price_ratio: Decimal = DEFAULT_MINIMUM_PRICE_RATIO,
    ) -> None:
        self._file_path = file_path
        self._minimum_price_ratio = minimum_price_ratio
        self._ensure_file()

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: str) -> Product | None:
        key = normalize_product_id(product_id)
        for raw in self._load_raw():
            if normalize_product_id(raw.get("productId")) == key:
                return product_from_raw(raw, self._minimum_price_ratio)
        return None

    def list_all(self) -> list[Product]:
        return [
            product_from_raw(raw, self._minimum_price_ratio)
            for raw in self._load_raw()
        ]

    def save(self, product: Product) -> None:
        records = self._load_raw()
        replaced = False
        for i, raw in enumerate(records):
            if normalize_product_id(raw.get("productId")) == product.id:
                records[i] = product_to_raw(product)
                replaced = True
                break
        if not replaced:
            records.append(product_to_raw(product))
        self._persist_raw(records)

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist_raw(self, records: list[dict]) -> None:
        self._file_path.write_text(
            json.dumps(records, indent=2, ensure_ascii=False) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
