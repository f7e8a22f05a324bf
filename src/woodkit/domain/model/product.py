"""Product aggregate.

Products live independently of orders. They have their own lifecycle:
pricing rules change, products are added to and retired from the catalog.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from woodkit.domain.exceptions import ValidationError
from woodkit.domain.model.pricing_rules import PricingConfig
from woodkit.domain.model.value_objects import SUPPORTED_CURRENCIES


def normalize_product_id(product_id: str | None) -> str:
    """Catalog ids are lower-case slugs; lookups go through the same rule."""
    return str(product_id or "").strip().lower()


class ProductCategory(Enum):
    BOOKSHELF = "bookshelf"
    STAIRS = "stairs"
    FURNITURE = "furniture"
    OUTDOOR = "outdoor"
    PET = "pet"


@dataclass
class Product:
    """A configurable kit in the catalog.

    Kept as a mutable dataclass because repricing is a legitimate
    mutation on the aggregate. The PricingConfig itself is immutable and
    is swapped as a whole.
    """

    id: str
    name: str
    category: ProductCategory
    pricing: PricingConfig
    currency: str = "NIS"
    is_active: bool = True

    @staticmethod
    def create(
        product_id: str,
        name: str,
        category: ProductCategory,
        pricing: PricingConfig,
        currency: str = "NIS",
    ) -> Product:
        """Create a new catalog entry, enforcing all invariants."""
        slug = normalize_product_id(product_id)
        if not slug:
            raise ValidationError("Product ID is required")
        if not name or not name.strip():
            raise ValidationError("Product name is required")
        if currency not in SUPPORTED_CURRENCIES:
            raise ValidationError(f"Unsupported currency: {currency}")
        pricing.check_invariants()
        return Product(
            id=slug,
            name=name.strip(),
            category=category,
            pricing=pricing,
            currency=currency,
        )

    def update_pricing(self, new_pricing: PricingConfig) -> None:
        """Replace the pricing rules.

        This does NOT affect any existing orders because each order line
        stores its own resolved price breakdown.
        """
        new_pricing.check_invariants()
        self.pricing = new_pricing

    def retire(self) -> None:
        self.is_active = False
