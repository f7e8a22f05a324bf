"""Application service: Add Product use case."""

from __future__ import annotations

from woodkit.domain.exceptions import ValidationError
from woodkit.domain.model.pricing_rules import PricingConfig
from woodkit.domain.model.product import Product, ProductCategory
from woodkit.domain.repository.product_repository import ProductRepository


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        product_id: str,
        name: str,
        category: str,
        pricing: PricingConfig,
        currency: str = "NIS",
    ) -> Product:
        """Add a new product to the catalog."""
        try:
            resolved_category = ProductCategory(category)
        except ValueError:
            raise ValidationError(f"Unknown product category: '{category}'")

        product = Product.create(
            product_id=product_id,
            name=name,
            category=resolved_category,
            pricing=pricing,
            currency=currency,
        )

        if self._product_repo.get_by_id(product.id) is not None:
            raise ValidationError(f"Product '{product.id}' already exists")

        self._product_repo.save(product)
        return product
