"""Application service: Quote Price use case (query).

Backs the live price preview on the product page: validate the
customer's raw configuration against the product's pricing rules and
return the itemized breakdown. Nothing is persisted.
"""

from __future__ import annotations

from woodkit.application.dto import PriceQuoteDTO
from woodkit.domain.exceptions import EntityNotFoundError, InvalidProductError
from woodkit.domain.model.product import Product, normalize_product_id
from woodkit.domain.repository.product_repository import ProductRepository
from woodkit.domain.service import calculate, validate


def load_purchasable(product_repo: ProductRepository, product_id: str) -> Product:
    """Resolve a product that may be priced for a customer."""
    product = product_repo.get_by_id(normalize_product_id(product_id))
    if product is None:
        raise EntityNotFoundError(f"Product not found: '{product_id}'")
    if not product.is_active:
        raise InvalidProductError(f"Product '{product_id}' is not available")
    return product


class QuotePriceHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str, configuration: object = None) -> PriceQuoteDTO:
        product = load_purchasable(self._product_repo, product_id)

        normalized = validate(product.pricing, configuration)
        breakdown = calculate(product.pricing, normalized)

        return PriceQuoteDTO.from_breakdown(
            product_id=product.id,
            currency=product.currency,
            breakdown=breakdown,
            corrections=[c.detail for c in normalized.corrections],
        )
