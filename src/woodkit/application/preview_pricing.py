"""Application service: Preview Pricing use case (admin query).

Prices a product at its own defaults (no dimensions changed, no options,
no color), optionally against a draft base or minimum price the
administrator has not saved yet. The catalog is never modified.
"""

from __future__ import annotations

from dataclasses import replace

from woodkit.application.dto import PriceQuoteDTO
from woodkit.domain.exceptions import EntityNotFoundError
from woodkit.domain.model.product import normalize_product_id
from woodkit.domain.model.value_objects import to_decimal
from woodkit.domain.repository.product_repository import ProductRepository
from woodkit.domain.service import quote


class PreviewPricingHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        product_id: str,
        base_price: str | None = None,
        minimum_price: str | None = None,
    ) -> PriceQuoteDTO:
        product = self._product_repo.get_by_id(normalize_product_id(product_id))
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

        pricing = product.pricing
        if base_price is not None:
            pricing = replace(pricing, base_price=to_decimal(base_price))
        if minimum_price is not None:
            pricing = replace(pricing, minimum_price=to_decimal(minimum_price))
        pricing.check_invariants()

        return PriceQuoteDTO.from_breakdown(
            product_id=product.id,
            currency=product.currency,
            breakdown=quote(pricing),
        )
