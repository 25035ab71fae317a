"""Application service: Update Product use case."""

from __future__ import annotations

import logging

from pos.domain.exceptions import EntityNotFoundError
from pos.domain.model.product import Product, parse_price
from pos.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class UpdateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def get(self, product_id: str) -> Product:
        """Look up the product so the CLI can show its current values."""
        product = self._product_repo.get_by_id(product_id.strip())
        if product is None:
            raise EntityNotFoundError(f"Product ID '{product_id}' not found")
        return product

    def handle(
        self,
        product_id: str,
        new_name: str | None = None,
        new_price: str | None = None,
    ) -> bool:
        """Update a product's name and/or price.

        Blank or missing values keep the current field. The price is
        validated before anything is mutated, so an invalid price leaves
        the product untouched. Any successful change is persisted, a
        name-only edit included. Returns True if something changed.

        Existing receipts are unaffected: they stored their total at
        checkout time.
        """
        product = self.get(product_id)

        price = parse_price(new_price) if new_price and new_price.strip() else None
        changed = False

        if new_name and new_name.strip():
            product.rename(new_name)
            changed = True

        if price is not None:
            product.update_price(price)
            changed = True

        if changed:
            self._product_repo.save(product)
            logger.info("Product updated", extra={"extra": {"product_id": product.id}})
        return changed
