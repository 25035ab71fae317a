"""Application service: Add Product use case."""

from __future__ import annotations

import logging

from pos.domain.exceptions import DuplicateIdError, ValidationError
from pos.domain.model.product import Product, parse_price
from pos.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str, name: str, price: str) -> Product:
        """Add a new product to the catalog under a caller-chosen ID."""
        product_id = product_id.strip()
        if not product_id:
            raise ValidationError("Product ID is required")

        if self._product_repo.get_by_id(product_id) is not None:
            raise DuplicateIdError(f"Product ID '{product_id}' already exists")

        product = Product(id=product_id, name=name.strip(), price=parse_price(price))
        self._product_repo.save(product)
        logger.info("Product added", extra={"extra": {"product_id": product.id}})
        return product
