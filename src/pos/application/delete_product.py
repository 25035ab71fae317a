"""Application service: Delete Product use case."""

from __future__ import annotations

import logging

from pos.domain.exceptions import EntityNotFoundError
from pos.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class DeleteProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str) -> None:
        product_id = product_id.strip()
        if not self._product_repo.delete(product_id):
            raise EntityNotFoundError(f"Product ID '{product_id}' not found")
        logger.info("Product deleted", extra={"extra": {"product_id": product_id}})
