"""Application service: List Products use case (query)."""

from __future__ import annotations

from pos.application.dto import ProductDTO
from pos.domain.repository.product_repository import ProductRepository


class ListProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self) -> list[ProductDTO]:
        return [
            ProductDTO(id=p.id, name=p.name, price=str(p.price))
            for p in self._product_repo.list_all()
        ]
