"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pos.domain.model.product import Product
from pos.domain.model.value_objects import Money
from pos.domain.repository.product_repository import ProductRepository
from pos.infrastructure.persistence.json_store import (
    ErrorReporter,
    JsonStore,
    RecordCodec,
)


class ProductCodec(RecordCodec[Product]):

    def to_raw(self, record: Product) -> dict[str, Any]:
        return {"Name": record.name, "Price": float(record.price.amount)}

    def from_raw(self, record_id: str, raw: dict[str, Any]) -> Product:
        return Product(id=record_id, name=raw["Name"], price=Money.of(raw["Price"]))


class JsonProductRepository(ProductRepository):
    """Keeps the catalog in memory and rewrites the file on every change."""

    def __init__(self, file_path: Path, on_error: ErrorReporter | None = None) -> None:
        self._store = JsonStore(file_path, ProductCodec(), on_error)
        self._products = self._store.load()

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: str) -> Product | None:
        return self._products.get(product_id)

    def list_all(self) -> list[Product]:
        return list(self._products.values())

    def save(self, product: Product) -> None:
        self._products[product.id] = product
        self._store.save(self._products)

    def delete(self, product_id: str) -> bool:
        if self._products.pop(product_id, None) is None:
            return False
        self._store.save(self._products)
        return True
