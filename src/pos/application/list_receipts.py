"""Application service: List Receipts use case (query).

Receipt lines are resolved against the *current* catalog for display.
A product deleted since the sale still shows up, under a placeholder
name, so the ledger is never silently incomplete.
"""

from __future__ import annotations

import logging

from pos.application.dto import ReceiptDTO, ReceiptLineDTO
from pos.domain.model.receipt import Receipt
from pos.domain.repository.product_repository import ProductRepository
from pos.domain.repository.receipt_repository import ReceiptRepository

logger = logging.getLogger(__name__)


def deleted_product_placeholder(product_id: str) -> str:
    return f"<deleted product {product_id}>"


class ListReceiptsHandler:

    def __init__(
        self,
        receipt_repo: ReceiptRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._receipt_repo = receipt_repo
        self._product_repo = product_repo

    def handle(self) -> list[ReceiptDTO]:
        return [self._to_dto(r) for r in self._receipt_repo.list_all()]

    def _to_dto(self, receipt: Receipt) -> ReceiptDTO:
        return ReceiptDTO(
            id=receipt.id,
            customer_id=receipt.customer_id,
            customer_name=receipt.customer_name,
            lines=[
                self._resolve_line(receipt.id, product_id, qty)
                for product_id, qty in receipt.items.items()
            ],
            total=str(receipt.total),
            timestamp=receipt.timestamp.isoformat(sep=" ", timespec="seconds"),
        )

    def _resolve_line(self, receipt_id: str, product_id: str, qty: int) -> ReceiptLineDTO:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            logger.warning(
                "Receipt references a deleted product",
                extra={"extra": {"receipt_id": receipt_id, "product_id": product_id}},
            )
            return ReceiptLineDTO(
                product_id=product_id,
                product_name=deleted_product_placeholder(product_id),
                quantity=qty,
                missing=True,
            )
        return ReceiptLineDTO(product_id=product_id, product_name=product.name, quantity=qty)
