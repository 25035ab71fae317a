"""Application service: Clear Receipts use case."""

from __future__ import annotations

import logging

from pos.domain.repository.receipt_repository import ReceiptRepository

logger = logging.getLogger(__name__)


class ClearReceiptsHandler:

    def __init__(self, receipt_repo: ReceiptRepository) -> None:
        self._receipt_repo = receipt_repo

    def handle(self) -> int:
        """Empty the whole ledger; return how many receipts were removed."""
        removed = len(self._receipt_repo.list_all())
        self._receipt_repo.clear()
        logger.info("Receipts cleared", extra={"extra": {"removed": removed}})
        return removed
