"""JSON-file-backed implementation of ReceiptRepository."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
from pathlib import Path
from types import MappingProxyType
from typing import Any

from pos.domain.model.receipt import Receipt, next_receipt_id, ticks_now
from pos.domain.model.value_objects import Money
from pos.domain.repository.receipt_repository import ReceiptRepository
from pos.infrastructure.persistence.json_store import (
    ErrorReporter,
    JsonStore,
    RecordCodec,
)


class ReceiptCodec(RecordCodec[Receipt]):

    def to_raw(self, record: Receipt) -> dict[str, Any]:
        return {
            "CustomerId": record.customer_id,
            "CustomerName": record.customer_name,
            "Items": dict(record.items),
            "Total": float(record.total.amount),
            "Timestamp": record.timestamp.isoformat(),
        }

    def from_raw(self, record_id: str, raw: dict[str, Any]) -> Receipt:
        items = {str(pid): int(qty) for pid, qty in raw["Items"].items()}
        return Receipt(
            id=record_id,
            customer_id=raw["CustomerId"],
            customer_name=raw["CustomerName"],
            items=MappingProxyType(items),
            total=Money.of(raw["Total"]),
            timestamp=datetime.fromisoformat(raw["Timestamp"]),
        )


class JsonReceiptRepository(ReceiptRepository):

    def __init__(
        self,
        file_path: Path,
        on_error: ErrorReporter | None = None,
        ticks: Callable[[], int] = ticks_now,
    ) -> None:
        self._store = JsonStore(file_path, ReceiptCodec(), on_error)
        self._receipts = self._store.load()
        self._ticks = ticks
        self._last_issued = "0"

    # --- ReceiptRepository interface ------------------------------------------

    def next_id(self) -> str:
        # Ids issued earlier in this run count too, even after a clear.
        self._last_issued = next_receipt_id(
            [*self._receipts, self._last_issued], self._ticks()
        )
        return self._last_issued

    def get_by_id(self, receipt_id: str) -> Receipt | None:
        return self._receipts.get(receipt_id)

    def list_all(self) -> list[Receipt]:
        return list(self._receipts.values())

    def save(self, receipt: Receipt) -> None:
        self._receipts[receipt.id] = receipt
        self._store.save(self._receipts)

    def clear(self) -> None:
        self._receipts.clear()
        self._store.save(self._receipts)
