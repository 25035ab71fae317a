"""Abstract repository for the Receipt ledger."""

from __future__ import annotations

from abc import ABC, abstractmethod

from pos.domain.model.receipt import Receipt


class ReceiptRepository(ABC):

    @abstractmethod
    def next_id(self) -> str:
        """Generate the next unique, increasing receipt ID."""

    @abstractmethod
    def get_by_id(self, receipt_id: str) -> Receipt | None:
        """Return a receipt by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Receipt]:
        """Return every receipt in the ledger."""

    @abstractmethod
    def save(self, receipt: Receipt) -> None:
        """Append a receipt to the ledger."""

    @abstractmethod
    def clear(self) -> None:
        """Remove every receipt from the ledger."""
