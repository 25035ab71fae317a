"""Abstract repository for Customer entities."""

from __future__ import annotations

from abc import ABC, abstractmethod

from pos.domain.model.customer import Customer


class CustomerRepository(ABC):

    @abstractmethod
    def get_by_id(self, customer_id: str) -> Customer | None:
        """Return a customer by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Customer]:
        """Return every registered customer."""

    @abstractmethod
    def save(self, customer: Customer) -> None:
        """Persist a new customer."""
