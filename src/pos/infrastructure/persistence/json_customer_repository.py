"""JSON-file-backed implementation of CustomerRepository."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pos.domain.model.customer import Customer
from pos.domain.repository.customer_repository import CustomerRepository
from pos.infrastructure.persistence.json_store import (
    ErrorReporter,
    JsonStore,
    RecordCodec,
)


class CustomerCodec(RecordCodec[Customer]):

    def to_raw(self, record: Customer) -> dict[str, Any]:
        return {"Name": record.name}

    def from_raw(self, record_id: str, raw: dict[str, Any]) -> Customer:
        return Customer(id=record_id, name=raw["Name"])


class JsonCustomerRepository(CustomerRepository):

    def __init__(self, file_path: Path, on_error: ErrorReporter | None = None) -> None:
        self._store = JsonStore(file_path, CustomerCodec(), on_error)
        self._customers = self._store.load()

    def get_by_id(self, customer_id: str) -> Customer | None:
        return self._customers.get(customer_id)

    def list_all(self) -> list[Customer]:
        return list(self._customers.values())

    def save(self, customer: Customer) -> None:
        self._customers[customer.id] = customer
        self._store.save(self._customers)
