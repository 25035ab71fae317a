"""Application service: customer directory queries."""

from __future__ import annotations

from pos.application.dto import CustomerDTO
from pos.domain.exceptions import EntityNotFoundError
from pos.domain.model.customer import Customer
from pos.domain.repository.customer_repository import CustomerRepository


class ListCustomersHandler:

    def __init__(self, customer_repo: CustomerRepository) -> None:
        self._customer_repo = customer_repo

    def handle(self) -> list[CustomerDTO]:
        return [
            CustomerDTO(id=c.id, name=c.name) for c in self._customer_repo.list_all()
        ]


class ResolveCustomerHandler:

    def __init__(self, customer_repo: CustomerRepository) -> None:
        self._customer_repo = customer_repo

    def handle(self, customer_id: str) -> Customer:
        customer = self._customer_repo.get_by_id(customer_id)
        if customer is None:
            raise EntityNotFoundError(f"Customer ID '{customer_id}' not found")
        return customer
