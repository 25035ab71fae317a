"""Application service: Add Customer use case."""

from __future__ import annotations

import logging

from pos.domain.exceptions import DuplicateIdError, ValidationError
from pos.domain.model.customer import GUEST_ID, Customer
from pos.domain.repository.customer_repository import CustomerRepository

logger = logging.getLogger(__name__)


class AddCustomerHandler:

    def __init__(self, customer_repo: CustomerRepository) -> None:
        self._customer_repo = customer_repo

    def handle(self, customer_id: str, name: str) -> Customer:
        customer_id = customer_id.strip()
        if not customer_id:
            raise ValidationError("Customer ID is required")
        if customer_id.lower() == GUEST_ID:
            raise ValidationError(f"Customer ID '{customer_id}' is reserved")

        if self._customer_repo.get_by_id(customer_id) is not None:
            raise DuplicateIdError(f"Customer ID '{customer_id}' already exists")

        customer = Customer(id=customer_id, name=name.strip())
        self._customer_repo.save(customer)
        logger.info("Customer added", extra={"extra": {"customer_id": customer.id}})
        return customer
