"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from dataclasses import dataclass

from pos.domain.repository.customer_repository import CustomerRepository
from pos.domain.repository.product_repository import ProductRepository
from pos.domain.repository.receipt_repository import ReceiptRepository
from pos.infrastructure.config import Settings
from pos.infrastructure.persistence.json_customer_repository import (
    JsonCustomerRepository,
)
from pos.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from pos.infrastructure.persistence.json_receipt_repository import (
    JsonReceiptRepository,
)
from pos.infrastructure.persistence.json_store import ErrorReporter


@dataclass
class AppState:
    """Everything one POS session works with.

    Built once at startup and handed to each menu command; each
    repository owns its mapping for the lifetime of the session.
    """

    products: ProductRepository
    customers: CustomerRepository
    receipts: ReceiptRepository


def build_app(settings: Settings, on_error: ErrorReporter | None = None) -> AppState:
    return AppState(
        products=JsonProductRepository(settings.products_path, on_error),
        customers=JsonCustomerRepository(settings.customers_path, on_error),
        receipts=JsonReceiptRepository(settings.receipts_path, on_error),
    )
