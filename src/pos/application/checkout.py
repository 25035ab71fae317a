"""Application service: Checkout use case.

A ``CheckoutSession`` is a small state machine driven one operator
input at a time:

    SELECTING_CUSTOMER -> BUILDING_CART -> FINALIZED | CANCELED

The session never prompts by itself; the CLI feeds it tokens and
displays whatever it returns. Invalid input raises a DomainException
and leaves the session in the state it was in, so the caller can
simply prompt again.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime, timezone
from enum import Enum

from pos.application.list_customers import ResolveCustomerHandler
from pos.domain.exceptions import EntityNotFoundError, ValidationError
from pos.domain.model.customer import GUEST, Customer
from pos.domain.model.product import Product
from pos.domain.model.receipt import Cart, Receipt
from pos.domain.model.value_objects import Money, Quantity
from pos.domain.repository.customer_repository import CustomerRepository
from pos.domain.repository.product_repository import ProductRepository
from pos.domain.repository.receipt_repository import ReceiptRepository

logger = logging.getLogger(__name__)

LIST_TOKEN = "list"
DONE_TOKEN = "done"
CANCEL_TOKEN = "cancel"


def is_token(raw: str, token: str) -> bool:
    return raw.strip().lower() == token


class CheckoutState(Enum):
    SELECTING_CUSTOMER = "SELECTING_CUSTOMER"
    BUILDING_CART = "BUILDING_CART"
    FINALIZED = "FINALIZED"
    CANCELED = "CANCELED"


class CheckoutSession:

    def __init__(
        self,
        product_repo: ProductRepository,
        customer_repo: CustomerRepository,
        receipt_repo: ReceiptRepository,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._product_repo = product_repo
        self._customer_repo = customer_repo
        self._receipt_repo = receipt_repo
        self._clock = clock or (lambda: datetime.now(timezone.utc))

        self.state = CheckoutState.SELECTING_CUSTOMER
        self.customer: Customer | None = None
        self.cart = Cart()
        self.receipt: Receipt | None = None

    # --- SELECTING_CUSTOMER ---------------------------------------------------

    def select_customer(self, raw: str) -> Customer:
        """Resolve the customer for this sale.

        Blank input means a walk-in guest. Callers are expected to have
        handled the ``list`` token themselves.
        """
        self._require(CheckoutState.SELECTING_CUSTOMER)

        customer_id = raw.strip()
        if not customer_id:
            customer = GUEST
        else:
            customer = ResolveCustomerHandler(self._customer_repo).handle(customer_id)

        self.customer = customer
        self.state = CheckoutState.BUILDING_CART
        return customer

    # --- BUILDING_CART --------------------------------------------------------

    def find_product(self, raw: str) -> Product:
        self._require(CheckoutState.BUILDING_CART)
        product_id = raw.strip()
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product ID '{product_id}' not found")
        return product

    def add_item(self, product_id: str, raw_quantity: str) -> int:
        """Add to the cart; return the accumulated quantity for the product."""
        self._require(CheckoutState.BUILDING_CART)
        product = self.find_product(product_id)
        quantity = Quantity.parse(raw_quantity)
        return self.cart.add(product.id, quantity)

    def cancel(self) -> None:
        self._require(CheckoutState.BUILDING_CART)
        self.cart = Cart()
        self.state = CheckoutState.CANCELED
        logger.info("Checkout canceled")

    def finalize(self) -> Receipt:
        """Price the cart at current catalog prices and record the receipt."""
        self._require(CheckoutState.BUILDING_CART)

        receipt = Receipt.create(
            receipt_id=self._receipt_repo.next_id(),
            customer=self.customer or GUEST,
            cart=self.cart,
            price_of=self._current_price,
            timestamp=self._clock(),
        )
        self._receipt_repo.save(receipt)

        self.receipt = receipt
        self.state = CheckoutState.FINALIZED
        logger.info(
            "Checkout completed",
            extra={
                "extra": {
                    "receipt_id": receipt.id,
                    "customer_id": receipt.customer_id,
                    "total": str(receipt.total.amount),
                }
            },
        )
        return receipt

    # --- Internal helpers -----------------------------------------------------

    def _current_price(self, product_id: str) -> Money:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product ID '{product_id}' not found")
        return product.price

    def _require(self, expected: CheckoutState) -> None:
        if self.state != expected:
            raise ValidationError(
                f"Checkout is {self.state.value}, expected {expected.value}"
            )
