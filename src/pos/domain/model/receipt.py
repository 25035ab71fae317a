"""Receipt aggregate and the Cart that produces it.

A Receipt is the immutable record of a completed sale. It captures the
customer's display name and the total at checkout time, so neither is
re-resolved when the receipt is later displayed.
"""

from __future__ import annotations

import time
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field
from datetime import datetime
from types import MappingProxyType

from pos.domain.exceptions import InvalidQuantityError, ValidationError
from pos.domain.model.customer import Customer
from pos.domain.model.value_objects import Money, Quantity

# Keeps line totals small enough to be stored as exact JSON numbers.
MAX_LINE_QUANTITY = 99_999


@dataclass
class Cart:
    """Product id -> accumulated quantity for one checkout session."""

    lines: dict[str, int] = field(default_factory=dict)

    def add(self, product_id: str, quantity: Quantity) -> int:
        """Add *quantity* to any existing quantity and return the new amount."""
        new_quantity = self.lines.get(product_id, 0) + quantity.value
        if new_quantity > MAX_LINE_QUANTITY:
            raise InvalidQuantityError(
                f"Quantity for '{product_id}' cannot exceed {MAX_LINE_QUANTITY}"
            )
        self.lines[product_id] = new_quantity
        return new_quantity

    def quantity_of(self, product_id: str) -> int:
        return self.lines.get(product_id, 0)

    def total(self, price_of: Callable[[str], Money]) -> Money:
        result = Money.zero()
        for product_id, qty in self.lines.items():
            result = result + price_of(product_id) * qty
        return result

    def __len__(self) -> int:
        return len(self.lines)

    def is_empty(self) -> bool:
        return not self.lines


@dataclass(frozen=True)
class Receipt:
    """Aggregate root for completed sales.

    Use ``Receipt.create()`` at checkout. The plain constructor is what
    the repository uses to reconstitute stored receipts as-is.
    """

    id: str
    customer_id: str
    customer_name: str
    items: Mapping[str, int]
    total: Money
    timestamp: datetime

    @staticmethod
    def create(
        receipt_id: str,
        customer: Customer,
        cart: Cart,
        price_of: Callable[[str], Money],
        timestamp: datetime,
    ) -> Receipt:
        """Build a receipt, pricing every line once at the current price."""
        if not receipt_id:
            raise ValidationError("Receipt ID is required")
        return Receipt(
            id=receipt_id,
            customer_id=customer.id,
            customer_name=customer.name,
            items=MappingProxyType(dict(cart.lines)),
            total=cart.total(price_of),
            timestamp=timestamp,
        )


# ---------------------------------------------------------------------------
# Identifier generation
# ---------------------------------------------------------------------------


# 100-ns ticks between 0001-01-01 and 1970-01-01
UNIX_EPOCH_TICKS = 621_355_968_000_000_000


def ticks_now() -> int:
    """Current UTC time in 100-nanosecond ticks since 0001-01-01.

    Matches the ids already present in existing receipts.json files.
    """
    return time.time_ns() // 100 + UNIX_EPOCH_TICKS


def next_receipt_id(existing_ids: Iterable[str], now_ticks: int) -> str:
    """Return a tick-based id strictly greater than every numeric existing id.

    Two checkouts within the same tick (or a clock that moved backwards)
    still get distinct, increasing ids.
    """
    highest = max((int(i) for i in existing_ids if i.isdigit()), default=0)
    return str(max(now_ticks, highest + 1))
