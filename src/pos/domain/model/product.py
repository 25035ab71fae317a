"""Product aggregate.

Products live independently of receipts. They have their own lifecycle:
prices change, products are added to and removed from the catalog.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from pos.domain.exceptions import InvalidPriceError, ValidationError
from pos.domain.model.value_objects import Money

CENT = Decimal("0.01")

# Prices are stored as JSON numbers; whole cents up to this bound
# survive the float conversion exactly.
MAX_PRICE = Decimal("9999999.99")


def parse_price(raw: str) -> Money:
    """Turn operator input into a price.

    Accepts whole cents from ``0`` to ``MAX_PRICE``. Anything else, such
    as ``1e400`` or ``0.123``, raises ``InvalidPriceError``.
    """
    try:
        price = Money.of(raw)
    except ValidationError as exc:
        raise InvalidPriceError(f"Invalid price input: {raw!r}") from exc
    if price.amount > MAX_PRICE:
        raise InvalidPriceError(f"Price {raw!r} exceeds {Money(MAX_PRICE)}")
    if price.amount != price.amount.quantize(CENT):
        raise InvalidPriceError(f"Price {raw!r} has more than two decimal places")
    return Money(price.amount.quantize(CENT))


@dataclass
class Product:
    """A product in the catalog.

    Kept as a mutable dataclass because renames and price updates are
    legitimate mutations on the aggregate. Receipts never hold a
    reference to a Product, so updates do not rewrite history.
    """

    id: str
    name: str
    price: Money

    def rename(self, new_name: str) -> None:
        if not new_name or not new_name.strip():
            raise ValidationError("Product name cannot be empty")
        self.name = new_name.strip()

    def update_price(self, new_price: Money) -> None:
        self.price = new_price
