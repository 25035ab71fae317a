"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ProductDTO:

    id: str
    name: str
    price: str  # formatted, e.g. "$9.99"


@dataclass(frozen=True)
class CustomerDTO:

    id: str
    name: str


@dataclass(frozen=True)
class ReceiptLineDTO:
    """A receipt line resolved against the current catalog.

    ``missing`` is True when the product has been deleted since the sale;
    ``product_name`` then holds a placeholder.
    """

    product_id: str
    product_name: str
    quantity: int
    missing: bool = False


@dataclass(frozen=True)
class ReceiptDTO:

    id: str
    customer_id: str
    customer_name: str
    lines: list[ReceiptLineDTO]
    total: str
    timestamp: str
