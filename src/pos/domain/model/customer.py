"""Customer entity and the walk-in guest sentinel."""

from __future__ import annotations

from dataclasses import dataclass

GUEST_ID = "guest"


@dataclass(frozen=True)
class Customer:

    id: str
    name: str


# Used when the operator leaves the customer prompt blank at checkout.
# Never stored in the customer directory.
GUEST = Customer(id=GUEST_ID, name="Guest")
