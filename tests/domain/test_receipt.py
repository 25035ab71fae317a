"""Unit tests for the Cart, the Receipt aggregate and receipt IDs."""

from datetime import datetime, timezone

import pytest

from pos.domain.exceptions import InvalidQuantityError, ValidationError
from pos.domain.model.customer import GUEST, Customer
from pos.domain.model.receipt import (
    MAX_LINE_QUANTITY,
    UNIX_EPOCH_TICKS,
    Cart,
    Receipt,
    next_receipt_id,
    ticks_now,
)
from pos.domain.model.value_objects import Money, Quantity

PRICES = {"P1": Money.of("9.99"), "P2": Money.of("0.50")}
NOW = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


class TestCart:

    def test_new_cart_is_empty(self):
        cart = Cart()
        assert cart.is_empty()
        assert len(cart) == 0

    def test_quantities_accumulate(self):
        cart = Cart()
        cart.add("P1", Quantity(2))
        assert cart.add("P1", Quantity(3)) == 5
        assert cart.quantity_of("P1") == 5
        assert len(cart) == 1

    def test_total_is_sum_of_price_times_quantity(self):
        cart = Cart()
        cart.add("P1", Quantity(3))
        cart.add("P2", Quantity(4))
        assert cart.total(PRICES.__getitem__) == Money.of("31.97")

    def test_empty_cart_total_is_zero(self):
        assert Cart().total(PRICES.__getitem__) == Money.zero()

    def test_line_quantity_is_bounded(self):
        cart = Cart()
        cart.add("P1", Quantity(MAX_LINE_QUANTITY))
        with pytest.raises(InvalidQuantityError, match="cannot exceed"):
            cart.add("P1", Quantity(1))
        assert cart.quantity_of("P1") == MAX_LINE_QUANTITY


class TestReceiptCreation:

    def test_captures_customer_and_cart(self):
        cart = Cart()
        cart.add("P1", Quantity(3))
        receipt = Receipt.create(
            "1", Customer("C1", "Alice"), cart, PRICES.__getitem__, NOW
        )
        assert receipt.customer_id == "C1"
        assert receipt.customer_name == "Alice"
        assert receipt.items == {"P1": 3}
        assert receipt.total == Money.of("29.97")
        assert receipt.timestamp == NOW

    def test_items_are_a_snapshot_of_the_cart(self):
        cart = Cart()
        cart.add("P1", Quantity(1))
        receipt = Receipt.create("1", GUEST, cart, PRICES.__getitem__, NOW)
        cart.add("P1", Quantity(1))
        assert receipt.items == {"P1": 1}

    def test_items_cannot_be_mutated(self):
        cart = Cart()
        cart.add("P1", Quantity(1))
        receipt = Receipt.create("1", GUEST, cart, PRICES.__getitem__, NOW)
        with pytest.raises(TypeError):
            receipt.items["P1"] = 99  # type: ignore[index]

    def test_id_required(self):
        with pytest.raises(ValidationError, match="Receipt ID"):
            Receipt.create("", GUEST, Cart(), PRICES.__getitem__, NOW)


class TestNextReceiptId:

    def test_uses_clock_ticks_when_ahead(self):
        assert next_receipt_id(["5", "7"], now_ticks=100) == "100"

    def test_bumps_past_existing_ids(self):
        assert next_receipt_id(["100", "250"], now_ticks=100) == "251"

    def test_ignores_non_numeric_ids(self):
        assert next_receipt_id(["legacy-a"], now_ticks=42) == "42"

    def test_empty_ledger(self):
        assert next_receipt_id([], now_ticks=1) == "1"


class TestTicksNow:

    def test_counts_from_year_one(self, monkeypatch):
        monkeypatch.setattr("pos.domain.model.receipt.time.time_ns", lambda: 1_000)
        assert ticks_now() == UNIX_EPOCH_TICKS + 10

    def test_current_ids_are_eighteen_digits(self):
        assert len(str(ticks_now())) == 18
