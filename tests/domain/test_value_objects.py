"""Unit tests for domain value objects."""

from decimal import Decimal

import pytest

from pos.domain.exceptions import InvalidQuantityError, ValidationError
from pos.domain.model.value_objects import Money, Quantity


# ── Money ────────────────────────────────────────────────────────────────────


class TestMoney:

    def test_creation(self):
        m = Money(Decimal("10.50"))
        assert m.amount == Decimal("10.50")

    def test_of_factory_from_string(self):
        assert Money.of("25.99").amount == Decimal("25.99")

    def test_of_factory_from_float_keeps_decimal_digits(self):
        assert Money.of(9.99).amount == Decimal("9.99")

    def test_zero_is_allowed(self):
        assert Money.of("0") == Money.zero()

    def test_negative_amount_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Money(Decimal("-1"))

    def test_non_finite_rejected(self):
        with pytest.raises(ValidationError, match="finite"):
            Money.of("NaN")
        with pytest.raises(ValidationError, match="finite"):
            Money.of("Infinity")

    def test_garbage_rejected(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Money.of("abc")

    def test_addition(self):
        assert Money.of("10") + Money.of("5.50") == Money.of("15.50")

    def test_multiplication_by_int_is_exact(self):
        assert Money.of("9.99") * 3 == Money.of("29.97")

    def test_multiplication_by_float_rejected(self):
        with pytest.raises(TypeError):
            Money.of("1") * 1.5

    def test_str_formatting(self):
        assert str(Money.of("15")) == "$15.00"
        assert str(Money.of("9.5")) == "$9.50"


# ── Quantity ─────────────────────────────────────────────────────────────────


class TestQuantity:

    def test_valid_quantity(self):
        assert Quantity(5).value == 5

    def test_zero_rejected(self):
        with pytest.raises(InvalidQuantityError, match="must be positive"):
            Quantity(0)

    def test_negative_rejected(self):
        with pytest.raises(InvalidQuantityError, match="must be positive"):
            Quantity(-3)

    def test_parse(self):
        assert Quantity.parse(" 3 ") == Quantity(3)

    def test_parse_non_numeric_rejected(self):
        with pytest.raises(InvalidQuantityError, match="Invalid quantity input"):
            Quantity.parse("three")

    def test_parse_decimal_rejected(self):
        with pytest.raises(InvalidQuantityError):
            Quantity.parse("1.5")

    def test_str(self):
        assert str(Quantity(7)) == "7"
