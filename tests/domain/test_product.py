"""Unit tests for the Product aggregate and price parsing."""

import pytest

from pos.domain.exceptions import InvalidPriceError, ValidationError
from pos.domain.model.product import Product, parse_price
from pos.domain.model.value_objects import Money


class TestParsePrice:

    def test_valid_price(self):
        assert parse_price("9.99") == Money.of("9.99")

    def test_zero_price_allowed(self):
        assert parse_price("0") == Money.zero()

    @pytest.mark.parametrize("raw", ["-1", "", "free", "nan"])
    def test_invalid_price_rejected(self, raw):
        with pytest.raises(InvalidPriceError, match="Invalid price input"):
            parse_price(raw)

    def test_whole_cents_kept_exactly(self):
        price = parse_price("9.9")
        assert price == Money.of("9.90")
        assert str(price.amount) == "9.90"

    def test_over_precise_price_rejected(self):
        with pytest.raises(InvalidPriceError, match="more than two decimal places"):
            parse_price("0.12345678901234567890123")

    @pytest.mark.parametrize("raw", ["1e400", "10000000"])
    def test_price_above_bound_rejected(self, raw):
        with pytest.raises(InvalidPriceError, match="exceeds"):
            parse_price(raw)


class TestProduct:

    def test_rename_strips_whitespace(self):
        p = Product(id="P1", name="Widget", price=Money.of("1"))
        p.rename("  Gizmo ")
        assert p.name == "Gizmo"

    def test_rename_to_blank_rejected(self):
        p = Product(id="P1", name="Widget", price=Money.of("1"))
        with pytest.raises(ValidationError, match="cannot be empty"):
            p.rename("   ")
        assert p.name == "Widget"

    def test_update_price(self):
        p = Product(id="P1", name="Widget", price=Money.of("1"))
        p.update_price(Money.of("2.50"))
        assert p.price == Money.of("2.50")
