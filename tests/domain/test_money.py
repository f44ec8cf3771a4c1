"""Unit tests for domain value objects."""

from decimal import Decimal

import pytest

from hospops.domain.exceptions import ValidationError
from hospops.domain.model.value_objects import Money, group_indian


# ── Money ────────────────────────────────────────────────────────────────────


class TestMoney:

    def test_creation(self):
        m = Money(Decimal("10.50"))
        assert m.amount == Decimal("10.50")

    def test_of_factory_from_string(self):
        assert Money.of("25.99").amount == Decimal("25.99")

    def test_of_factory_from_float(self):
        assert Money.of(0.1).amount == Decimal("0.1")

    def test_of_factory_rejects_garbage(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Money.of("ten")

    def test_negative_amount_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Money(Decimal("-1"))

    def test_nan_rejected(self):
        with pytest.raises(ValidationError, match="must be finite"):
            Money(Decimal("NaN"))

    def test_addition(self):
        assert Money.of("10") + Money.of("5.50") == Money.of("15.50")

    def test_subtraction_going_negative_rejected(self):
        with pytest.raises(ValidationError, match="negative amount"):
            Money.of("5") - Money.of("10")

    def test_full_precision_kept(self):
        assert Money.of("0.333").amount == Decimal("0.333")

    def test_str_rounds_for_display(self):
        assert str(Money.of("15")) == "₹15.00"
        assert str(Money.of("0.335")) == "₹0.34"

    def test_str_indian_grouping(self):
        assert str(Money.of("1234567.5")) == "₹12,34,567.50"

    def test_compact(self):
        assert Money.of("999").compact() == "₹999.00"
        assert Money.of("2500").compact() == "₹2.50 K"
        assert Money.of("250000").compact() == "₹2.50 L"
        assert Money.of("31500000").compact() == "₹3.15 Cr"

    def test_comparison_operators(self):
        assert Money.of("5") < Money.of("10")
        assert Money.of("10") > Money.of("5")
        assert Money.of("10") >= Money.of("10")
        assert Money.of("10") <= Money.of("10")


class TestGroupIndian:

    @pytest.mark.parametrize(
        "amount, expected",
        [
            ("0", "0.00"),
            ("999.999", "1,000.00"),
            ("100000", "1,00,000.00"),
            ("12345678.9", "1,23,45,678.90"),
            ("-1500", "-1,500.00"),
        ],
    )
    def test_grouping(self, amount, expected):
        assert group_indian(Decimal(amount)) == expected
