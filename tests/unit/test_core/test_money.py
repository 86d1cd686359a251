#!/usr/bin/env python3
"""Tests for Money primitive type and currency helpers."""

import pytest

from expenses.core.currency import (
    cents_to_dollars,
    cents_to_dollars_str,
    dollars_to_cents,
    format_cents,
    parse_dollars_to_cents,
)
from expenses.core.money import Money, sum_money


class TestMoneyConstruction:
    """Test Money class construction."""

    @pytest.mark.currency
    def test_from_cents(self):
        """Test creating Money from cents."""
        assert Money.from_cents(1234).to_cents() == 1234

    @pytest.mark.currency
    @pytest.mark.parametrize(
        "text,cents",
        [("12.34", 1234), ("$12.34", 1234), ("1,234.56", 123456), ("12", 1200), ("0", 0), ("12.345", 1235)],
    )
    def test_from_dollars_string(self, text, cents):
        """Test parsing dollar strings."""
        assert Money.from_dollars(text).to_cents() == cents

    @pytest.mark.currency
    def test_from_dollars_float_avoids_binary_drift(self):
        """Test 0.1 + 0.2 style floats land on exact cents."""
        assert Money.from_dollars(0.1).to_cents() == 10
        assert Money.from_dollars(19.99).to_cents() == 1999
        assert Money.from_dollars(50).to_cents() == 5000

    @pytest.mark.currency
    @pytest.mark.parametrize("text", ["abc", "", "  ", "1.2.3", "nan", "inf", "1e30"])
    def test_from_dollars_rejects_malformed(self, text):
        """Test malformed amounts raise ValueError."""
        with pytest.raises(ValueError):
            Money.from_dollars(text)


class TestMoneyOperations:
    """Test Money arithmetic and comparison."""

    @pytest.mark.currency
    def test_addition_and_subtraction(self):
        a = Money.from_cents(100)
        b = Money.from_cents(30)
        assert (a + b).to_cents() == 130
        assert (a - b).to_cents() == 70

    @pytest.mark.currency
    def test_ordering(self):
        assert Money.from_cents(50) < Money.from_cents(100)
        assert Money.from_cents(100) == Money.from_dollars("1.00")

    @pytest.mark.currency
    def test_sum_money_of_nothing_is_zero(self):
        assert sum_money([]) == Money.zero()

    @pytest.mark.currency
    def test_sum_money(self):
        total = sum_money([Money.from_dollars(0.1), Money.from_dollars(0.2)])
        assert total.to_dollars() == 0.3

    @pytest.mark.currency
    def test_str_formats_dollars(self):
        assert str(Money.from_cents(4599)) == "$45.99"
        assert str(Money.from_cents(-5)) == "$-0.05"


class TestCurrencyHelpers:
    """Test the module-level conversion functions."""

    @pytest.mark.currency
    def test_cents_to_dollars_str(self):
        assert cents_to_dollars_str(4599) == "45.99"
        assert cents_to_dollars_str(0) == "0.00"

    @pytest.mark.currency
    def test_cents_to_dollars(self):
        assert cents_to_dollars(1234) == 12.34

    @pytest.mark.currency
    def test_dollars_to_cents_rounds_half_up(self):
        assert dollars_to_cents(1.005) == 101
        assert dollars_to_cents(2.5) == 250

    @pytest.mark.currency
    @pytest.mark.parametrize("dollars", [float("inf"), float("-inf"), float("nan"), 1e30])
    def test_dollars_to_cents_rejects_unrepresentable(self, dollars):
        with pytest.raises(ValueError):
            dollars_to_cents(dollars)

    @pytest.mark.currency
    def test_from_dollars_rejects_huge_number(self):
        with pytest.raises(ValueError):
            Money.from_dollars(1e30)

    @pytest.mark.currency
    def test_parse_dollars_to_cents_negative(self):
        assert parse_dollars_to_cents("-3.50") == -350

    @pytest.mark.currency
    def test_format_cents(self):
        assert format_cents(5000) == "$50.00"
