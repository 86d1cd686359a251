#!/usr/bin/env python3
"""Tests for FinancialDate primitive type."""

from datetime import date

import pytest

from expenses.core.dates import FinancialDate, month_name


class TestFinancialDateConstruction:
    """Test FinancialDate construction."""

    @pytest.mark.parametrize(
        "text",
        ["2024-01-15", "2024-01-15T10:30:00.000Z", " 2024-01-15 "],
        ids=["iso_date", "iso_timestamp", "padded"],
    )
    def test_from_string(self, text):
        """Test parsing dates and timestamps down to the calendar day."""
        assert FinancialDate.from_string(text).date == date(2024, 1, 15)

    @pytest.mark.parametrize("text", ["", "15/01/2024", "2024-13-01", "2024-03-01garbage", "2024-03-01 10:00"])
    def test_from_string_rejects_invalid(self, text):
        with pytest.raises(ValueError):
            FinancialDate.from_string(text)

    def test_today(self):
        assert FinancialDate.today().date == date.today()


class TestFinancialDateBehavior:
    """Test formatting, components and ordering."""

    def test_to_iso_string(self):
        fd = FinancialDate(date=date(2024, 1, 5))
        assert fd.to_iso_string() == "2024-01-05"
        assert str(fd) == "2024-01-05"

    def test_components(self):
        fd = FinancialDate(date=date(2023, 3, 1))
        assert fd.year == 2023
        assert fd.month == 3

    def test_ordering(self):
        earlier = FinancialDate(date=date(2024, 1, 1))
        later = FinancialDate(date=date(2024, 2, 1))
        assert earlier < later
        assert sorted([later, earlier]) == [earlier, later]

    def test_age_days(self):
        fd = FinancialDate(date=date(2024, 1, 1))
        assert fd.age_days(FinancialDate(date=date(2024, 1, 31))) == 30


def test_month_name():
    assert month_name(3) == "March"
    assert month_name(12) == "December"
