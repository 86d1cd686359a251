#!/usr/bin/env python3
"""
FinancialDate Primitive Type

Immutable day-precision date used for expense creation dates.
"""

import calendar
from dataclasses import dataclass
from datetime import date, datetime


@dataclass(frozen=True, order=True)
class FinancialDate:
    """Immutable calendar date with consistent ISO formatting."""

    date: date

    @classmethod
    def from_string(cls, date_str: str) -> "FinancialDate":
        """
        Parse from an ISO date or timestamp string.

        Older documents may carry a full timestamp such as
        "2024-03-01T10:15:00.000Z"; only the calendar date is kept.

        Raises:
            ValueError: If the string is not a YYYY-MM-DD date, optionally
                followed by a "T" and a time
        """
        text = date_str.strip()
        if len(text) != 10 and text[10:11] != "T":
            raise ValueError(f"not an ISO date or timestamp: {date_str!r}")
        return cls(date=datetime.strptime(text[:10], "%Y-%m-%d").date())

    @classmethod
    def today(cls) -> "FinancialDate":
        """Get today's date."""
        return cls(date=date.today())

    @property
    def year(self) -> int:
        return self.date.year

    @property
    def month(self) -> int:
        return self.date.month

    def to_iso_string(self) -> str:
        """Format as YYYY-MM-DD."""
        return self.date.isoformat()

    def age_days(self, other: "FinancialDate | None" = None) -> int:
        """Days between this date and another (default: today)."""
        if other is None:
            other = FinancialDate.today()
        return (other.date - self.date).days

    def __str__(self) -> str:
        return self.to_iso_string()

    def __repr__(self) -> str:
        return f"FinancialDate(date={self.date!r})"


def month_name(month: int) -> str:
    """Full English month name for 1..12, e.g. 3 -> "March"."""
    return calendar.month_name[month]
