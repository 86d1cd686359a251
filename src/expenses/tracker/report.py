#!/usr/bin/env python3
"""
Expense Reports

Fixed-width expense table for ``list`` and a per-month breakdown built with
pandas for ``breakdown``.
"""

import pandas as pd

from ..core.currency import format_cents
from ..core.dates import month_name
from .models import Expense

# (header, width) for each column of the expense table
TABLE_COLUMNS = [("ID", 5), ("Amount", 10), ("Description", 18), ("Date", 15)]


def _row(values: list[str]) -> str:
    # Long values are not truncated and push the following columns right.
    return "".join(value.ljust(width) for value, (_, width) in zip(values, TABLE_COLUMNS))


def render_table(expenses: list[Expense]) -> str:
    """
    Render expenses as a fixed-width table.

    Columns are padded to 5/10/18/15 characters. The separator under the
    header is as long as the header line.
    """
    header = _row([name for name, _ in TABLE_COLUMNS])
    lines = [header, "-" * len(header)]
    for expense in expenses:
        lines.append(
            _row(
                [
                    str(expense.id),
                    format_cents(expense.amount.to_cents()),
                    expense.description,
                    expense.created_at.to_iso_string(),
                ]
            )
        )
    return "\n".join(lines)


def monthly_breakdown(expenses: list[Expense]) -> pd.DataFrame:
    """
    Aggregate expenses per calendar month.

    Returns:
        DataFrame with columns year, month, expenses, total_cents, sorted oldest
        month first; empty when there are no expenses
    """
    columns = ["year", "month", "expenses", "total_cents"]
    if not expenses:
        return pd.DataFrame(columns=columns)

    df = pd.DataFrame(
        {
            "year": [e.created_at.year for e in expenses],
            "month": [e.created_at.month for e in expenses],
            "cents": [e.amount.to_cents() for e in expenses],
        }
    )
    grouped = (
        df.groupby(["year", "month"], sort=True)["cents"]
        .agg(expenses="count", total_cents="sum")
        .reset_index()
    )
    return grouped[columns]


def render_breakdown(breakdown: pd.DataFrame) -> str:
    """Render a monthly breakdown as aligned text lines."""
    lines = []
    for row in breakdown.itertuples(index=False):
        label = f"{month_name(int(row.month))} {int(row.year)}"
        lines.append(f"{label:<16}{int(row.expenses):>6}  {format_cents(int(row.total_cents)):>12}")
    return "\n".join(lines)
