#!/usr/bin/env python3
"""
Expense Data Models

The Expense record and the Store document that holds them, plus conversion
to and from the on-disk JSON layout:

    {
      "expenses": [{"id": 1, "amount": 4.5, "description": "coffee", "createdAt": "2024-03-01"}],
      "meta": {"totalExpenses": 4.5}
    }
"""

from dataclasses import dataclass, field
from typing import Any

from ..core.dates import FinancialDate
from ..core.money import Money, sum_money


@dataclass
class Expense:
    """One recorded monetary outflow."""

    id: int
    amount: Money
    description: str
    created_at: FinancialDate

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "id": self.id,
            "amount": self.amount.to_dollars(),
            "description": self.description,
            "createdAt": self.created_at.to_iso_string(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Expense":
        """
        Create Expense from a stored dictionary.

        Raises:
            KeyError: If a required field is missing
            ValueError: If a field has the wrong type or format
        """
        amount = data["amount"]
        if isinstance(amount, bool) or not isinstance(amount, (int, float)):
            raise ValueError(f"amount must be a number, got {amount!r}")

        return cls(
            id=int(data["id"]),
            amount=Money.from_dollars(amount),
            description=str(data["description"]),
            created_at=FinancialDate.from_string(str(data["createdAt"])),
        )


@dataclass
class Store:
    """
    Ordered collection of expenses.

    The aggregate total is always derived from the current expenses and is
    never read back from a saved document.
    """

    expenses: list[Expense] = field(default_factory=list)

    @property
    def total(self) -> Money:
        """Sum of all expense amounts."""
        return sum_money(expense.amount for expense in self.expenses)

    def next_id(self) -> int:
        """
        Id for the next added expense.

        Uses the highest id ever kept in the store rather than its length, so
        ids freed by a delete are not handed out again.
        """
        return max((expense.id for expense in self.expenses), default=0) + 1

    def find(self, expense_id: int) -> Expense | None:
        """First expense with the given id, or None."""
        return next((expense for expense in self.expenses if expense.id == expense_id), None)

    def remove(self, expense_id: int) -> int:
        """Remove every expense with the given id and return how many were removed."""
        before = len(self.expenses)
        self.expenses = [expense for expense in self.expenses if expense.id != expense_id]
        return before - len(self.expenses)

    def to_dict(self) -> dict[str, Any]:
        """Convert to the stored document layout, recomputing the total."""
        return {
            "expenses": [expense.to_dict() for expense in self.expenses],
            "meta": {"totalExpenses": self.total.to_dollars()},
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> "Store":
        """
        Create Store from a stored document.

        A missing or empty document gives an empty store. The stored
        ``meta.totalExpenses`` value is ignored.

        Raises:
            ValueError: If the document structure is invalid
        """
        if not data:
            return cls()
        if not isinstance(data, dict):
            raise ValueError(f"expected a JSON object, got {type(data).__name__}")

        raw_expenses = data.get("expenses") or []
        if not isinstance(raw_expenses, list):
            raise ValueError("'expenses' must be a list")

        expenses = []
        for index, raw in enumerate(raw_expenses):
            try:
                expenses.append(Expense.from_dict(raw))
            except (KeyError, TypeError, ValueError) as e:
                raise ValueError(f"invalid expense at index {index}: {e}") from e

        return cls(expenses=expenses)
