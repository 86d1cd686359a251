"""
Expense Tracking Package

Expense records, their JSON-backed store, and the command handlers that
add, list, update, delete, and summarize them.
"""

from .datastore import ExpenseStore
from .models import Expense, Store
from .operations import (
    add_expense,
    delete_expense,
    list_expenses,
    summarize_month,
    update_expense,
)
from .options import AddOptions, DeleteOptions, ListOptions, SummaryOptions, UpdateOptions

__all__ = [
    "AddOptions",
    "DeleteOptions",
    "Expense",
    "ExpenseStore",
    "ListOptions",
    "Store",
    "SummaryOptions",
    "UpdateOptions",
    "add_expense",
    "delete_expense",
    "list_expenses",
    "summarize_month",
    "update_expense",
]
