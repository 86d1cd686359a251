#!/usr/bin/env python3
"""
Expense Operations

Command handlers for adding, listing, updating, deleting, and summarizing
expenses. Each handler loads the store fresh, works on it, and saves it back
when something changed.
"""

import logging
from dataclasses import replace

from ..core.datastore import DataStore
from ..core.dates import FinancialDate
from ..core.errors import ExpenseNotFoundError
from ..core.money import Money, sum_money
from .models import Expense, Store
from .options import AddOptions, DeleteOptions, ListOptions, SummaryOptions, UpdateOptions

logger = logging.getLogger(__name__)


def _matches_period(expense: Expense, month: int | None, year: int | None) -> bool:
    if month is not None and expense.created_at.month != month:
        return False
    if year is not None and expense.created_at.year != year:
        return False
    return True


def add_expense(datastore: DataStore[Store], options: AddOptions, today: FinancialDate | None = None) -> Expense:
    """
    Append a new expense dated today.

    Args:
        datastore: Store to add to
        options: Description and amount of the new expense
        today: Creation date override (default: today)

    Returns:
        The created expense

    Raises:
        ValidationError: If description or amount is missing or invalid
    """
    options.validate()
    store = datastore.load()

    expense = Expense(
        id=store.next_id(),
        amount=options.amount,
        description=options.description,
        created_at=today or FinancialDate.today(),
    )
    store.expenses.append(expense)
    datastore.save(store)

    logger.info(f"Added expense {expense.id}: {expense.description} {expense.amount}")
    return expense


def list_expenses(datastore: DataStore[Store], options: ListOptions | None = None) -> list[Expense]:
    """
    Expenses sorted newest first.

    The sort is stable, so expenses created on the same day keep the order
    they were added in.
    """
    options = options or ListOptions()
    options.validate()
    store = datastore.load()

    expenses = [e for e in store.expenses if _matches_period(e, options.month, options.year)]
    expenses.sort(key=lambda e: e.created_at, reverse=True)
    return expenses


def update_expense(datastore: DataStore[Store], options: UpdateOptions) -> Expense:
    """
    Overwrite the supplied fields of an existing expense.

    The id and creation date are never changed.

    Raises:
        ValidationError: If the id or both fields are missing
        ExpenseNotFoundError: If no expense has the id
    """
    options.validate()
    store = datastore.load()

    expense = store.find(options.id)
    if expense is None:
        raise ExpenseNotFoundError(options.id)

    changes = {}
    if options.amount is not None:
        changes["amount"] = options.amount
    if options.description is not None:
        changes["description"] = options.description

    updated = replace(expense, **changes)
    store.expenses[store.expenses.index(expense)] = updated
    datastore.save(store)

    logger.info(f"Updated expense {updated.id}: {', '.join(changes)}")
    return updated


def delete_expense(datastore: DataStore[Store], options: DeleteOptions) -> int:
    """
    Remove every expense with the given id.

    Deleting an id that does not exist is not an error; the store is saved
    either way.

    Returns:
        Number of expenses removed
    """
    options.validate()
    store = datastore.load()

    removed = store.remove(options.id)
    datastore.save(store)

    if removed:
        logger.info(f"Deleted {removed} expense(s) with ID {options.id}")
    else:
        logger.info(f"No expense with ID {options.id} to delete")
    return removed


def summarize_month(datastore: DataStore[Store], options: SummaryOptions) -> Money | None:
    """
    Total of the expenses created in a calendar month.

    Without a year, the same month of every year is counted together.

    Returns:
        The total, or None if the store holds no expenses at all
    """
    options.validate()
    store = datastore.load()

    if not store.expenses:
        return None

    return sum_money(
        e.amount for e in store.expenses if _matches_period(e, options.month, options.year)
    )
