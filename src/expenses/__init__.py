"""
Expense Tracker - Personal expense tracking from the command line

Records expenses in a local JSON document and reports on them.

Packages:
- core: Currency, dates, configuration, persistence helpers, errors
- tracker: Expense models, the expense store, and command handlers
- cli: The ``expenses`` command-line interface

Example Usage:
    from expenses.core import get_config
    from expenses.tracker import AddOptions, ExpenseStore, add_expense
    from expenses.core.money import Money

    store = ExpenseStore(get_config().store_path)
    add_expense(store, AddOptions(description="coffee", amount=Money.from_dollars("4.50")))
"""

__version__ = "0.1.0"
__author__ = "Expense Tracker Contributors"

from .core.config import Environment, get_config
from .core.money import Money
from .tracker.models import Expense, Store

__all__ = [
    "Environment",
    "Expense",
    "Money",
    "Store",
    "get_config",
]
