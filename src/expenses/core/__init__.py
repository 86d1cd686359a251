"""
Core Utilities Package

Shared primitives used by the expense tracker:
- Currency handling with integer cents
- Day-precision dates
- Configuration and logging setup
- JSON persistence helpers and the DataStore interface
- The exception hierarchy
"""

from .config import (
    Config,
    Environment,
    get_config,
    get_store_path,
    is_test,
    reload_config,
)
from .currency import cents_to_dollars_str, format_cents, parse_dollars_to_cents
from .dates import FinancialDate
from .errors import ExpenseNotFoundError, ExpenseTrackerError, StoreError, ValidationError
from .money import Money

__all__ = [
    "Config",
    "Environment",
    "ExpenseNotFoundError",
    "ExpenseTrackerError",
    "FinancialDate",
    "Money",
    "StoreError",
    "ValidationError",
    "cents_to_dollars_str",
    "format_cents",
    "get_config",
    "get_store_path",
    "is_test",
    "parse_dollars_to_cents",
    "reload_config",
]
