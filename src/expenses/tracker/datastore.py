#!/usr/bin/env python3
"""
Expense DataStore Implementation

Loads and saves the whole expense document as one JSON file.
"""

import json
import logging
from pathlib import Path

from ..core.datastore_mixin import FileDataStoreMixin
from ..core.errors import StoreError
from ..core.json_utils import read_json, write_json
from .models import Store

logger = logging.getLogger(__name__)


class ExpenseStore(FileDataStoreMixin):
    """
    DataStore for the expense document.

    A missing file is an empty store, not an error. Every save rewrites the
    document in full with a freshly computed ``meta.totalExpenses``.
    """

    def __init__(self, path: Path):
        """
        Initialize expense store.

        Args:
            path: Location of the expense JSON document
        """
        self.path = Path(path)

    def load(self) -> Store:
        """
        Load the expense document.

        Returns:
            The stored expenses, or an empty Store if no file exists yet

        Raises:
            StoreError: If the file cannot be read or is not a valid document
        """
        if not self.path.exists():
            logger.debug(f"No expense file at {self.path}, starting empty")
            return Store()

        try:
            data = read_json(self.path)
        except OSError as e:
            raise StoreError(f"Error reading data: {e}", {"path": str(self.path)}) from e
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise StoreError(f"Error reading data: invalid JSON in {self.path}: {e}", {"path": str(self.path)}) from e

        try:
            store = Store.from_dict(data)
        except ValueError as e:
            raise StoreError(f"Error reading data: {e}", {"path": str(self.path)}) from e

        logger.debug(f"Loaded {len(store.expenses)} expenses from {self.path}")
        return store

    def save(self, data: Store) -> None:
        """
        Save the expense document, recomputing the aggregate total.

        Raises:
            StoreError: If the file cannot be written
        """
        try:
            write_json(self.path, data.to_dict())
        except OSError as e:
            raise StoreError(f"Error writing data: {e}", {"path": str(self.path)}) from e

        logger.debug(f"Saved {len(data.expenses)} expenses to {self.path}")

    def item_count(self) -> int | None:
        """Get count of expenses in the document."""
        if not self.exists():
            return None
        return len(self.load().expenses)

    def summary_text(self) -> str:
        """Get human-readable summary."""
        if not self.exists():
            return "No expense file found"
        store = self.load()
        return f"Expenses: {len(store.expenses)} recorded, {store.total} total"
