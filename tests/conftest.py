"""
Pytest Configuration and Shared Fixtures

Provides common test fixtures and configuration for the entire test suite.
"""

from datetime import date
from pathlib import Path

import pytest

from expenses.core.config import reload_config
from expenses.core.dates import FinancialDate
from expenses.tracker.datastore import ExpenseStore
from expenses.tracker.models import Store
from tests.fixtures.expense_data import make_expense


@pytest.fixture(autouse=True)
def setup_test_environment(monkeypatch, tmp_path):
    """Point the tracker at a fresh data directory for every test."""
    monkeypatch.setenv("EXPENSES_ENV", "test")
    monkeypatch.setenv("EXPENSES_DATA_DIR", str(tmp_path / "data"))
    monkeypatch.delenv("EXPENSES_STORE_FILE", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.delenv("DEBUG", raising=False)
    return reload_config()


@pytest.fixture
def store_path(setup_test_environment) -> Path:
    """Path of the expense document for the current test."""
    return setup_test_environment.store_path


@pytest.fixture
def expense_store(store_path) -> ExpenseStore:
    """ExpenseStore backed by the test data directory."""
    return ExpenseStore(store_path)


@pytest.fixture
def sample_store() -> Store:
    """Store with expenses spread over two years."""
    return Store(
        expenses=[
            make_expense(1, 1000, "groceries", "2023-03-01"),
            make_expense(2, 2000, "train ticket", "2024-03-01"),
            make_expense(3, 450, "coffee", "2024-05-17"),
        ]
    )


@pytest.fixture
def today() -> FinancialDate:
    """Fixed creation date for added expenses."""
    return FinancialDate(date=date(2024, 8, 15))


# Test markers for categorizing tests
def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests for individual components")
    config.addinivalue_line("markers", "integration: Integration tests for complete workflows")
    config.addinivalue_line("markers", "currency: Tests for currency handling and precision")
