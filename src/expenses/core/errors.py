"""Exception hierarchy for the expense tracker."""


class ExpenseTrackerError(Exception):
    """Base exception for all expense tracker errors."""

    def __init__(self, message: str, details: dict | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class StoreError(ExpenseTrackerError):
    """Raised when the expense document cannot be read or written."""

    pass


class ValidationError(ExpenseTrackerError):
    """Raised when command input is missing or invalid."""

    pass


class ExpenseNotFoundError(ExpenseTrackerError):
    """Raised when no expense has the requested id."""

    def __init__(self, expense_id: int) -> None:
        super().__init__(f"Expense with ID {expense_id} not found", {"id": expense_id})
        self.expense_id = expense_id
