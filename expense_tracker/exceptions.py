"""
Exception hierarchy for the expense tracker.

Every failure a user can cause (or hit) derives from ExpenseTrackerError,
so the CLI can report it as a message and exit without touching the
ledger file.
"""

from typing import Optional


class ExpenseTrackerError(Exception):
    """Base exception for all expense tracker failures."""
    pass


class ValidationError(ExpenseTrackerError, ValueError):
    """Input did not meet validation requirements."""
    pass


class InvalidAmountError(ValidationError):
    """Amount is not a finite, non-negative number."""
    pass


class InvalidMonthError(ValidationError):
    """Month is not an integer between 1 and 12."""
    pass


class ExpenseNotFoundError(ExpenseTrackerError, LookupError):
    """No expense with the requested ID exists in the ledger."""

    def __init__(self, expense_id: int, message: Optional[str] = None):
        self.expense_id = expense_id
        super().__init__(message or f"Expense not found: {expense_id}")


class StorageError(ExpenseTrackerError):
    """Base exception for storage operations."""
    pass


class CorruptStoreError(StorageError):
    """Persisted ledger could not be parsed."""
    pass
