"""
Data Models Package

This package contains all Pydantic models used in the Expense Tracker.
All data flowing through the system must conform to these schemas.
"""

from expense_tracker.models.expense import (
    DEFAULT_CATEGORY,
    BudgetWarning,
    Expense,
    ExpenseSummary,
    ExpenseUpdate,
    Ledger,
)
from expense_tracker.models.activity import (
    ActivityEvent,
    ActivityEventBuilder,
    ActivityEventType,
    ActivitySeverity,
)

__all__ = [
    # Ledger models
    "DEFAULT_CATEGORY",
    "BudgetWarning",
    "Expense",
    "ExpenseSummary",
    "ExpenseUpdate",
    "Ledger",
    # Activity models
    "ActivityEvent",
    "ActivityEventBuilder",
    "ActivityEventType",
    "ActivitySeverity",
]
