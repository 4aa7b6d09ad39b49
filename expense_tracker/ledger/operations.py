"""
Ledger Operations

Pure transformations over a loaded Ledger. None of these functions touch
storage or mutate their input; each returns a new Ledger (or a new list of
expenses) and the caller decides whether to persist it.

GUARANTEES:
- IDs are assigned as max(existing) + 1 and are never reused
- The date stamped by add_expense is never changed
- An invalid amount raises before any change is made
"""

from datetime import date
from decimal import Decimal
from typing import Iterable, Optional

from expense_tracker.exceptions import ExpenseNotFoundError
from expense_tracker.models.expense import (
    DEFAULT_CATEGORY,
    Expense,
    ExpenseUpdate,
    Ledger,
)
from expense_tracker.validation import AmountInput, validate_amount


def _resolve_category(category: Optional[str]) -> str:
    if category is None or not category.strip():
        return DEFAULT_CATEGORY
    return category.strip()


def _index_of(ledger: Ledger, expense_id: int) -> int:
    for idx, expense in enumerate(ledger.expenses):
        if expense.id == expense_id:
            return idx
    raise ExpenseNotFoundError(expense_id)


def find_expense(ledger: Ledger, expense_id: int) -> Expense:
    """Return the expense with the given ID or raise ExpenseNotFoundError."""
    return ledger.expenses[_index_of(ledger, expense_id)]


def add_expense(
    ledger: Ledger,
    description: str,
    amount: AmountInput,
    category: Optional[str] = None,
    today: Optional[date] = None,
) -> tuple[Ledger, int]:
    """
    Append a new expense.

    Args:
        ledger: Current ledger
        description: What the money was spent on
        amount: Raw amount; validated here
        category: Category, "Uncategorized" when absent or blank
        today: Date to stamp (defaults to the current local date)

    Returns:
        (new_ledger, new_id)

    Raises:
        InvalidAmountError: If the amount fails validation
    """
    parsed_amount = validate_amount(amount)
    new_id = ledger.next_id

    expense = Expense(
        id=new_id,
        date=today or date.today(),
        description=description,
        amount=parsed_amount,
        category=_resolve_category(category),
    )

    new_ledger = ledger.model_copy(
        update={"expenses": [*ledger.expenses, expense], "last_id": new_id}
    )
    return new_ledger, new_id


def update_expense(
    ledger: Ledger,
    expense_id: int,
    changes: ExpenseUpdate,
) -> Ledger:
    """
    Apply a partial update to one expense.

    Fields left as None in `changes` keep their previous value. A blank
    category is treated as not supplied. The date is never changed.

    Raises:
        ExpenseNotFoundError: If no expense has this ID
        InvalidAmountError: If a supplied amount fails validation
    """
    idx = _index_of(ledger, expense_id)
    if changes.is_empty:
        return ledger

    current = ledger.expenses[idx]

    update: dict = {}
    if changes.description is not None:
        update["description"] = changes.description.strip()
    if changes.amount is not None:
        update["amount"] = validate_amount(changes.amount)
    if changes.category is not None and changes.category.strip():
        update["category"] = changes.category.strip()

    if not update:
        return ledger

    updated = current.model_copy(update=update)
    expenses = list(ledger.expenses)
    expenses[idx] = updated
    return ledger.model_copy(update={"expenses": expenses})


def delete_expense(ledger: Ledger, expense_id: int) -> Ledger:
    """
    Remove one expense, keeping the order of the others.

    Raises:
        ExpenseNotFoundError: If no expense has this ID
    """
    idx = _index_of(ledger, expense_id)
    expenses = ledger.expenses[:idx] + ledger.expenses[idx + 1:]
    return ledger.model_copy(update={"expenses": expenses})


def set_budget(ledger: Ledger, amount: AmountInput) -> Ledger:
    """
    Set the monthly budget.

    Raises:
        InvalidAmountError: If the amount fails validation
    """
    budget: Decimal = validate_amount(amount)
    return ledger.model_copy(update={"budget": budget})


def filter_by_category(expenses: Iterable[Expense], category: str) -> list[Expense]:
    """Expenses whose category matches exactly (case-sensitive)."""
    return [expense for expense in expenses if expense.category == category]


def filter_by_month(expenses: Iterable[Expense], month: int) -> list[Expense]:
    """Expenses recorded in the given calendar month (1-12), any year."""
    return [expense for expense in expenses if expense.date.month == month]
