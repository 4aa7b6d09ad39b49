"""
Reporting Engine

DESIGN DECISION: Reports are computed DETERMINISTICALLY from a loaded
ledger snapshot. Nothing here reads storage or the clock except through
the optional `today` argument, which defaults to the current date.

All sums are Decimal; an empty selection sums to Decimal("0").
"""

from datetime import date
from decimal import Decimal
from typing import Iterable, Optional, Union

from expense_tracker.ledger.operations import filter_by_category, filter_by_month
from expense_tracker.models.expense import (
    BudgetWarning,
    Expense,
    ExpenseSummary,
    Ledger,
)
from expense_tracker.validation import validate_month


def total(expenses: Iterable[Expense]) -> Decimal:
    """Sum of amounts."""
    return sum((expense.amount for expense in expenses), Decimal("0"))


def category_breakdown(expenses: Iterable[Expense]) -> dict[str, Decimal]:
    """
    Per-category subtotals.

    Keys appear in the order each category is first seen.
    """
    groups: dict[str, Decimal] = {}
    for expense in expenses:
        groups[expense.category] = groups.get(expense.category, Decimal("0")) + expense.amount
    return groups


def budget_warning(
    expenses: Iterable[Expense],
    budget: Optional[Decimal],
    month: Optional[int] = None,
    today: Optional[date] = None,
) -> Optional[BudgetWarning]:
    """
    Check spending in one month against the budget.

    Args:
        expenses: Candidate expenses (possibly already filtered)
        budget: Monthly budget; None disables the check
        month: Month to check; defaults to the current month
        today: Reference date for "current month"

    Returns:
        A BudgetWarning if spending strictly exceeds the budget, else None
    """
    if budget is None:
        return None

    target_month = month or (today or date.today()).month
    spent = total(filter_by_month(expenses, target_month))

    if spent > budget:
        return BudgetWarning(month=target_month, total=spent, budget=budget)
    return None


def build_summary(
    ledger: Ledger,
    month: Optional[Union[int, str]] = None,
    category: Optional[str] = None,
    today: Optional[date] = None,
) -> ExpenseSummary:
    """
    Build the summary report.

    Filters by month (validated) and then by category. Total, breakdown
    and the budget check all run over the filtered expenses.

    Raises:
        InvalidMonthError: If a month is given and is not 1-12
    """
    expenses = list(ledger.expenses)

    target_month = None
    if month is not None:
        target_month = validate_month(month)
        expenses = filter_by_month(expenses, target_month)

    if category:
        expenses = filter_by_category(expenses, category)

    return ExpenseSummary(
        month=target_month,
        category=category or None,
        expense_count=len(expenses),
        total=total(expenses),
        breakdown=category_breakdown(expenses),
        warning=budget_warning(expenses, ledger.budget, target_month, today),
    )
