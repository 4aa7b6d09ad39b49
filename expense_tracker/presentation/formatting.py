"""Formatting utilities for currency, months and report output."""

import calendar
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Iterable, Union

from expense_tracker.models.expense import BudgetWarning, Expense, ExpenseSummary


CENTS = Decimal("0.01")

TABLE_HEADER = "ID  Date        Description  Category       Amount"
TABLE_RULE = "-" * 48
NO_EXPENSES_MESSAGE = "No expenses found"


def format_currency(amount: Union[Decimal, int, float, str], symbol: str = "$") -> str:
    """Format an amount with a leading symbol and exactly two decimals.

    Example:
        >>> format_currency(Decimal("10.5"))
        '$10.50'
        >>> format_currency(1000)
        '$1000.00'
    """
    value = amount if isinstance(amount, Decimal) else Decimal(str(amount))
    with localcontext() as ctx:
        # room for every integer digit plus the cents
        ctx.prec = max(ctx.prec, value.adjusted() + 3)
        quantized = value.quantize(CENTS, rounding=ROUND_HALF_UP)
    return f"{symbol}{quantized:f}"


def month_name(month: int) -> str:
    """Full English month name for 1-12."""
    if month < 1 or month > 12:
        raise ValueError(f"Month must be between 1 and 12, got {month}")
    return calendar.month_name[month]


def format_expense_row(expense: Expense, symbol: str = "$") -> str:
    return (
        f"{str(expense.id).ljust(4)}{expense.date.isoformat()}  "
        f"{expense.description.ljust(12)}{expense.category.ljust(14)}"
        f"{format_currency(expense.amount, symbol)}"
    )


def format_expense_table(expenses: Iterable[Expense], symbol: str = "$") -> str:
    """Render expenses as a fixed-width table."""
    rows = [format_expense_row(expense, symbol) for expense in expenses]
    if not rows:
        return NO_EXPENSES_MESSAGE
    return "\n".join([TABLE_HEADER, TABLE_RULE, *rows])


def format_budget_warning(warning: BudgetWarning, symbol: str = "$") -> str:
    return (
        f"WARNING: Monthly expenses ({format_currency(warning.total, symbol)}) "
        f"exceed budget ({format_currency(warning.budget, symbol)})"
    )


def format_summary(summary: ExpenseSummary, symbol: str = "$") -> str:
    """
    Render the summary report.

    The category breakdown is only shown when no category filter was
    applied; the budget warning, if any, comes last.
    """
    lines = []

    if summary.month is not None:
        lines.append(
            f"Total expenses for {month_name(summary.month)}: "
            f"{format_currency(summary.total, symbol)}"
        )
    else:
        lines.append(f"Total expenses: {format_currency(summary.total, symbol)}")

    if summary.category is None:
        lines.append("")
        lines.append("Category Breakdown:")
        for category, amount in summary.breakdown.items():
            lines.append(f"{category}: {format_currency(amount, symbol)}")

    if summary.warning is not None:
        lines.append("")
        lines.append(format_budget_warning(summary.warning, symbol))

    return "\n".join(lines)
