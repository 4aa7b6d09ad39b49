"""Presentation package: turns models into text for the terminal."""

from expense_tracker.presentation.formatting import (
    NO_EXPENSES_MESSAGE,
    TABLE_HEADER,
    TABLE_RULE,
    format_budget_warning,
    format_currency,
    format_expense_row,
    format_expense_table,
    format_summary,
    month_name,
)

__all__ = [
    "NO_EXPENSES_MESSAGE",
    "TABLE_HEADER",
    "TABLE_RULE",
    "format_budget_warning",
    "format_currency",
    "format_expense_row",
    "format_expense_table",
    "format_summary",
    "month_name",
]
