"""Ledger operations package."""

from expense_tracker.ledger.operations import (
    add_expense,
    delete_expense,
    filter_by_category,
    filter_by_month,
    find_expense,
    set_budget,
    update_expense,
)

__all__ = [
    "add_expense",
    "delete_expense",
    "filter_by_category",
    "filter_by_month",
    "find_expense",
    "set_budget",
    "update_expense",
]
