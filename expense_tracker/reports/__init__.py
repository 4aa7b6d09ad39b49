"""Reporting package."""

from expense_tracker.reports.summary import (
    budget_warning,
    build_summary,
    category_breakdown,
    total,
)

__all__ = ["budget_warning", "build_summary", "category_breakdown", "total"]
