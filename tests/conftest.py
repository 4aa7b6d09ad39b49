"""Shared fixtures for the expense tracker tests."""

from datetime import date
from decimal import Decimal

import pytest

from expense_tracker.config import get_settings
from expense_tracker.models import Expense, Ledger


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Keep host EXPENSE_TRACKER_* variables out of every test."""
    for name in (
        "EXPENSE_TRACKER_DATA_FILE",
        "EXPENSE_TRACKER_EXPORT_FILE",
        "EXPENSE_TRACKER_CURRENCY_SYMBOL",
        "EXPENSE_TRACKER_LOG_LEVEL",
        "EXPENSE_TRACKER_LOG_FORMAT",
    ):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def sample_ledger() -> Ledger:
    """Two expenses in different months and categories."""
    return Ledger(
        expenses=[
            Expense(
                id=1,
                date=date(2024, 1, 15),
                description="Groceries",
                amount=Decimal("50.00"),
                category="Food",
            ),
            Expense(
                id=2,
                date=date(2024, 2, 1),
                description="Gas",
                amount=Decimal("30.00"),
                category="Transportation",
            ),
        ],
    )
