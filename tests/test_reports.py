"""Tests for the reporting engine."""

import pytest
from datetime import date
from decimal import Decimal

from expense_tracker.exceptions import InvalidMonthError
from expense_tracker.ledger import add_expense, filter_by_category, set_budget
from expense_tracker.models import Ledger
from expense_tracker.reports import (
    budget_warning,
    build_summary,
    category_breakdown,
    total,
)


MARCH = date(2024, 3, 15)


@pytest.fixture
def mixed_ledger() -> Ledger:
    """Several categories, interleaved, across two months."""
    ledger = Ledger()
    entries = [
        ("Groceries", "50.00", "Food", date(2024, 3, 1)),
        ("Bus", "2.75", "Transportation", date(2024, 3, 2)),
        ("Dinner", "31.20", "Food", date(2024, 3, 9)),
        ("Book", "12.99", None, date(2024, 2, 20)),
        ("Train", "8.10", "Transportation", date(2024, 2, 21)),
    ]
    for description, amount, category, day in entries:
        ledger, _ = add_expense(ledger, description, amount, category, today=day)
    return ledger


class TestTotals:
    """Tests for total and category_breakdown."""

    def test_total_empty(self):
        """Test that nothing sums to zero."""
        assert total([]) == Decimal("0")

    def test_total(self, mixed_ledger):
        """Test summing amounts exactly."""
        assert total(mixed_ledger.expenses) == Decimal("105.04")

    def test_breakdown_first_occurrence_order(self, mixed_ledger):
        """Test categories appear in first-seen order."""
        breakdown = category_breakdown(mixed_ledger.expenses)
        assert list(breakdown) == ["Food", "Transportation", "Uncategorized"]
        assert breakdown["Food"] == Decimal("81.20")
        assert breakdown["Transportation"] == Decimal("10.85")
        assert breakdown["Uncategorized"] == Decimal("12.99")

    def test_breakdown_sums_to_total(self, mixed_ledger):
        """Test breakdown values add up to the total."""
        breakdown = category_breakdown(mixed_ledger.expenses)
        assert sum(breakdown.values()) == total(mixed_ledger.expenses)

    def test_category_totals_sum_to_total(self, mixed_ledger):
        """Test per-category filtered totals add up to the total."""
        categories = {e.category for e in mixed_ledger.expenses}
        per_category = sum(
            total(filter_by_category(mixed_ledger.expenses, c)) for c in categories
        )
        assert per_category == total(mixed_ledger.expenses)


class TestBudgetWarning:
    """Tests for budget_warning."""

    def test_no_budget_no_warning(self, mixed_ledger):
        """Test that an unset budget never warns."""
        assert budget_warning(mixed_ledger.expenses, None, today=MARCH) is None

    def test_exceeded_in_current_month(self, mixed_ledger):
        """Test warning against the current month by default."""
        warning = budget_warning(mixed_ledger.expenses, Decimal("40"), today=MARCH)
        assert warning is not None
        assert warning.month == 3
        assert warning.total == Decimal("83.95")
        assert warning.budget == Decimal("40")

    def test_explicit_month(self, mixed_ledger):
        """Test that an explicit month overrides the current month."""
        assert budget_warning(mixed_ledger.expenses, Decimal("40"), month=2, today=MARCH) is None
        warning = budget_warning(mixed_ledger.expenses, Decimal("20"), month=2, today=MARCH)
        assert warning.total == Decimal("21.09")

    def test_equal_to_budget_is_not_exceeded(self, mixed_ledger):
        """Test that the sum must strictly exceed the budget."""
        assert budget_warning(mixed_ledger.expenses, Decimal("83.95"), today=MARCH) is None

    def test_zero_budget_warns_on_any_spending(self, mixed_ledger):
        """Test that a budget of zero is a real budget."""
        assert budget_warning(mixed_ledger.expenses, Decimal("0"), today=MARCH) is not None

    def test_no_spending_this_month(self, mixed_ledger):
        """Test that a month without expenses never warns."""
        assert budget_warning(
            mixed_ledger.expenses, Decimal("0"), today=date(2024, 7, 1)
        ) is None


class TestBuildSummary:
    """Tests for build_summary."""

    def test_two_expense_scenario(self):
        """Test the two-expense summary with no filters."""
        ledger, _ = add_expense(Ledger(), "Groceries", "50.00", "Food", today=MARCH)
        ledger, _ = add_expense(ledger, "Gas", "30.00", "Transportation", today=MARCH)
        summary = build_summary(ledger, today=MARCH)
        assert summary.total == Decimal("80.00")
        assert summary.breakdown == {
            "Food": Decimal("50.00"),
            "Transportation": Decimal("30.00"),
        }
        assert summary.warning is None
        assert summary.month is None
        assert summary.expense_count == 2

    def test_month_filter(self, mixed_ledger):
        """Test filtering by month."""
        summary = build_summary(mixed_ledger, month="2", today=MARCH)
        assert summary.month == 2
        assert summary.total == Decimal("21.09")
        assert list(summary.breakdown) == ["Uncategorized", "Transportation"]

    def test_category_filter(self, mixed_ledger):
        """Test filtering by category."""
        summary = build_summary(mixed_ledger, category="Food", today=MARCH)
        assert summary.category == "Food"
        assert summary.total == Decimal("81.20")

    def test_invalid_month(self, mixed_ledger):
        """Test that an out-of-range month raises."""
        with pytest.raises(InvalidMonthError):
            build_summary(mixed_ledger, month=13, today=MARCH)

    def test_budget_warning_included(self):
        """Test the budget scenario: 50 spent against a budget of 40."""
        ledger = set_budget(Ledger(), "40")
        ledger, _ = add_expense(ledger, "Groceries", "50.00", "Food", today=MARCH)
        summary = build_summary(ledger, today=MARCH)
        assert summary.warning is not None
        assert summary.warning.total == Decimal("50.00")
        assert summary.warning.budget == Decimal("40")

    def test_budget_checked_against_requested_month(self, mixed_ledger):
        """Test that the warning uses the month filter as its target."""
        ledger = set_budget(mixed_ledger, "20")
        summary = build_summary(ledger, month=2, today=MARCH)
        assert summary.warning is not None
        assert summary.warning.month == 2


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
