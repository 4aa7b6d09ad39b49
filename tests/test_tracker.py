"""Integration tests for the ExpenseTracker orchestrator."""

import pytest
from datetime import date
from decimal import Decimal

from expense_tracker.config import TrackerSettings
from expense_tracker.exceptions import (
    CorruptStoreError,
    ExpenseNotFoundError,
    InvalidAmountError,
    InvalidMonthError,
)
from expense_tracker.services.storage import InMemoryLedgerStorage, JsonFileLedgerStorage
from expense_tracker.tracker import ExpenseTracker, create_tracker


TODAY = date(2024, 3, 15)


class RecordingActivityLogger:
    """Collects logged calls instead of writing them."""

    def __init__(self):
        self.calls = []

    def __getattr__(self, name):
        if not name.startswith("log_"):
            raise AttributeError(name)

        def record(*args, **kwargs):
            self.calls.append((name, kwargs or args))
        return record

    def names(self):
        return [name for name, _ in self.calls]


@pytest.fixture
def storage():
    return InMemoryLedgerStorage()


@pytest.fixture
def activity():
    return RecordingActivityLogger()


@pytest.fixture
def tracker(storage, activity):
    return ExpenseTracker(storage, activity_logger=activity, clock=lambda: TODAY)


class TestAddAndList:
    """Tests for add and list_expenses."""

    def test_add_returns_stored_expense(self, tracker, storage):
        """Test the returned record matches what was saved."""
        expense = tracker.add("Groceries", "50.00", "Food")
        assert expense.id == 1
        assert expense.date == TODAY
        assert storage.load().expenses == [expense]
        assert storage.save_count == 1

    def test_add_then_list(self, tracker):
        """Test listing returns expenses in insertion order."""
        tracker.add("Groceries", "50.00", "Food")
        tracker.add("Gas", "30.00", "Transportation")
        assert [e.description for e in tracker.list_expenses()] == ["Groceries", "Gas"]

    def test_list_by_category(self, tracker):
        tracker.add("Groceries", "50.00", "Food")
        tracker.add("Gas", "30.00", "Transportation")
        assert [e.id for e in tracker.list_expenses("Transportation")] == [2]
        assert tracker.list_expenses("Rent") == []

    def test_list_does_not_save(self, tracker, storage):
        tracker.add("Groceries", "50.00", "Food")
        tracker.list_expenses()
        assert storage.save_count == 1

    def test_invalid_amount_not_saved(self, tracker, storage, activity):
        """Test a failed add never reaches the store and is logged."""
        with pytest.raises(InvalidAmountError):
            tracker.add("Bad", "-5")
        assert storage.save_count == 0
        assert storage.load().expenses == []
        assert activity.calls[-1][0] == "log_operation_failed"
        assert activity.calls[-1][1]["operation"] == "add"

    def test_add_logs_event(self, tracker, activity):
        tracker.add("Groceries", "50.00", "Food")
        assert activity.calls == [
            ("log_expense_added", {"expense_id": 1, "amount": "50.00", "category": "Food"}),
        ]


class TestUpdateAndDelete:
    """Tests for update and delete."""

    def test_update_amount_to_zero(self, tracker, storage):
        """Test that zero is applied as a real amount."""
        tracker.add("Groceries", "50.00", "Food")
        expense = tracker.update(1, amount="0")
        assert expense.amount == Decimal("0")
        assert storage.load().expenses[0].amount == Decimal("0")

    def test_update_keeps_other_fields(self, tracker):
        tracker.add("Groceries", "50.00", "Food")
        expense = tracker.update(1, description="Market")
        assert expense.description == "Market"
        assert expense.amount == Decimal("50.00")
        assert expense.category == "Food"
        assert expense.date == TODAY

    def test_update_without_changes_does_not_save(self, tracker, storage):
        tracker.add("Groceries", "50.00", "Food")
        tracker.update(1)
        assert storage.save_count == 1

    def test_update_unknown_id(self, tracker, storage):
        tracker.add("Groceries", "50.00", "Food")
        with pytest.raises(ExpenseNotFoundError):
            tracker.update(99, description="X")
        assert storage.save_count == 1

    def test_update_unknown_id_reported_before_amount(self, tracker, activity):
        """Test a missing ID wins over an invalid amount."""
        with pytest.raises(ExpenseNotFoundError):
            tracker.update(99, amount="abc")
        assert activity.calls[-1][1]["error"].expense_id == 99

    def test_update_invalid_amount(self, tracker, storage):
        """Test that a bad amount leaves the record unchanged."""
        tracker.add("Groceries", "50.00", "Food")
        with pytest.raises(InvalidAmountError):
            tracker.update(1, description="Changed", amount="abc")
        assert storage.load().expenses[0].description == "Groceries"
        assert storage.save_count == 1

    def test_delete(self, tracker, storage, activity):
        tracker.add("Groceries", "50.00", "Food")
        tracker.add("Gas", "30.00", "Transportation")
        tracker.delete(1)
        assert [e.id for e in storage.load().expenses] == [2]
        assert "log_expense_deleted" in activity.names()

    def test_delete_unknown_id(self, tracker, storage, activity):
        """Test deleting a missing ID saves nothing and logs the failure."""
        tracker.add("Groceries", "50.00", "Food")
        with pytest.raises(ExpenseNotFoundError):
            tracker.delete(99)
        assert storage.save_count == 1
        assert activity.calls[-1][1]["expense_id"] == 99

    def test_ids_not_reused_across_invocations(self, storage, activity):
        """Test monotonic IDs with a fresh tracker per call, as in the CLI."""
        def fresh():
            return ExpenseTracker(storage, activity_logger=activity, clock=lambda: TODAY)

        fresh().add("A", "1")
        fresh().add("B", "2")
        fresh().delete(2)
        assert fresh().add("C", "3").id == 3


class TestSummaryAndBudget:
    """Tests for summary and set_budget."""

    def test_summary(self, tracker):
        tracker.add("Groceries", "50.00", "Food")
        tracker.add("Gas", "30.00", "Transportation")
        result = tracker.summary()
        assert result.total == Decimal("80.00")
        assert result.breakdown == {
            "Food": Decimal("50.00"),
            "Transportation": Decimal("30.00"),
        }
        assert result.warning is None

    def test_budget_exceeded(self, tracker, activity):
        """Test the warning for the current month and its log event."""
        tracker.set_budget("40")
        tracker.add("Groceries", "50.00", "Food")
        result = tracker.summary()
        assert result.warning is not None
        assert result.warning.month == 3
        assert "log_budget_exceeded" in activity.names()

    def test_set_budget_persists(self, tracker, storage):
        ledger = tracker.set_budget("250")
        assert ledger.budget == Decimal("250")
        assert storage.load().budget == Decimal("250")

    def test_set_budget_invalid(self, tracker, storage):
        with pytest.raises(InvalidAmountError):
            tracker.set_budget("lots")
        assert storage.save_count == 0

    def test_summary_invalid_month(self, tracker):
        with pytest.raises(InvalidMonthError):
            tracker.summary(month="13")

    def test_summary_does_not_save(self, tracker, storage):
        tracker.add("Groceries", "50.00", "Food")
        tracker.summary()
        assert storage.save_count == 1


class TestExportAndFactory:
    """Tests for export and create_tracker."""

    def test_export(self, tracker, tmp_path):
        tracker.add("Groceries", "50.00", "Food")
        path = tracker.export(tmp_path / "out.csv")
        assert path.read_text(encoding="utf-8").splitlines()[1] == (
            "1,2024-03-15,Groceries,50.00,Food"
        )

    def test_create_tracker_uses_settings(self, tmp_path):
        """Test the factory wires a JSON store at the configured path."""
        settings = TrackerSettings(data_file=tmp_path / "ledger.json")
        tracker = create_tracker(settings)
        tracker.add("Groceries", "50.00", "Food")
        assert JsonFileLedgerStorage(tmp_path / "ledger.json").load().expenses[0].id == 1

    def test_create_tracker_data_file_override(self, tmp_path):
        settings = TrackerSettings(data_file=tmp_path / "ledger.json")
        tracker = create_tracker(settings, data_file=tmp_path / "other.json")
        tracker.add("Groceries", "50.00", "Food")
        assert (tmp_path / "other.json").exists()
        assert not (tmp_path / "ledger.json").exists()

    def test_corrupt_file_surfaces(self, tmp_path):
        path = tmp_path / "ledger.json"
        path.write_text("oops", encoding="utf-8")
        tracker = create_tracker(TrackerSettings(data_file=path))
        with pytest.raises(CorruptStoreError):
            tracker.list_expenses()
        assert path.read_text(encoding="utf-8") == "oops"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
