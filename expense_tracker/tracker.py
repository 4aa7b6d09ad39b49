"""
Main Orchestrator for Expense Tracker

This module ties the components together. Each public method of
ExpenseTracker is one complete invocation:

    load ledger -> run operation / report -> save (mutations only)

DESIGN DECISION: The orchestrator enforces the boundaries:
- The store is injected; there is no global ledger path
- A failed operation never reaches save(), so the file is untouched
- Every operation is logged as an activity event
"""

from datetime import date
from pathlib import Path
from typing import Callable, Optional, TypeVar, Union

from expense_tracker.activity import ActivityLogger
from expense_tracker.config import TrackerSettings, get_settings
from expense_tracker.exceptions import ExpenseTrackerError
from expense_tracker.ledger import (
    add_expense,
    delete_expense,
    filter_by_category,
    find_expense,
    set_budget as apply_budget,
    update_expense,
)
from expense_tracker.models.expense import Expense, ExpenseSummary, ExpenseUpdate, Ledger
from expense_tracker.reports import build_summary
from expense_tracker.services.export import export_expenses_csv
from expense_tracker.services.storage import (
    JsonFileLedgerStorage,
    LedgerStorageInterface,
)
from expense_tracker.validation import AmountInput, validate_amount


T = TypeVar("T")


class ExpenseTracker:
    """
    Orchestrates ledger operations against an injected store.

    Flow for mutations:
    1. Load → whole ledger from storage
    2. Apply → pure ledger operation (validates its input)
    3. Save → whole ledger back to storage

    Reads (list, summary, export) never save.
    """

    def __init__(
        self,
        storage: LedgerStorageInterface,
        activity_logger: Optional[ActivityLogger] = None,
        clock: Optional[Callable[[], date]] = None,
    ):
        self._storage = storage
        self._activity_logger = activity_logger or ActivityLogger()
        self._clock = clock or date.today

    def _run(
        self,
        operation: str,
        action: Callable[[], T],
        expense_id: Optional[int] = None,
    ) -> T:
        """Run an action, logging and re-raising tracker errors."""
        try:
            return action()
        except ExpenseTrackerError as e:
            self._activity_logger.log_operation_failed(
                operation=operation,
                error=e,
                expense_id=expense_id,
            )
            raise

    def add(
        self,
        description: str,
        amount: AmountInput,
        category: Optional[str] = None,
    ) -> Expense:
        """Add an expense and return the stored record."""
        def action() -> Expense:
            ledger = self._storage.load()
            new_ledger, new_id = add_expense(
                ledger,
                description=description,
                amount=amount,
                category=category,
                today=self._clock(),
            )
            self._storage.save(new_ledger)
            return find_expense(new_ledger, new_id)

        expense = self._run("add", action)
        self._activity_logger.log_expense_added(
            expense_id=expense.id,
            amount=str(expense.amount),
            category=expense.category,
        )
        return expense

    def list_expenses(self, category: Optional[str] = None) -> list[Expense]:
        """List expenses in ledger order, optionally by category."""
        def action() -> list[Expense]:
            expenses = self._storage.load().expenses
            if category:
                expenses = filter_by_category(expenses, category)
            return list(expenses)

        expenses = self._run("list", action)
        self._activity_logger.log_expenses_listed(
            category=category,
            result_count=len(expenses),
        )
        return expenses

    def update(
        self,
        expense_id: int,
        description: Optional[str] = None,
        amount: Optional[AmountInput] = None,
        category: Optional[str] = None,
    ) -> Expense:
        """
        Update the supplied fields of one expense.

        Any argument left as None keeps its previous value. An amount of 0
        is a real value and is applied. An unknown ID is reported before
        any supplied value is validated.
        """
        def action() -> Expense:
            ledger = self._storage.load()
            find_expense(ledger, expense_id)
            changes = ExpenseUpdate(
                description=description,
                amount=validate_amount(amount) if amount is not None else None,
                category=category,
            )
            new_ledger = update_expense(ledger, expense_id, changes)
            if new_ledger is not ledger:
                self._storage.save(new_ledger)
            return find_expense(new_ledger, expense_id)

        expense = self._run("update", action, expense_id=expense_id)
        changed_fields = [
            name
            for name, value in (
                ("description", description),
                ("amount", amount),
                ("category", category),
            )
            if value is not None
        ]
        self._activity_logger.log_expense_updated(
            expense_id=expense_id,
            changed_fields=changed_fields,
        )
        return expense

    def delete(self, expense_id: int) -> None:
        """Delete one expense."""
        def action() -> None:
            ledger = self._storage.load()
            self._storage.save(delete_expense(ledger, expense_id))

        self._run("delete", action, expense_id=expense_id)
        self._activity_logger.log_expense_deleted(expense_id)

    def summary(
        self,
        month: Optional[Union[int, str]] = None,
        category: Optional[str] = None,
    ) -> ExpenseSummary:
        """Build the summary report for the current ledger."""
        def action() -> ExpenseSummary:
            ledger = self._storage.load()
            return build_summary(
                ledger,
                month=month,
                category=category,
                today=self._clock(),
            )

        result = self._run("summary", action)
        self._activity_logger.log_summary_generated(
            month=result.month,
            category=result.category,
            total=str(result.total),
            expense_count=result.expense_count,
        )
        if result.warning is not None:
            self._activity_logger.log_budget_exceeded(
                month=result.warning.month,
                total=str(result.warning.total),
                budget=str(result.warning.budget),
            )
        return result

    def set_budget(self, amount: AmountInput) -> Ledger:
        """Set the monthly budget and return the saved ledger."""
        def action() -> Ledger:
            ledger = self._storage.load()
            new_ledger = apply_budget(ledger, amount)
            self._storage.save(new_ledger)
            return new_ledger

        ledger = self._run("set-budget", action)
        self._activity_logger.log_budget_set(str(ledger.budget))
        return ledger

    def export(self, output: Union[str, Path]) -> Path:
        """Export every expense to a CSV file."""
        def action() -> tuple[Path, int]:
            expenses = self._storage.load().expenses
            return export_expenses_csv(expenses, output), len(expenses)

        path, row_count = self._run("export", action)
        self._activity_logger.log_ledger_exported(
            path=str(path),
            row_count=row_count,
        )
        return path


def create_tracker(
    settings: Optional[TrackerSettings] = None,
    data_file: Optional[Union[str, Path]] = None,
) -> ExpenseTracker:
    """
    Factory function to create a tracker backed by the JSON ledger file.

    Args:
        settings: Settings to use (defaults to get_settings())
        data_file: Overrides settings.data_file when given

    Returns:
        An ExpenseTracker with JSON file storage and activity logging
    """
    settings = settings or get_settings()
    storage = JsonFileLedgerStorage(data_file or settings.data_file)
    return ExpenseTracker(storage=storage, activity_logger=ActivityLogger())
