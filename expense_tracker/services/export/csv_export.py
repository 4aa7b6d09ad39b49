"""
CSV Export

Writes the ledger as a CSV file with a fixed column order so it can be
opened in any spreadsheet tool.
"""

import csv
from pathlib import Path
from typing import Iterable, Union

from expense_tracker.exceptions import StorageError
from expense_tracker.models.expense import Expense


EXPORT_COLUMNS = ["ID", "Date", "Description", "Amount", "Category"]


def _expense_to_row(expense: Expense) -> list:
    """Convert an Expense to a CSV row."""
    return [
        str(expense.id),
        expense.date.isoformat(),
        expense.description,
        f"{expense.amount:f}",
        expense.category,
    ]


def export_expenses_csv(expenses: Iterable[Expense], path: Union[str, Path]) -> Path:
    """
    Write expenses to a CSV file, header first, in ledger order.

    Args:
        expenses: Expenses to export
        path: Target file; parent directories are created

    Returns:
        The path written to

    Raises:
        StorageError: If the file cannot be written
    """
    target = Path(path)
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        with target.open("w", newline="", encoding="utf-8") as handle:
            writer = csv.writer(handle)
            writer.writerow(EXPORT_COLUMNS)
            for expense in expenses:
                writer.writerow(_expense_to_row(expense))
    except OSError as e:
        raise StorageError(f"Failed to export expenses to {target}: {e}") from e
    return target
