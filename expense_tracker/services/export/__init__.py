"""Export services package."""

from expense_tracker.services.export.csv_export import (
    EXPORT_COLUMNS,
    export_expenses_csv,
)

__all__ = ["EXPORT_COLUMNS", "export_expenses_csv"]
