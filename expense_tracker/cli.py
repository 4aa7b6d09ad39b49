"""
Command-line interface for the expense tracker.

Each invocation runs exactly one command: the ledger is loaded, the
command runs, and the ledger is saved only if the command changed it.

Exit codes:
    0  success
    1  the command failed (invalid input, unknown ID, unreadable ledger)
    2  the command line itself was malformed (reported by argparse)
"""

import argparse
import sys
from typing import Optional, Sequence

from pydantic import ValidationError as PydanticValidationError

from expense_tracker import __version__
from expense_tracker.activity import configure_logging
from expense_tracker.config import TrackerSettings, get_settings
from expense_tracker.exceptions import ExpenseTrackerError
from expense_tracker.presentation import (
    format_currency,
    format_expense_table,
    format_summary,
)
from expense_tracker.tracker import ExpenseTracker, create_tracker


def build_parser() -> argparse.ArgumentParser:
    """
    Build command-line argument parser.

    Returns:
        ArgumentParser with one subcommand per ledger operation
    """
    parser = argparse.ArgumentParser(
        prog="expense-tracker",
        description="CLI expense tracker application",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--data-file",
        dest="data_file",
        help="Ledger JSON file (default: EXPENSE_TRACKER_DATA_FILE or expenses.json)",
    )

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
    subparsers.required = True

    add = subparsers.add_parser("add", help="Add a new expense")
    add.add_argument("--description", required=True, help="Expense description")
    add.add_argument("--amount", required=True, help="Expense amount")
    add.add_argument("--category", help="Expense category")

    list_ = subparsers.add_parser("list", help="List all expenses")
    list_.add_argument("--category", help="Filter by category")

    update = subparsers.add_parser("update", help="Update an expense")
    update.add_argument("--id", dest="expense_id", type=int, required=True, help="Expense ID")
    update.add_argument("--description", help="New description")
    update.add_argument("--amount", help="New amount")
    update.add_argument("--category", help="New category")

    delete = subparsers.add_parser("delete", help="Delete an expense")
    delete.add_argument("--id", dest="expense_id", type=int, required=True, help="Expense ID")

    summary = subparsers.add_parser("summary", help="Show expense summary")
    summary.add_argument("--month", help="Month number (1-12)")
    summary.add_argument("--category", help="Filter by category")

    budget = subparsers.add_parser("set-budget", help="Set monthly budget")
    budget.add_argument("--amount", required=True, help="Budget amount")

    export = subparsers.add_parser("export", help="Export expenses to CSV")
    export.add_argument(
        "--output",
        help="Output file path (default: EXPENSE_TRACKER_EXPORT_FILE or expenses.csv)",
    )

    return parser


def run_command(
    args: argparse.Namespace,
    tracker: ExpenseTracker,
    settings: TrackerSettings,
) -> str:
    """
    Dispatch one parsed command and return the text to print.

    Raises:
        ExpenseTrackerError: If the command fails
    """
    symbol = settings.currency_symbol

    if args.command == "add":
        expense = tracker.add(args.description, args.amount, args.category)
        return f"Expense added successfully (ID: {expense.id})"

    if args.command == "list":
        return format_expense_table(tracker.list_expenses(args.category), symbol)

    if args.command == "update":
        tracker.update(
            args.expense_id,
            description=args.description,
            amount=args.amount,
            category=args.category,
        )
        return "Expense updated successfully"

    if args.command == "delete":
        tracker.delete(args.expense_id)
        return "Expense deleted successfully"

    if args.command == "summary":
        return format_summary(tracker.summary(args.month, args.category), symbol)

    if args.command == "set-budget":
        ledger = tracker.set_budget(args.amount)
        return f"Monthly budget set to {format_currency(ledger.budget, symbol)}"

    if args.command == "export":
        output = args.output or settings.export_file
        path = tracker.export(output)
        return f"Expenses exported to {path}"

    raise ValueError(f"Unknown command: {args.command}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    CLI entry point.

    Can be invoked:
    - As the console script: expense-tracker add --description ... --amount ...
    - As a module: python -m expense_tracker list
    - From code: main(["summary", "--month", "3"])

    Args:
        argv: Command-line arguments (None = use sys.argv)

    Returns:
        Process exit code
    """
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)

    try:
        settings = get_settings()
    except PydanticValidationError as e:
        print(f"Error: Invalid configuration: {e}", file=sys.stderr)
        return 1

    configure_logging(settings.log_level_number, settings.log_format)
    tracker = create_tracker(settings, data_file=args.data_file)

    try:
        output = run_command(args, tracker, settings)
    except ExpenseTrackerError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
