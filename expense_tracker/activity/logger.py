"""
Activity Logger

DESIGN DECISION: Every ledger operation is logged as a structured event.
This provides:
1. Traceability of what each invocation did
2. Debugging capability
3. JSON output that can be piped into other tools

The activity logger:
- Writes to stderr so command output on stdout stays clean
- Never persists anything (the ledger keeps no history)
"""

import logging
import sys
from typing import Optional, TextIO

import structlog

from expense_tracker.models.activity import (
    ActivityEvent,
    ActivityEventBuilder,
    ActivitySeverity,
)


def configure_logging(
    level: int = logging.WARNING,
    fmt: str = "console",
    stream: Optional[TextIO] = None,
) -> None:
    """
    Configure structlog over stdlib logging.

    Args:
        level: Minimum stdlib level that reaches the handler
        fmt: "json" for JSON lines, anything else for a console renderer
        stream: Where log lines go (stderr by default)
    """
    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))

    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(level)

    renderer = (
        structlog.processors.JSONRenderer()
        if fmt == "json"
        else structlog.dev.ConsoleRenderer(colors=False)
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


class ActivityLogger:
    """Central activity logging service."""

    def __init__(self, logger_name: str = "expense_tracker"):
        self._logger = structlog.get_logger(logger_name)

    def log(self, event: ActivityEvent) -> None:
        """Log an activity event at the level matching its severity."""
        log_dict = event.to_log_dict()
        event_name = log_dict.pop("event_type")

        if event.severity == ActivitySeverity.ERROR:
            self._logger.error(event_name, **log_dict)
        elif event.severity == ActivitySeverity.WARNING:
            self._logger.warning(event_name, **log_dict)
        elif event.severity == ActivitySeverity.DEBUG:
            self._logger.debug(event_name, **log_dict)
        else:
            self._logger.info(event_name, **log_dict)

    def log_expense_added(self, expense_id: int, amount: str, category: str) -> None:
        """Log a new expense."""
        self.log(ActivityEventBuilder.expense_added(
            expense_id=expense_id,
            amount=amount,
            category=category,
        ))

    def log_expense_updated(self, expense_id: int, changed_fields: list[str]) -> None:
        """Log an expense update."""
        self.log(ActivityEventBuilder.expense_updated(
            expense_id=expense_id,
            changed_fields=changed_fields,
        ))

    def log_expense_deleted(self, expense_id: int) -> None:
        """Log an expense deletion."""
        self.log(ActivityEventBuilder.expense_deleted(expense_id))

    def log_budget_set(self, amount: str) -> None:
        """Log a budget change."""
        self.log(ActivityEventBuilder.budget_set(amount))

    def log_expenses_listed(self, category: Optional[str], result_count: int) -> None:
        self.log(ActivityEventBuilder.expenses_listed(
            category=category,
            result_count=result_count,
        ))

    def log_summary_generated(
        self,
        month: Optional[int],
        category: Optional[str],
        total: str,
        expense_count: int,
    ) -> None:
        self.log(ActivityEventBuilder.summary_generated(
            month=month,
            category=category,
            total=total,
            expense_count=expense_count,
        ))

    def log_budget_exceeded(self, month: int, total: str, budget: str) -> None:
        self.log(ActivityEventBuilder.budget_exceeded(
            month=month,
            total=total,
            budget=budget,
        ))

    def log_ledger_exported(self, path: str, row_count: int) -> None:
        self.log(ActivityEventBuilder.ledger_exported(
            path=path,
            row_count=row_count,
        ))

    def log_operation_failed(
        self,
        operation: str,
        error: Exception,
        expense_id: Optional[int] = None,
    ) -> None:
        """Log a failed operation."""
        self.log(ActivityEventBuilder.operation_failed(
            operation=operation,
            error=error,
            expense_id=expense_id,
        ))
