"""
Activity Models for Expense Tracker

Every ledger operation emits one structured event describing what happened.
This provides:
1. Debugging information when things go wrong
2. A machine-readable trace when logs are rendered as JSON

DESIGN DECISION: Activity events are log lines only. They are never written
to the ledger file, and the ledger keeps no history of past values.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, Field


class ActivityEventType(str, Enum):
    """Types of events the tracker emits."""
    # Ledger mutations
    EXPENSE_ADDED = "expense_added"
    EXPENSE_UPDATED = "expense_updated"
    EXPENSE_DELETED = "expense_deleted"
    BUDGET_SET = "budget_set"

    # Reads
    EXPENSES_LISTED = "expenses_listed"
    SUMMARY_GENERATED = "summary_generated"
    BUDGET_EXCEEDED = "budget_exceeded"
    LEDGER_EXPORTED = "ledger_exported"

    # Failures
    OPERATION_FAILED = "operation_failed"


class ActivitySeverity(str, Enum):
    """Severity level for activity events."""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class ActivityEvent(BaseModel):
    """A single activity event."""

    event_id: UUID = Field(
        default_factory=uuid4,
        description="Unique event identifier"
    )
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="When the event occurred (UTC)"
    )
    event_type: ActivityEventType
    severity: ActivitySeverity = ActivitySeverity.INFO

    expense_id: Optional[int] = Field(
        default=None,
        description="Expense this event relates to, if any"
    )
    description: str = Field(
        ...,
        max_length=500,
        description="Human-readable description of what happened"
    )
    details: dict[str, Any] = Field(default_factory=dict)

    error_type: Optional[str] = None
    error_message: Optional[str] = None

    def to_log_dict(self) -> dict:
        """
        Convert to a dictionary suitable for structured logging.
        """
        return {
            "event_id": str(self.event_id),
            "timestamp": self.timestamp.isoformat(),
            "event_type": self.event_type.value,
            "severity": self.severity.value,
            "expense_id": self.expense_id,
            "description": self.description,
            "details": self.details,
            "error_type": self.error_type,
            "error_message": self.error_message,
        }


class ActivityEventBuilder:
    """
    Helper class to build activity events with common patterns.

    Usage:
        event = ActivityEventBuilder.expense_added(expense_id, "12.50", "Food")
        event = ActivityEventBuilder.operation_failed("delete", error)
    """

    @staticmethod
    def expense_added(
        expense_id: int,
        amount: str,
        category: str,
    ) -> ActivityEvent:
        return ActivityEvent(
            event_type=ActivityEventType.EXPENSE_ADDED,
            expense_id=expense_id,
            description=f"Expense {expense_id} added: {amount} in {category}",
            details={
                "amount": amount,
                "category": category,
            },
        )

    @staticmethod
    def expense_updated(
        expense_id: int,
        changed_fields: list[str],
    ) -> ActivityEvent:
        return ActivityEvent(
            event_type=ActivityEventType.EXPENSE_UPDATED,
            expense_id=expense_id,
            description=f"Expense {expense_id} updated",
            details={
                "changed_fields": changed_fields,
            },
        )

    @staticmethod
    def expense_deleted(expense_id: int) -> ActivityEvent:
        return ActivityEvent(
            event_type=ActivityEventType.EXPENSE_DELETED,
            expense_id=expense_id,
            description=f"Expense {expense_id} deleted",
        )

    @staticmethod
    def budget_set(amount: str) -> ActivityEvent:
        return ActivityEvent(
            event_type=ActivityEventType.BUDGET_SET,
            description=f"Monthly budget set to {amount}",
            details={
                "budget": amount,
            },
        )

    @staticmethod
    def expenses_listed(
        category: Optional[str],
        result_count: int,
    ) -> ActivityEvent:
        return ActivityEvent(
            event_type=ActivityEventType.EXPENSES_LISTED,
            severity=ActivitySeverity.DEBUG,
            description=f"Listed {result_count} expenses",
            details={
                "category": category,
                "result_count": result_count,
            },
        )

    @staticmethod
    def summary_generated(
        month: Optional[int],
        category: Optional[str],
        total: str,
        expense_count: int,
    ) -> ActivityEvent:
        return ActivityEvent(
            event_type=ActivityEventType.SUMMARY_GENERATED,
            severity=ActivitySeverity.DEBUG,
            description=f"Summary over {expense_count} expenses: {total}",
            details={
                "month": month,
                "category": category,
                "total": total,
                "expense_count": expense_count,
            },
        )

    @staticmethod
    def budget_exceeded(
        month: int,
        total: str,
        budget: str,
    ) -> ActivityEvent:
        return ActivityEvent(
            event_type=ActivityEventType.BUDGET_EXCEEDED,
            severity=ActivitySeverity.WARNING,
            description=f"Spending {total} exceeds budget {budget}",
            details={
                "month": month,
                "total": total,
                "budget": budget,
            },
        )

    @staticmethod
    def ledger_exported(
        path: str,
        row_count: int,
    ) -> ActivityEvent:
        return ActivityEvent(
            event_type=ActivityEventType.LEDGER_EXPORTED,
            description=f"Exported {row_count} expenses to {path}",
            details={
                "path": path,
                "row_count": row_count,
            },
        )

    @staticmethod
    def operation_failed(
        operation: str,
        error: Exception,
        expense_id: Optional[int] = None,
    ) -> ActivityEvent:
        return ActivityEvent(
            event_type=ActivityEventType.OPERATION_FAILED,
            severity=ActivitySeverity.WARNING,
            expense_id=expense_id,
            description=f"Operation failed: {operation}",
            details={
                "operation": operation,
            },
            error_type=type(error).__name__,
            error_message=str(error),
        )
