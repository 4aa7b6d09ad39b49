"""
Core Data Models for Expense Tracker

These models define the strict schemas for all data flowing through the system.
They are designed to:
1. Enforce type safety at runtime
2. Keep amounts as Decimal end to end (no float rounding)
3. Be serializable for the JSON ledger document
4. Make "field not supplied" explicit for partial updates

DESIGN DECISION: Amount parsing happens in the validation layer, which
raises our own error types. These models are the second line of defence:
a record that slipped past validation still cannot be constructed invalid.
"""

import datetime
from decimal import Decimal
from typing import Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)


DEFAULT_CATEGORY = "Uncategorized"


# =============================================================================
# CORE LEDGER MODELS
# =============================================================================

class Expense(BaseModel):
    """
    A single expense entry.

    The date is stamped when the expense is added and never changes
    afterwards. Updates only touch description, amount and category.
    """
    model_config = ConfigDict(str_strip_whitespace=True)

    id: int = Field(
        ...,
        ge=1,
        description="Unique, monotonically assigned expense ID"
    )
    date: datetime.date = Field(
        ...,
        description="Day the expense was recorded"
    )
    description: str = Field(
        ...,
        description="What the money was spent on"
    )
    amount: Decimal = Field(
        ...,
        ge=0,
        allow_inf_nan=False,
        description="Amount spent (currency-agnostic)"
    )
    category: str = Field(
        default=DEFAULT_CATEGORY,
        min_length=1,
        description="Expense category"
    )

    @field_validator('category', mode='before')
    @classmethod
    def default_blank_category(cls, v: Optional[str]) -> str:
        """Blank or missing categories fall back to the default."""
        if v is None or (isinstance(v, str) and not v.strip()):
            return DEFAULT_CATEGORY
        return v


class Ledger(BaseModel):
    """
    The full persisted state: every expense plus the monthly budget.

    Expenses are kept in insertion order, which is also ID order.
    """

    expenses: list[Expense] = Field(
        default_factory=list,
        description="All expenses in insertion order"
    )
    budget: Optional[Decimal] = Field(
        default=None,
        ge=0,
        allow_inf_nan=False,
        description="Monthly budget; None means no warnings are computed"
    )
    last_id: int = Field(
        default=0,
        ge=0,
        description="Highest ID ever assigned, kept so deleted IDs are not reused"
    )

    @model_validator(mode='after')
    def validate_unique_ids(self) -> 'Ledger':
        """Expense IDs must be unique within the ledger."""
        ids = [expense.id for expense in self.expenses]
        if len(ids) != len(set(ids)):
            raise ValueError("Duplicate expense IDs in ledger")
        return self

    @property
    def next_id(self) -> int:
        """
        ID the next added expense will receive.

        Files written without last_id fall back to the highest stored ID.
        """
        highest = max((expense.id for expense in self.expenses), default=0)
        return max(self.last_id, highest) + 1


class ExpenseUpdate(BaseModel):
    """
    Partial update for an existing expense.

    CRITICAL: None means "not supplied". Any other value, including an
    amount of 0, is applied.
    """

    description: Optional[str] = None
    amount: Optional[Decimal] = Field(
        default=None,
        ge=0,
        allow_inf_nan=False,
    )
    category: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        """Check if no field was supplied."""
        return (
            self.description is None
            and self.amount is None
            and self.category is None
        )


# =============================================================================
# REPORTING MODELS
# =============================================================================

class BudgetWarning(BaseModel):
    """Spending for a month went over the budget."""

    month: int = Field(
        ...,
        ge=1,
        le=12,
        description="Month the total was computed for"
    )
    total: Decimal = Field(
        ...,
        description="Spending in that month"
    )
    budget: Decimal = Field(
        ...,
        description="The budget that was exceeded"
    )


class ExpenseSummary(BaseModel):
    """
    Result of the summary report.

    The breakdown keeps categories in the order they first appear.
    """

    month: Optional[int] = Field(
        default=None,
        ge=1,
        le=12,
        description="Month filter, if one was applied"
    )
    category: Optional[str] = Field(
        default=None,
        description="Category filter, if one was applied"
    )
    expense_count: int = Field(
        default=0,
        ge=0,
        description="Number of expenses included"
    )
    total: Decimal = Field(
        default=Decimal("0"),
        description="Sum of included amounts"
    )
    breakdown: dict[str, Decimal] = Field(
        default_factory=dict,
        description="Per-category subtotals"
    )
    warning: Optional[BudgetWarning] = None
