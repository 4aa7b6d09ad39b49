"""Input validation package."""

from expense_tracker.validation.validator import (
    MAX_AMOUNT,
    AmountInput,
    validate_amount,
    validate_month,
)

__all__ = ["MAX_AMOUNT", "AmountInput", "validate_amount", "validate_month"]
