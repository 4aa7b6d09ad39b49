"""
Input Validation

DESIGN DECISION: Raw user input (command-line text) is parsed and checked
here, before it reaches any ledger operation. A value that fails
validation aborts the whole operation; nothing is written.

IMPORTANT: Validation NEVER silently fixes issues.
A negative amount is rejected, not made positive.
"""

from decimal import Decimal, InvalidOperation
from typing import Union

from expense_tracker.exceptions import InvalidAmountError, InvalidMonthError


AmountInput = Union[str, int, float, Decimal]

# Upper bound keeps every amount printable to the cent
MAX_AMOUNT = Decimal("1e15")


def validate_amount(raw: AmountInput) -> Decimal:
    """
    Parse and check an amount.

    Args:
        raw: Amount as typed by the user, or an already numeric value

    Returns:
        The amount as a Decimal

    Raises:
        InvalidAmountError: If the value is not a number, is NaN or
            infinite, is negative, or is not below MAX_AMOUNT.
            Zero is allowed.
    """
    if isinstance(raw, bool):
        raise InvalidAmountError(f"Amount must be a number, got {raw!r}")

    if isinstance(raw, Decimal):
        amount = raw
    else:
        # float goes through str() so 0.1 stays 0.1
        text = str(raw).strip()
        try:
            amount = Decimal(text)
        except InvalidOperation:
            raise InvalidAmountError(f"Amount must be a number, got {raw!r}") from None

    if not amount.is_finite():
        raise InvalidAmountError(f"Amount must be a finite number, got {raw!r}")

    if amount < 0:
        raise InvalidAmountError(f"Amount must be a positive number, got {raw!r}")

    if amount >= MAX_AMOUNT:
        raise InvalidAmountError(
            f"Amount must be less than {MAX_AMOUNT:f}, got {raw!r}"
        )

    # normalizes -0 to 0
    return amount + Decimal(0)


def validate_month(raw: Union[int, str]) -> int:
    """
    Parse and check a month number.

    Raises:
        InvalidMonthError: If the value is not an integer in 1-12
    """
    if isinstance(raw, bool):
        raise InvalidMonthError(f"Month must be an integer, got {raw!r}")

    if isinstance(raw, int):
        month = raw
    else:
        try:
            month = int(str(raw).strip())
        except ValueError:
            raise InvalidMonthError(f"Month must be an integer, got {raw!r}") from None

    if month < 1 or month > 12:
        raise InvalidMonthError("Month must be between 1 and 12")

    return month
