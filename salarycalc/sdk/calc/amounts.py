"""Percentage and unit arithmetic for salary amounts.

All money is handled as Decimal and rounded half-up to cents, the way
payroll figures are shown on a salary breakup.
"""

from decimal import ROUND_HALF_UP, Decimal
from typing import Optional, Union

Number = Union[Decimal, int, float, str]

CENTS = Decimal("0.01")
ZERO = Decimal("0.00")
MONTHS_PER_YEAR = 12


def to_decimal(value: Optional[Number]) -> Optional[Decimal]:
    """Convert a number to Decimal, passing None through.

    Floats go through str() so 3.25 becomes Decimal("3.25") rather than
    its binary expansion.
    """
    if value is None:
        return None
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def round2(amount: Number) -> Decimal:
    """Round to 2 decimal places (half-up)."""
    return to_decimal(amount).quantize(CENTS, rounding=ROUND_HALF_UP)


def amount_from_percentage(percentage: Optional[Number], base: Optional[Number]) -> Decimal:
    """Return percentage% of base, rounded to cents.

    Either input being zero or None short-circuits to 0.

    Example:
        amount_from_percentage(3.25, 20000)  # -> Decimal("650.00")
    """
    percentage = to_decimal(percentage)
    base = to_decimal(base)
    if not percentage or not base:
        return ZERO
    return round2(percentage / 100 * base)


def yearly_from_monthly(monthly: Number) -> Decimal:
    return to_decimal(monthly) * MONTHS_PER_YEAR


def monthly_from_yearly(yearly: Number) -> Decimal:
    return to_decimal(yearly) / MONTHS_PER_YEAR


def format_percentage(percentage: Optional[Number]) -> str:
    """Render a percentage label: 12 -> "12%", 3.25 -> "3.25%"."""
    percentage = to_decimal(percentage)
    if percentage is None:
        return "-"
    # normalize() alone turns 10 into 1E+1
    return f"{percentage.normalize():f}%"
