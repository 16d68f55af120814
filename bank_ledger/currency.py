"""
Amount Handling Module

Validation, exact arithmetic and display formatting for
monetary amounts. NEVER uses float for monetary values.
"""

from decimal import (
    Decimal, Context, ROUND_HALF_UP, MAX_PREC, MAX_EMAX, MIN_EMIN,
    Inexact, InvalidOperation, DivisionByZero, Overflow
)
from typing import Union

from .exceptions import NullInput, InvalidArgument

# Unbounded precision so sums never round. Inexact is trapped: if a
# result would ever need rounding we fail loudly instead.
EXACT_CONTEXT = Context(
    prec=MAX_PREC, Emax=MAX_EMAX, Emin=MIN_EMIN,
    traps=[InvalidOperation, DivisionByZero, Overflow, Inexact]
)

# Display rounding only; balances themselves are never quantized
DISPLAY_CONTEXT = Context(
    prec=MAX_PREC, Emax=MAX_EMAX, Emin=MIN_EMIN,
    rounding=ROUND_HALF_UP,
    traps=[InvalidOperation, DivisionByZero, Overflow]
)

AmountLike = Union[Decimal, int]

# Largest power of ten and finest fraction an amount may carry. Keeps
# exact sums to a bounded number of digits.
MAX_AMOUNT_EXPONENT = 64


def validate_amount(amount: AmountLike) -> Decimal:
    """
    Check that amount is a present, finite, strictly positive value

    Args:
        amount: Decimal or int amount

    Returns:
        The amount as a Decimal, unchanged in value and scale

    Raises:
        NullInput: If amount is None
        InvalidArgument: If amount is not a Decimal/int, is not finite,
            or is zero or negative, or is outside 1E-64 .. 1E+65
    """
    if amount is None:
        raise NullInput("Amount is required")

    # bool is an int subclass; float carries binary rounding error
    if isinstance(amount, bool) or not isinstance(amount, (Decimal, int)):
        raise InvalidArgument(
            f"Amount must be a Decimal or int, got {type(amount).__name__}"
        )

    value = Decimal(amount)
    if not value.is_finite():
        raise InvalidArgument(f"Amount must be a finite number, got {value}")

    if value <= 0:
        raise InvalidArgument(f"Amount must be positive, got {value}")

    if value.adjusted() > MAX_AMOUNT_EXPONENT or value.as_tuple().exponent < -MAX_AMOUNT_EXPONENT:
        raise InvalidArgument(f"Amount is out of range, got {value}")

    return value


def exact_add(a: Decimal, b: Decimal) -> Decimal:
    """Add two decimals without any rounding"""
    return EXACT_CONTEXT.add(a, b)


def exact_subtract(a: Decimal, b: Decimal) -> Decimal:
    """Subtract b from a without any rounding"""
    return EXACT_CONTEXT.subtract(a, b)


def format_amount(value: Decimal, places: int = 2) -> str:
    """
    Format a decimal as fixed-point text for display

    Uses ROUND_HALF_UP at the requested number of places, no thousands
    separators and no exponent notation, e.g. "0.00", "1000.00".
    """
    if places < 0:
        raise InvalidArgument("Decimal places cannot be negative")

    quantized = value.quantize(Decimal(1).scaleb(-places), context=DISPLAY_CONTEXT)
    if quantized.is_zero():
        quantized = quantized.copy_abs()
    return f"{quantized:f}"

