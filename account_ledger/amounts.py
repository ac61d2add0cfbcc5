"""
Amount Handling Module

Parses user-supplied amounts and renders balances for display.
NEVER uses float for monetary values.
"""

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP, getcontext, localcontext
from typing import Union
import re

# Set global decimal context for financial precision
getcontext().prec = 28

CENT = Decimal('0.01')
ZERO = Decimal('0.00')

# Minimum number of integer digits shown by format_balance
DISPLAY_INTEGER_DIGITS = 6

# Largest decimal exponent accepted as an amount; beyond it a double overflows to infinity
MAX_AMOUNT_EXPONENT = 308

# Leading decimal number: optional sign, digits with optional fraction, optional exponent
_LEADING_NUMBER = re.compile(r'\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)')


def _exact_context(*values: Decimal):
    """Local context with enough digits to hold the values (and a carry) to the cent"""
    context = getcontext().copy()
    digits = max(value.adjusted() for value in values) + 4
    context.prec = max(context.prec, digits)
    return localcontext(context)


def round_to_cents(value: Union[Decimal, int, str]) -> Decimal:
    """
    Round a value to 2 decimal places, half-up at the cent boundary

    Works for any finite value, including ones wider than the global
    decimal precision.

    Args:
        value: Decimal (or int/str convertible to Decimal)

    Returns:
        Decimal quantized to cents
    """
    if not isinstance(value, Decimal):
        value = Decimal(str(value))
    with _exact_context(value):
        return value.quantize(CENT, rounding=ROUND_HALF_UP)


def add_amounts(balance: Decimal, amount: Decimal) -> Decimal:
    """Exact sum of two cent values"""
    with _exact_context(balance, amount):
        return balance + amount


def subtract_amounts(balance: Decimal, amount: Decimal) -> Decimal:
    """Exact difference of two cent values"""
    with _exact_context(balance, amount):
        return balance - amount


def parse_amount(raw_input: str) -> Decimal:
    """
    Parse raw text into a transaction amount.

    The leading decimal number is read and any trailing text ignored, so
    "50 dollars" is 50.00. Input without a leading number, and anything that
    is not a finite positive value within MAX_AMOUNT_EXPONENT, becomes 0.00.
    Valid input is rounded to cents regardless of how many fractional digits
    were supplied.

    Args:
        raw_input: Text as typed by the user

    Returns:
        Amount as a Decimal with exactly 2 fractional digits
    """
    if raw_input is None:
        return ZERO

    match = _LEADING_NUMBER.match(str(raw_input))
    if not match:
        return ZERO

    try:
        value = Decimal(match.group(1))
    except InvalidOperation:
        return ZERO

    if value <= 0 or value.adjusted() > MAX_AMOUNT_EXPONENT:
        return ZERO

    return round_to_cents(value)


def format_balance(balance: Union[Decimal, int, str]) -> str:
    """
    Render a balance in fixed-width display format.

    Two fractional digits, integer part zero-padded to at least six digits:
    0 -> "000000.00", 12345.67 -> "012345.67". Wider values are not truncated.
    """
    amount = round_to_cents(balance)
    width = DISPLAY_INTEGER_DIGITS + 3
    return f"{amount:0{width}.2f}"
