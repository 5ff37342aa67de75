"""Pure functions for parsing, rounding and formatting money.

All amounts are Decimals quantized to two places. Rounding is half away
from zero, so 0.005 becomes 0.01 and 2.675 becomes 2.68.

Arithmetic runs in MONEY_CONTEXT, which has no practical precision limit,
so sums and quantizes stay exact however many digits an amount has.
"""

import re
from decimal import MAX_EMAX, MAX_PREC, MIN_EMIN, ROUND_HALF_UP, Context, Decimal

from tally.domain.models import Money

CENT = Decimal("0.01")

MONEY_CONTEXT = Context(prec=MAX_PREC, Emax=MAX_EMAX, Emin=MIN_EMIN, rounding=ROUND_HALF_UP)

# Width of a formatted balance, decimal point included
BALANCE_WIDTH = 9

_AMOUNT_PATTERN = re.compile(r"[+-]?(\d+(\.\d*)?|\.\d+)")


def to_money(value: Decimal | int | str) -> Money:
    """Quantize a value to two decimal places, rounding half away from zero.

    Args:
        value: Decimal, integer or numeric string.

    Returns:
        Money amount with exactly two fractional digits.
    """
    return Money(Decimal(value).quantize(CENT, context=MONEY_CONTEXT))


def add_money(a: Money, b: Money) -> Money:
    """Exact sum of two amounts, rounded to two places."""
    return to_money(MONEY_CONTEXT.add(a, b))


def subtract_money(a: Money, b: Money) -> Money:
    """Exact difference of two amounts, rounded to two places."""
    return to_money(MONEY_CONTEXT.subtract(a, b))


def parse_amount(amount_str: str) -> Money | None:
    """Parse user-entered text into a non-negative amount.

    Plain decimal notation only: an optional sign, digits and an optional
    fractional part. Surrounding whitespace is ignored. Zero is accepted.

    Args:
        amount_str: Text typed at an amount prompt.

    Returns:
        Rounded Money amount, or None if the text is not a number or is negative.
    """
    text = amount_str.strip()
    if not _AMOUNT_PATTERN.fullmatch(text):
        return None

    value = Decimal(text)
    if value < 0:
        return None
    # "-0" passes the sign check; drop the sign so it never reaches a balance
    return to_money(value.copy_abs())


def format_balance(balance: Money) -> str:
    """Render a balance zero-padded to BALANCE_WIDTH characters.

    Args:
        balance: Balance to render.

    Returns:
        Formatted string, e.g. "001000.00". Wider values are not truncated.
    """
    # Exponent is -2 after quantizing, so str() gives plain notation
    return str(to_money(balance)).zfill(BALANCE_WIDTH)
