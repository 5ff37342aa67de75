"""Pure functions for account balance calculations.

This module contains the functional core for account operations:
- No I/O operations (no store, no console)
- No side effects
- Pure data transformations
- Easy to test

Amounts are expected to come from parse_amount, i.e. already rounded
and non-negative.
"""

from tally.domain.amounts import add_money, subtract_money
from tally.domain.models import Money

INSUFFICIENT_FUNDS = "Insufficient funds for this debit."


def calculate_credit(balance: Money, amount: Money) -> Money:
    """Calculate the balance after a credit.

    Args:
        balance: Current balance.
        amount: Amount to add.

    Returns:
        New balance, rounded to two places.
    """
    return add_money(balance, amount)


def calculate_debit(balance: Money, amount: Money) -> tuple[Money, str | None]:
    """Calculate the balance after a debit, enforcing overdraft protection.

    Args:
        balance: Current balance.
        amount: Amount to withdraw.

    Returns:
        Tuple of (new_balance, error_message).
        If error, new_balance is the unchanged balance.
    """
    if amount > balance:
        return balance, INSUFFICIENT_FUNDS

    return subtract_money(balance, amount), None
