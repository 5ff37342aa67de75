"""Account operations: inquire, credit and debit against a balance store.

Each operation returns an OperationResult carrying the message to show
the user, so the interactive loop only has to print it.
"""

import logging
from dataclasses import dataclass
from enum import Enum

from tally.domain.account import calculate_credit, calculate_debit
from tally.domain.amounts import format_balance, parse_amount
from tally.domain.models import Money
from tally.store import BalanceStore

logger = logging.getLogger(__name__)

INVALID_AMOUNT = "Invalid amount. Please enter a valid positive number."


class Outcome(Enum):
    """How an operation ended."""

    OK = "ok"
    INVALID_AMOUNT = "invalid_amount"
    INSUFFICIENT_FUNDS = "insufficient_funds"


@dataclass(frozen=True)
class OperationResult:
    """Immutable result of an account operation."""

    outcome: Outcome
    message: str
    balance: Money

    @property
    def succeeded(self) -> bool:
        """True when the operation was applied (outcome OK)."""
        return self.outcome is Outcome.OK


class AccountOperations:
    """Business rules layered over a BalanceStore."""

    def __init__(self, store: BalanceStore) -> None:
        self.store = store

    def inquire(self) -> OperationResult:
        """Report the current balance without changing it."""
        balance = self.store.read()
        return OperationResult(Outcome.OK, f"Current balance: {format_balance(balance)}", balance)

    def credit(self, amount_str: str) -> OperationResult:
        """Add a user-entered amount to the balance.

        Args:
            amount_str: Raw text from the amount prompt.

        Returns:
            Result with the new balance, or INVALID_AMOUNT with the balance unchanged.
        """
        amount = parse_amount(amount_str)

        with self.store.locked():
            balance = self.store.read()
            if amount is None:
                logger.info("Rejected credit: invalid amount %r", amount_str)
                return OperationResult(Outcome.INVALID_AMOUNT, INVALID_AMOUNT, balance)

            new_balance = calculate_credit(balance, amount)
            self.store.write(new_balance)

        logger.info("Credited %s, balance now %s", amount, new_balance)
        return OperationResult(
            Outcome.OK, f"Amount credited. New balance: {format_balance(new_balance)}", new_balance
        )

    def debit(self, amount_str: str) -> OperationResult:
        """Withdraw a user-entered amount, refusing any overdraft.

        Args:
            amount_str: Raw text from the amount prompt.

        Returns:
            Result with the new balance, or a rejection with the balance unchanged.
        """
        amount = parse_amount(amount_str)

        with self.store.locked():
            balance = self.store.read()
            if amount is None:
                logger.info("Rejected debit: invalid amount %r", amount_str)
                return OperationResult(Outcome.INVALID_AMOUNT, INVALID_AMOUNT, balance)

            new_balance, error = calculate_debit(balance, amount)
            if error:
                logger.info("Rejected debit of %s: balance is %s", amount, balance)
                return OperationResult(Outcome.INSUFFICIENT_FUNDS, error, balance)

            self.store.write(new_balance)

        logger.info("Debited %s, balance now %s", amount, new_balance)
        return OperationResult(
            Outcome.OK, f"Amount debited. New balance: {format_balance(new_balance)}", new_balance
        )
