"""Balance store layer - owns the account state for the application.

This module re-exports the store for easy importing.
"""

from tally.store.balance import DEFAULT_INITIAL_BALANCE, BalanceStore

__all__ = [
    "DEFAULT_INITIAL_BALANCE",
    "BalanceStore",
]
