"""In-memory balance store.

The store is the single owner of the current balance. It validates
nothing; callers round and check amounts before writing.
"""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from threading import RLock

from tally.domain.amounts import to_money
from tally.domain.models import Money

logger = logging.getLogger(__name__)

DEFAULT_INITIAL_BALANCE = to_money("1000.00")


class BalanceStore:
    """Holds one balance for the lifetime of the process."""

    def __init__(self, initial_balance: Money = DEFAULT_INITIAL_BALANCE) -> None:
        self._balance = to_money(initial_balance)
        self._lock = RLock()

    def __repr__(self) -> str:
        return f"BalanceStore(balance={self._balance})"

    def read(self) -> Money:
        """Return the current balance."""
        with self._lock:
            return self._balance

    def write(self, new_balance: Money) -> None:
        """Replace the stored balance unconditionally."""
        with self._lock:
            logger.debug("Balance %s -> %s", self._balance, new_balance)
            self._balance = new_balance

    @contextmanager
    def locked(self) -> Iterator["BalanceStore"]:
        """Hold the store lock across a read-decide-write sequence."""
        with self._lock:
            yield self
