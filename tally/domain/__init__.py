"""Domain models and pure functions for tally.

This package contains the functional core:
- Pure functions with no side effects
- No I/O operations
- Easy to test
- Business logic separated from the balance store and the console
"""

from tally.domain.models import Money

__all__ = ["Money"]
