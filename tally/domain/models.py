"""Domain type definitions for tally.

These NewTypes provide semantic clarity and help with type checking:
- Money: Amount in major units, always a Decimal quantized to two places
"""

from decimal import Decimal
from typing import NewType

# Money amounts are Decimals with exactly two fractional digits to avoid floating point errors
Money = NewType("Money", Decimal)
