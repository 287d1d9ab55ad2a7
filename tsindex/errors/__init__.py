"""
Error classification for date-time index operations.

All errors are raised synchronously at the offending call. Each class also
derives from the closest builtin so callers can catch either form.
"""

from .index_errors import (
    ArithmeticContractError,
    DateTimeIndexError,
    IndexOutOfBoundsError,
    InvalidArgumentError,
    UnsupportedOperationError,
)

__all__ = [
    "DateTimeIndexError",
    "UnsupportedOperationError",
    "InvalidArgumentError",
    "IndexOutOfBoundsError",
    "ArithmeticContractError",
]
