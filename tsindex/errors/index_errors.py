"""
Exception hierarchy for date-time index and frequency operations.

Not-found is not an error: location lookups signal absence with -1.
"""

from datetime import datetime
from typing import Any, Dict, Optional


class DateTimeIndexError(Exception):
    """Base class for all date-time index errors."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}


class UnsupportedOperationError(DateTimeIndexError, NotImplementedError):
    """Operation is not offered by this index variant."""

    def __init__(self, message: str, operation: Optional[str] = None,
                 index_type: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.operation = operation
        self.index_type = index_type


class InvalidArgumentError(DateTimeIndexError, ValueError):
    """Argument or text token that cannot be interpreted."""

    def __init__(self, message: str, token: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.token = token


class IndexOutOfBoundsError(DateTimeIndexError, IndexError):
    """Location outside [0, size)."""

    def __init__(self, message: str, loc: Optional[int] = None,
                 size: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.loc = loc
        self.size = size


class ArithmeticContractError(DateTimeIndexError, ArithmeticError):
    """Instants that do not sit a whole number of periods apart."""

    def __init__(self, message: str, frequency: Optional[str] = None,
                 start: Optional[datetime] = None, end: Optional[datetime] = None,
                 **kwargs):
        super().__init__(message, **kwargs)
        self.frequency = frequency
        self.start = start
        self.end = end
