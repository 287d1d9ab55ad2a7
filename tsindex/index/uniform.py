"""
Date-time index with instants spaced at a regular calendar frequency.

Only the start instant, the period count and the frequency are stored, so
space is constant and every lookup is O(1).
"""

from dataclasses import dataclass
from datetime import datetime

from ..errors import IndexOutOfBoundsError, InvalidArgumentError
from ..frequency import Frequency
from ..utils.time import normalize_instant
from .base import NOT_FOUND, DateTimeIndex


@dataclass(frozen=True)
class UniformDateTimeIndex(DateTimeIndex):
    """Instants start + k * frequency for k in [0, periods)."""

    start: datetime
    periods: int
    frequency: Frequency

    def __post_init__(self):
        object.__setattr__(self, "start", normalize_instant(self.start))

        if isinstance(self.periods, bool) or not isinstance(self.periods, int) or self.periods < 0:
            raise InvalidArgumentError(
                f"Period count must be a non-negative integer, got {self.periods!r}",
                token=str(self.periods),
            )
        if not isinstance(self.frequency, Frequency):
            raise InvalidArgumentError(
                f"Expected a Frequency, got {type(self.frequency).__name__}",
                token=repr(self.frequency),
            )

    def first(self) -> datetime:
        if self.periods == 0:
            raise IndexOutOfBoundsError("Empty index has no first date-time", size=0)
        return self.start

    def last(self) -> datetime:
        if self.periods == 0:
            raise IndexOutOfBoundsError("Empty index has no last date-time", size=0)
        return self.frequency.advance(self.start, self.periods - 1)

    def size(self) -> int:
        return self.periods

    def slice_by_datetime(self, start: datetime, end: datetime) -> "UniformDateTimeIndex":
        """
        Both bounds must sit on this index's grid.

        Raises:
            ArithmeticContractError: If start or end is off the grid
        """
        start = normalize_instant(start)
        self.frequency.difference(self.start, start)
        return UniformDateTimeIndex(
            start, self.frequency.difference(start, end) + 1, self.frequency
        )

    def slice_by_loc(self, lower: int, upper: int) -> "UniformDateTimeIndex":
        """Bounds must satisfy 0 <= lower <= upper + 1 <= size."""
        if not (0 <= lower <= upper + 1 <= self.periods):
            raise IndexOutOfBoundsError(
                f"Location slice [{lower}, {upper}] out of bounds for index "
                f"of size {self.periods}",
                loc=lower if lower < 0 else upper,
                size=self.periods,
            )
        return UniformDateTimeIndex(
            self.frequency.advance(self.start, lower), upper - lower + 1, self.frequency
        )

    def datetime_at_loc(self, loc: int) -> datetime:
        self._check_loc(loc)
        return self.frequency.advance(self.start, loc)

    def loc_at_datetime(self, dt: datetime) -> int:
        loc = self.frequency.difference(self.start, dt, exact=False)
        if not 0 <= loc < self.periods:
            return NOT_FOUND
        if self.frequency.advance(self.start, loc) != normalize_instant(dt):
            return NOT_FOUND
        return loc

    def __repr__(self) -> str:
        return (
            f"UniformDateTimeIndex(start={self.start.isoformat()}, "
            f"periods={self.periods}, frequency={self.frequency})"
        )
