"""
The date-time index contract.

A DateTimeIndex maintains a bi-directional mapping between integers and an
ordered collection of date-times. Several locations may hold the same
date-time, meaning several samples at that instant.

To keep "index" (the mapping) apart from "index" (a position in an array),
positions are called locations, or "loc".
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Iterator, Optional, Union

from ..errors import IndexOutOfBoundsError, InvalidArgumentError

NOT_FOUND = -1


class DateTimeIndex(ABC):
    """
    Immutable mapping between locations [0, size) and non-decreasing instants.

    Every operation that would change the index returns a new one.
    """

    @abstractmethod
    def slice_by_datetime(self, start: datetime, end: datetime) -> "DateTimeIndex":
        """Sub-index from start to end date-times, both inclusive."""

    @abstractmethod
    def slice_by_loc(self, lower: int, upper: int) -> "DateTimeIndex":
        """Sub-index from location lower to upper, both inclusive."""

    def slice_by_range(self, locs: range) -> "DateTimeIndex":
        """Sub-index spanning the first to the last location of locs."""
        if len(locs) == 0:
            raise InvalidArgumentError(
                f"Cannot slice by empty location range {locs!r}", token=repr(locs)
            )
        return self.slice_by_loc(locs[0], locs[-1])

    def slice(
        self,
        start: Union[datetime, int, range],
        end: Optional[Union[datetime, int]] = None,
    ) -> "DateTimeIndex":
        """
        Sub-index by date-times, by locations, or by a range of locations.

        Both bounds are inclusive: slice(dt1, dt2), slice(0, 4) and
        slice(range(0, 5)) all select five entries of a daily index.
        """
        if isinstance(start, range):
            if end is not None:
                raise InvalidArgumentError(
                    "A location range already carries both bounds", token=repr(end)
                )
            return self.slice_by_range(start)
        if isinstance(start, datetime) and isinstance(end, datetime):
            return self.slice_by_datetime(start, end)
        if _is_loc(start) and _is_loc(end):
            return self.slice_by_loc(start, end)
        raise InvalidArgumentError(
            f"Cannot slice by ({start!r}, {end!r}); expected two datetimes, "
            "two locations or a range",
            token=repr((start, end)),
        )

    @abstractmethod
    def first(self) -> datetime:
        """The first date-time in the index."""

    @abstractmethod
    def last(self) -> datetime:
        """The last date-time in the index. Inclusive."""

    @abstractmethod
    def size(self) -> int:
        """The number of date-times in the index."""

    @abstractmethod
    def datetime_at_loc(self, loc: int) -> datetime:
        """The date-time at location loc."""

    @abstractmethod
    def loc_at_datetime(self, dt: datetime) -> int:
        """
        The location of the given date-time.

        If the index holds the date-time more than once, returns its first
        appearance. If it does not hold it, returns -1.
        """

    def _check_loc(self, loc: int) -> None:
        size = self.size()
        if not _is_loc(loc) or not 0 <= loc < size:
            raise IndexOutOfBoundsError(
                f"Location {loc!r} out of bounds for index of size {size}",
                loc=loc,
                size=size,
            )

    def __len__(self) -> int:
        return self.size()

    def __iter__(self) -> Iterator[datetime]:
        for loc in range(self.size()):
            yield self.datetime_at_loc(loc)

    def __getitem__(self, loc: int) -> datetime:
        if not _is_loc(loc):
            raise TypeError(f"Index locations must be integers, not {type(loc).__name__}")
        return self.datetime_at_loc(loc)

    def __contains__(self, dt: object) -> bool:
        return isinstance(dt, datetime) and self.loc_at_datetime(dt) != NOT_FOUND

    def __str__(self) -> str:
        from ..serialization import format_index

        return format_index(self)


def _is_loc(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)
