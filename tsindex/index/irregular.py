"""
Date-time index whose instants may be spaced at uneven intervals.

Instants are stored explicitly in non-decreasing order, so location lookups
are O(1) and date-time lookups are O(log n) binary searches.
"""

from bisect import bisect_left
from dataclasses import dataclass
from datetime import datetime

from ..errors import IndexOutOfBoundsError, InvalidArgumentError, UnsupportedOperationError
from ..utils.time import format_instant, normalize_instant
from .base import NOT_FOUND, DateTimeIndex


@dataclass(frozen=True)
class IrregularDateTimeIndex(DateTimeIndex):
    """
    Explicit, non-decreasing instants. Repeated instants are allowed and
    stand for several samples at the same time.

    Slicing is not offered by this variant; all slice overloads raise
    UnsupportedOperationError.
    """

    instants: tuple[datetime, ...]

    def __post_init__(self):
        instants = tuple(normalize_instant(dt) for dt in self.instants)

        for loc in range(1, len(instants)):
            if instants[loc] < instants[loc - 1]:
                raise InvalidArgumentError(
                    f"Instants must be non-decreasing: {format_instant(instants[loc])} "
                    f"at location {loc} precedes {format_instant(instants[loc - 1])}",
                    token=format_instant(instants[loc]),
                    context={"loc": loc},
                )

        object.__setattr__(self, "instants", instants)

    def slice_by_datetime(self, start: datetime, end: datetime) -> "IrregularDateTimeIndex":
        raise UnsupportedOperationError(
            "Irregular indices cannot be sliced by date-time",
            operation="slice_by_datetime",
            index_type="irregular",
        )

    def slice_by_range(self, locs: range) -> "IrregularDateTimeIndex":
        raise UnsupportedOperationError(
            "Irregular indices cannot be sliced by location range",
            operation="slice_by_range",
            index_type="irregular",
        )

    def slice_by_loc(self, lower: int, upper: int) -> "IrregularDateTimeIndex":
        raise UnsupportedOperationError(
            "Irregular indices cannot be sliced by location",
            operation="slice_by_loc",
            index_type="irregular",
        )

    def first(self) -> datetime:
        if not self.instants:
            raise IndexOutOfBoundsError("Empty index has no first date-time", size=0)
        return self.instants[0]

    def last(self) -> datetime:
        if not self.instants:
            raise IndexOutOfBoundsError("Empty index has no last date-time", size=0)
        return self.instants[-1]

    def size(self) -> int:
        return len(self.instants)

    def datetime_at_loc(self, loc: int) -> datetime:
        self._check_loc(loc)
        return self.instants[loc]

    def loc_at_datetime(self, dt: datetime) -> int:
        # bisect_left converges on the leftmost of any run of equal instants
        dt = normalize_instant(dt)
        loc = bisect_left(self.instants, dt)
        if loc < len(self.instants) and self.instants[loc] == dt:
            return loc
        return NOT_FOUND

    def __iter__(self):
        return iter(self.instants)

    def __repr__(self) -> str:
        return f"IrregularDateTimeIndex(size={len(self.instants)})"
