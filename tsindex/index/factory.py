"""Factory functions for building date-time indices."""

from datetime import datetime
from typing import Iterable, Union

from ..errors import InvalidArgumentError
from ..frequency import Frequency
from ..utils.time import TimezoneLike, normalize_instant
from .irregular import IrregularDateTimeIndex
from .uniform import UniformDateTimeIndex


def uniform(
    start: datetime,
    periods_or_end: Union[int, datetime],
    frequency: Frequency,
    default_tz: TimezoneLike = None,
) -> UniformDateTimeIndex:
    """
    Create a UniformDateTimeIndex.

    Args:
        start: First instant
        periods_or_end: Number of periods, or the last instant (inclusive)
        frequency: Spacing between consecutive instants
        default_tz: Zone for naive datetimes, e.g. settings.time.default_timezone;
            UTC if omitted

    Raises:
        ArithmeticContractError: If an end instant is not on start's grid
    """
    start = normalize_instant(start, default_tz)
    if isinstance(periods_or_end, datetime):
        end = normalize_instant(periods_or_end, default_tz)
        periods = frequency.difference(start, end) + 1
        return UniformDateTimeIndex(start, periods, frequency)
    if isinstance(periods_or_end, bool) or not isinstance(periods_or_end, int):
        raise InvalidArgumentError(
            f"Expected a period count or end datetime, got {periods_or_end!r}",
            token=repr(periods_or_end),
        )
    return UniformDateTimeIndex(start, periods_or_end, frequency)


def irregular(
    instants: Iterable[datetime],
    default_tz: TimezoneLike = None,
) -> IrregularDateTimeIndex:
    """
    Create an IrregularDateTimeIndex composed of the given date-times.

    Naive date-times are read in default_tz, UTC if omitted.
    """
    return IrregularDateTimeIndex(
        tuple(normalize_instant(dt, default_tz) for dt in instants)
    )
