"""
Calendar frequencies for uniform date-time indices.

A frequency advances an instant by whole periods and measures the number of
periods between two instants. Arithmetic is done on wall-clock time in the
instant's own zone, so a day is a calendar day rather than 86400 seconds.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import ClassVar

from .errors import ArithmeticContractError, InvalidArgumentError, UnsupportedOperationError
from .utils.time import (
    SATURDAY,
    describe_instant,
    normalize_instant,
    wall_clock_delta,
)

ONE_MILLI = timedelta(milliseconds=1)
DAY_MILLIS = 24 * 60 * 60 * 1000


def _truncated_divmod(numerator: int, denominator: int) -> tuple[int, int]:
    """Quotient rounded toward zero, with a remainder carrying numerator's sign."""
    quotient, remainder = divmod(abs(numerator), denominator)
    if numerator < 0:
        return -quotient, -remainder
    return quotient, remainder


def _count_business_days(start_weekday: int, days: int) -> int:
    """Business days in the `days` calendar days following a day with start_weekday."""
    weeks, rem = divmod(days, 7)
    count = weeks * 5
    for offset in range(1, rem + 1):
        if (start_weekday + offset) % 7 < SATURDAY:
            count += 1
    return count


@dataclass(frozen=True)
class Frequency(ABC):
    """
    Calendar-arithmetic strategy over instants.

    Subclasses define how many units one step covers and how units are
    counted; period arithmetic is shared.
    """

    step: int = 1

    kind: ClassVar[str] = ""

    def __post_init__(self):
        if isinstance(self.step, bool) or not isinstance(self.step, int) or self.step < 1:
            raise InvalidArgumentError(
                f"Frequency step must be a positive integer, got {self.step!r}",
                token=str(self.step),
            )

    def advance(self, dt: datetime, n: int) -> datetime:
        """
        Move dt by n periods. Negative n moves backward; zero is identity.
        """
        return self._shift(normalize_instant(dt), n * self.step)

    def difference(self, start: datetime, end: datetime, exact: bool = True) -> int:
        """
        Number of periods from start to end.

        Args:
            start: Reference instant
            end: Target instant, may precede start
            exact: Require end == advance(start, result)

        Returns:
            Period count, truncated toward zero when exact is False

        Raises:
            ArithmeticContractError: If exact and end is not on start's grid
        """
        start = normalize_instant(start)
        end = normalize_instant(end)

        units = self._units_between(start, end)
        periods, leftover = _truncated_divmod(units, self.step)

        if exact and (leftover or self.advance(start, periods) != end):
            raise ArithmeticContractError(
                f"{describe_instant(end)} is not a whole number of '{self}' periods "
                f"from {describe_instant(start)}",
                frequency=str(self),
                start=start,
                end=end,
            )
        return periods

    @abstractmethod
    def _shift(self, dt: datetime, units: int) -> datetime:
        """Move dt by a signed number of units."""

    @abstractmethod
    def _units_between(self, start: datetime, end: datetime) -> int:
        """Signed unit count from start to end, truncated toward zero."""

    def __str__(self) -> str:
        return f"{self.kind} {self.step}"


@dataclass(frozen=True)
class DayFrequency(Frequency):
    """Every `step` calendar days."""

    kind: ClassVar[str] = "days"

    def _shift(self, dt: datetime, units: int) -> datetime:
        return dt + timedelta(days=units)

    def _units_between(self, start: datetime, end: datetime) -> int:
        millis = wall_clock_delta(start, end) // ONE_MILLI
        days, _ = _truncated_divmod(millis, DAY_MILLIS)
        return days


@dataclass(frozen=True)
class BusinessDayFrequency(Frequency):
    """
    Every `step` business days, skipping Saturdays and Sundays.

    Composition advance(advance(t, a), b) == advance(t, a + b) and exact
    differences only hold when both endpoints are business days. A weekend
    start moves forward as if from the preceding Friday and backward as if
    from the following Monday.
    """

    kind: ClassVar[str] = "businessDays"

    def _shift(self, dt: datetime, units: int) -> datetime:
        if units == 0:
            return dt

        weekday = dt.weekday()
        if units > 0:
            if weekday >= SATURDAY:
                dt -= timedelta(days=weekday - 4)
                weekday = 4
            weeks, rem = divmod(units, 5)
            weekend = 2 if weekday + rem > 4 else 0
            return dt + timedelta(days=weeks * 7 + rem + weekend)

        if weekday >= SATURDAY:
            dt += timedelta(days=7 - weekday)
            weekday = 0
        weeks, rem = divmod(-units, 5)
        weekend = 2 if weekday - rem < 0 else 0
        return dt - timedelta(days=weeks * 7 + rem + weekend)

    def _units_between(self, start: datetime, end: datetime) -> int:
        millis = wall_clock_delta(start, end) // ONE_MILLI
        days, _ = _truncated_divmod(millis, DAY_MILLIS)
        if days >= 0:
            return _count_business_days(start.weekday(), days)
        end_local = end.astimezone(start.tzinfo)
        return -_count_business_days(end_local.weekday(), -days)


FREQUENCY_KINDS: dict[str, type[Frequency]] = {
    DayFrequency.kind: DayFrequency,
    BusinessDayFrequency.kind: BusinessDayFrequency,
}


def days(n: int = 1) -> DayFrequency:
    """Frequency of n calendar days."""
    return DayFrequency(n)


def business_days(n: int = 1) -> BusinessDayFrequency:
    """Frequency of n business days."""
    return BusinessDayFrequency(n)


def try_frequency_from_period(period: timedelta) -> Frequency:
    """
    Convert a period of whole days into a DayFrequency.

    Raises:
        UnsupportedOperationError: If the period is not a positive whole
            number of days
    """
    if (
        isinstance(period, timedelta)
        and period.days > 0
        and period == timedelta(days=period.days)
    ):
        return DayFrequency(period.days)

    raise UnsupportedOperationError(
        f"Period {period!r} has no frequency equivalent; only whole days convert",
        operation="try_frequency_from_period",
    )


def parse_frequency(text: str, separator: str = " ") -> Frequency:
    """
    Parse a frequency from its text form, e.g. "days 1" or "businessDays 5".

    Raises:
        InvalidArgumentError: On an unrecognized kind or a malformed step
    """
    tokens = text.strip().split(separator)
    kind = tokens[0]

    frequency_cls = FREQUENCY_KINDS.get(kind)
    if frequency_cls is None:
        raise InvalidArgumentError(f"Frequency {kind} not recognized", token=kind)

    if len(tokens) != 2:
        raise InvalidArgumentError(
            f"Frequency {text!r} must be '<kind>{separator}<step>'", token=text
        )

    try:
        step = int(tokens[1])
    except ValueError as e:
        raise InvalidArgumentError(
            f"Frequency step {tokens[1]!r} is not an integer", token=tokens[1]
        ) from e

    return frequency_cls(step)
