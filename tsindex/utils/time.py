"""
Instant utilities for date-time indices.

Instants are timezone-aware datetimes truncated to millisecond precision so
that the canonical text encoding round-trips exactly.
"""

from datetime import UTC, datetime, timedelta, tzinfo
from typing import Optional, Union
from zoneinfo import ZoneInfo

from ..errors import InvalidArgumentError

SATURDAY = 5
SUNDAY = 6

TimezoneLike = Union[str, tzinfo, None]


def resolve_timezone(tz: TimezoneLike = None) -> tzinfo:
    """Resolve a zone name or tzinfo, defaulting to UTC."""
    if tz is None:
        return UTC
    if isinstance(tz, tzinfo):
        return tz
    if tz.upper() == "UTC":
        return UTC
    return ZoneInfo(tz)


def normalize_instant(dt: datetime, default_tz: TimezoneLike = None) -> datetime:
    """
    Make an instant timezone-aware and truncate it to milliseconds.

    Args:
        dt: Instant to normalize
        default_tz: Zone applied when dt is naive, defaults to UTC

    Returns:
        Aware datetime with microseconds rounded down to whole milliseconds
    """
    if not isinstance(dt, datetime):
        raise InvalidArgumentError(
            f"Expected a datetime instant, got {type(dt).__name__}",
            token=repr(dt),
        )

    if dt.tzinfo is None or dt.utcoffset() is None:
        dt = dt.replace(tzinfo=resolve_timezone(default_tz))

    micros = dt.microsecond - dt.microsecond % 1000
    if micros != dt.microsecond:
        dt = dt.replace(microsecond=micros)
    return dt


def to_epoch_millis(dt: datetime) -> int:
    """Milliseconds since the Unix epoch."""
    dt = normalize_instant(dt)
    delta = dt - datetime(1970, 1, 1, tzinfo=UTC)
    return delta // timedelta(milliseconds=1)


def from_epoch_millis(millis: int, tz: TimezoneLike = None) -> datetime:
    """Instant for the given epoch milliseconds, expressed in tz (UTC by default)."""
    instant = datetime(1970, 1, 1, tzinfo=UTC) + timedelta(milliseconds=millis)
    return instant.astimezone(resolve_timezone(tz))


def format_instant(dt: datetime, timespec: str = "milliseconds") -> str:
    """
    Format an instant as ISO-8601 for the canonical text encoding.

    Zero offsets are written as "Z", e.g. 2015-04-08T00:00:00.000Z.
    """
    text = normalize_instant(dt).isoformat(timespec=timespec)
    if text.endswith("+00:00"):
        text = text[:-6] + "Z"
    return text


def parse_instant(text: str, default_tz: TimezoneLike = None) -> datetime:
    """
    Parse an ISO-8601 instant.

    Date-only values mean midnight. Values without an offset are read in
    default_tz.

    Raises:
        InvalidArgumentError: If text is not an ISO-8601 date or date-time
    """
    try:
        parsed = datetime.fromisoformat(text.strip())
    except ValueError as e:
        raise InvalidArgumentError(
            f"Instant {text!r} is not ISO-8601", token=text
        ) from e
    return normalize_instant(parsed, default_tz)


def is_business_day(dt: datetime) -> bool:
    """True for Monday through Friday."""
    return dt.weekday() < SATURDAY


def next_business_day(dt: datetime) -> datetime:
    """
    Find the next business day occurring at or after the given instant.

    Saturday moves forward two days and Sunday one; weekdays are returned
    unchanged. Time of day is preserved.
    """
    if dt.weekday() == SATURDAY:
        return dt + timedelta(days=2)
    if dt.weekday() == SUNDAY:
        return dt + timedelta(days=1)
    return dt


def wall_clock_delta(start: datetime, end: datetime) -> timedelta:
    """
    Elapsed wall-clock time from start to end, read in start's zone.

    Calendar-day arithmetic on aware datetimes keeps wall-clock time in the
    instant's zone, so differences must be taken the same way.
    """
    end_local = end.astimezone(start.tzinfo)
    return end_local.replace(tzinfo=None) - start.replace(tzinfo=None)


def describe_instant(dt: Optional[datetime]) -> Optional[str]:
    """Instant rendered for log and error context."""
    return format_instant(dt) if dt is not None else None
