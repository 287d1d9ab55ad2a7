"""
Canonical text encoding of date-time indices.

Used to persist or transfer an index descriptor, never the underlying data:

    uniform,<ISO-8601 start>,<periods>,<kind> <step>
    irregular,<ISO-8601 instant>,<ISO-8601 instant>,...

where <kind> is "days" or "businessDays". parse_index(format_index(ix)) == ix
for every index.
"""

from typing import Optional

from .config.defaults import IndexSettings, get_default_config
from .errors import InvalidArgumentError
from .frequency import parse_frequency
from .index import DateTimeIndex, IrregularDateTimeIndex, UniformDateTimeIndex
from .logging.config import get_serialization_logger
from .utils.time import format_instant, parse_instant

logger = get_serialization_logger(__name__)

UNIFORM_TAG = "uniform"
IRREGULAR_TAG = "irregular"


def format_index(index: DateTimeIndex, settings: Optional[IndexSettings] = None) -> str:
    """
    Encode an index as canonical text.

    Args:
        index: Uniform or irregular index
        settings: Separators and timestamp precision, defaults if omitted

    Returns:
        Comma-separated descriptor, e.g. "uniform,2015-04-08T00:00:00.000Z,5,days 1"
    """
    settings = settings or get_default_config()
    sep = settings.serialization.field_separator
    timespec = settings.time.timestamp_precision

    if isinstance(index, UniformDateTimeIndex):
        frequency = index.frequency
        fields = [
            UNIFORM_TAG,
            format_instant(index.start, timespec),
            str(index.periods),
            f"{frequency.kind}{settings.serialization.frequency_separator}{frequency.step}",
        ]
        return sep.join(fields)

    if isinstance(index, IrregularDateTimeIndex):
        instants = sep.join(format_instant(dt, timespec) for dt in index.instants)
        return f"{IRREGULAR_TAG}{sep}{instants}"

    raise InvalidArgumentError(
        f"Cannot format index of type {type(index).__name__}",
        token=type(index).__name__,
    )


def parse_index(text: str, settings: Optional[IndexSettings] = None) -> DateTimeIndex:
    """
    Parse an index from its canonical text encoding.

    Instants without an offset are read in the configured default timezone.

    Raises:
        InvalidArgumentError: On an unrecognized index type or frequency
            kind, or on a malformed field; the message names the token
    """
    settings = settings or get_default_config()
    tokens = text.strip().split(settings.serialization.field_separator)

    try:
        index = _parse_tokens(tokens, settings)
    except InvalidArgumentError as e:
        logger.warning(
            "Rejected date-time index text",
            token=e.token,
            reason=str(e),
        )
        raise

    logger.debug(
        "Parsed date-time index",
        index_type=tokens[0],
        size=index.size(),
    )
    return index


def _parse_tokens(tokens: list[str], settings: IndexSettings) -> DateTimeIndex:
    tag = tokens[0]
    default_tz = settings.time.default_timezone

    if tag == UNIFORM_TAG:
        if len(tokens) != 4:
            raise InvalidArgumentError(
                f"Uniform index needs 4 fields, got {len(tokens)}",
                token=settings.serialization.field_separator.join(tokens),
            )
        start = parse_instant(tokens[1], default_tz)
        try:
            periods = int(tokens[2])
        except ValueError as e:
            raise InvalidArgumentError(
                f"Period count {tokens[2]!r} is not an integer", token=tokens[2]
            ) from e
        frequency = parse_frequency(tokens[3], settings.serialization.frequency_separator)
        return UniformDateTimeIndex(start, periods, frequency)

    if tag == IRREGULAR_TAG:
        fields = tokens[1:]
        # an empty index encodes as "irregular,"
        if fields == [""]:
            fields = []
        return IrregularDateTimeIndex(
            tuple(parse_instant(field, default_tz) for field in fields)
        )

    raise InvalidArgumentError(f"DateTimeIndex type {tag} not recognized", token=tag)
