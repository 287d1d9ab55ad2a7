"""Default configuration parameters for date-time indices."""

from dataclasses import dataclass


@dataclass(frozen=True)
class TimeParams:
    """Instant interpretation parameters."""
    default_timezone: str = "UTC"                    # Zone applied to naive datetimes
    timestamp_precision: str = "milliseconds"        # ISO-8601 timespec when formatting


@dataclass(frozen=True)
class SerializationParams:
    """Canonical text encoding parameters."""
    field_separator: str = ","                       # Between top-level fields
    frequency_separator: str = " "                   # Between frequency kind and step


@dataclass(frozen=True)
class LoggingParams:
    """Logging parameters."""
    level: str = "INFO"
    format_json: bool = False


@dataclass(frozen=True)
class IndexSettings:
    """Complete tsindex configuration."""
    time: TimeParams
    serialization: SerializationParams
    logging: LoggingParams


def get_default_config() -> IndexSettings:
    """Get the default configuration instance."""
    return IndexSettings(
        time=TimeParams(),
        serialization=SerializationParams(),
        logging=LoggingParams(),
    )
