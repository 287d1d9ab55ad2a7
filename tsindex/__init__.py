"""
tsindex - Date-time indices for time-series data

Bidirectional mappings between integer row locations and ordered calendar
instants. Uniform indices hold instants spaced at a fixed calendar frequency;
irregular indices hold arbitrary, non-decreasing instants. Both share one
contract and a lossless text encoding.
"""

from .frequency import (
    BusinessDayFrequency,
    DayFrequency,
    Frequency,
    business_days,
    days,
    parse_frequency,
    try_frequency_from_period,
)
from .index import (
    DateTimeIndex,
    IrregularDateTimeIndex,
    UniformDateTimeIndex,
    irregular,
    uniform,
)
from .serialization import format_index, parse_index
from .utils.time import is_business_day, next_business_day

__version__ = "0.1.0"
__author__ = "tsindex Team"

__all__ = [
    "BusinessDayFrequency",
    "DateTimeIndex",
    "DayFrequency",
    "Frequency",
    "IrregularDateTimeIndex",
    "UniformDateTimeIndex",
    "business_days",
    "days",
    "format_index",
    "irregular",
    "is_business_day",
    "next_business_day",
    "parse_frequency",
    "parse_index",
    "try_frequency_from_period",
    "uniform",
]
