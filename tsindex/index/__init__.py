"""
Date-time indices: the shared contract and its uniform and irregular
implementations.
"""

from .base import NOT_FOUND, DateTimeIndex
from .factory import irregular, uniform
from .irregular import IrregularDateTimeIndex
from .uniform import UniformDateTimeIndex

__all__ = [
    "NOT_FOUND",
    "DateTimeIndex",
    "IrregularDateTimeIndex",
    "UniformDateTimeIndex",
    "irregular",
    "uniform",
]
