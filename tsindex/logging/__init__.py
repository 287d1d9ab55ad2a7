"""
Logging configuration and utilities for tsindex.
"""
from .config import (
    configure_from_settings,
    configure_logging,
    get_logger,
    get_serialization_logger,
)

__all__ = [
    "configure_from_settings",
    "configure_logging",
    "get_logger",
    "get_serialization_logger",
]
