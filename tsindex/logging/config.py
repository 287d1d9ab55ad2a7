"""
Centralized logging configuration for tsindex.

Uses structlog on top of the standard library logging module. The library
never configures logging on import; applications call configure_logging()
once, or configure_from_settings() with loaded IndexSettings.
"""
import logging
import sys
from typing import TYPE_CHECKING

import structlog
from structlog.types import FilteringBoundLogger

if TYPE_CHECKING:
    from ..config.defaults import IndexSettings


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    include_timestamp: bool = True
) -> None:
    """
    Configure structlog for tsindex and its host application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: If True, output JSON format; otherwise human-readable
        include_timestamp: Include timestamp in log output
    """
    log_level = getattr(logging, level.upper())

    logging.basicConfig(
        level=log_level,
        stream=sys.stdout,
        format="%(message)s"  # structlog will handle formatting
    )

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    if format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def configure_from_settings(settings: "IndexSettings") -> None:
    """Configure logging from the logging section of loaded settings."""
    configure_logging(
        level=settings.logging.level,
        format_json=settings.logging.format_json,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance
    """
    return structlog.get_logger(name)


def get_serialization_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger bound for text encoding and parsing of indices.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger with serialization context
    """
    return structlog.get_logger(name, subsystem="serialization")
