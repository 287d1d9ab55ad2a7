"""
Configuration for tsindex: frozen dataclass defaults with optional YAML
overrides.
"""
from .defaults import (
    IndexSettings,
    LoggingParams,
    SerializationParams,
    TimeParams,
    get_default_config,
)
from .loader import ConfigLoader
from .validation import ConfigValidator, ValidationError

__all__ = [
    "ConfigLoader",
    "ConfigValidator",
    "IndexSettings",
    "LoggingParams",
    "SerializationParams",
    "TimeParams",
    "ValidationError",
    "get_default_config",
]
