"""Configuration validation utilities."""

from dataclasses import dataclass, fields
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from .defaults import LoggingParams, SerializationParams, TimeParams

SUPPORTED_PRECISIONS = ("milliseconds", "microseconds")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
# Characters an ISO-8601 instant can hold besides letters and digits
INSTANT_PUNCTUATION = "-:.+"

_SECTION_FIELDS = {
    "time": {f.name for f in fields(TimeParams)},
    "serialization": {f.name for f in fields(SerializationParams)},
    "logging": {f.name for f in fields(LoggingParams)},
}


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_time_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate instant interpretation parameters."""
        errors = []

        if "default_timezone" in params:
            value = params["default_timezone"]
            try:
                ZoneInfo(value)
            except (ZoneInfoNotFoundError, TypeError, ValueError):
                errors.append(ValidationError(
                    field="default_timezone",
                    message="Must be an IANA timezone name",
                    value=value
                ))

        if "timestamp_precision" in params:
            value = params["timestamp_precision"]
            if value not in SUPPORTED_PRECISIONS:
                errors.append(ValidationError(
                    field="timestamp_precision",
                    message=f"Must be one of {', '.join(SUPPORTED_PRECISIONS)}",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_serialization_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate text encoding parameters."""
        errors = []

        for name in ("field_separator", "frequency_separator"):
            if name in params:
                value = params[name]
                if not isinstance(value, str) or not value:
                    errors.append(ValidationError(
                        field=name,
                        message="Must be a non-empty string",
                        value=value
                    ))
                elif any(ch.isalnum() or ch in INSTANT_PUNCTUATION for ch in value):
                    errors.append(ValidationError(
                        field=name,
                        message="Must not contain letters, digits or any of "
                                f"'{INSTANT_PUNCTUATION}', which occur in encoded fields",
                        value=value
                    ))

        field_sep = params.get("field_separator")
        frequency_sep = params.get("frequency_separator")
        if isinstance(field_sep, str) and field_sep and isinstance(frequency_sep, str) and field_sep in frequency_sep:
            errors.append(ValidationError(
                field="frequency_separator",
                message="Must not contain field_separator",
                value=frequency_sep
            ))

        return errors

    @staticmethod
    def validate_logging_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate logging parameters."""
        errors = []

        if "level" in params:
            value = params["level"]
            if not isinstance(value, str) or value.upper() not in LOG_LEVELS:
                errors.append(ValidationError(
                    field="level",
                    message=f"Must be one of {', '.join(LOG_LEVELS)}",
                    value=value
                ))

        if "format_json" in params:
            value = params["format_json"]
            if not isinstance(value, bool):
                errors.append(ValidationError(
                    field="format_json",
                    message="Must be a boolean",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        for section, params in config.items():
            if section not in _SECTION_FIELDS:
                errors.append(ValidationError(
                    field=section,
                    message="Unknown configuration section",
                    value=params
                ))
                continue
            if not isinstance(params, dict):
                errors.append(ValidationError(
                    field=section,
                    message="Must be a mapping",
                    value=params
                ))
                continue
            for name in params:
                if name not in _SECTION_FIELDS[section]:
                    errors.append(ValidationError(
                        field=f"{section}.{name}",
                        message="Unknown configuration key",
                        value=params[name]
                    ))

        if isinstance(config.get("time"), dict):
            errors.extend(ConfigValidator.validate_time_params(config["time"]))

        if isinstance(config.get("serialization"), dict):
            errors.extend(ConfigValidator.validate_serialization_params(config["serialization"]))

        if isinstance(config.get("logging"), dict):
            errors.extend(ConfigValidator.validate_logging_params(config["logging"]))

        return errors
