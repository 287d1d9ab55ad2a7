"""Configuration loader with 2-tier override precedence."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import structlog
import yaml

from ..errors import InvalidArgumentError
from .defaults import (
    IndexSettings,
    LoggingParams,
    SerializationParams,
    TimeParams,
    get_default_config,
)
from .validation import ConfigValidator

logger = structlog.get_logger(__name__)

CONFIG_FILENAME = "tsindex.yaml"


@dataclass(frozen=True)
class ConfigLoader:
    """Manages configuration loading over the built-in defaults."""

    config_dir: Path
    defaults: IndexSettings

    @classmethod
    def create(cls, config_dir: Optional[Path] = None) -> "ConfigLoader":
        """Create a ConfigLoader instance."""
        if config_dir is None:
            config_dir = Path(__file__).parent.parent.parent / "config"

        return cls(
            config_dir=Path(config_dir),
            defaults=get_default_config(),
        )

    def load_file_config(self) -> dict[str, Any]:
        """Load overrides from the YAML file, if one exists."""
        config_file = self.config_dir / CONFIG_FILENAME

        if not config_file.exists():
            return {}

        with open(config_file) as f:
            file_config = yaml.safe_load(f)

        return file_config or {}

    def merge_config(self, overrides: Optional[dict[str, Any]] = None) -> dict[str, Any]:
        """
        Merge configuration with 2-tier precedence.

        Priority order:
        1. Explicit overrides (highest priority)
        2. YAML file overrides
        3. Built-in defaults (lowest priority)
        """
        config = self._dataclass_to_dict(self.defaults)

        config = self._deep_merge(config, self.load_file_config())

        if overrides:
            config = self._deep_merge(config, overrides)

        return config

    def load_settings(self, overrides: Optional[dict[str, Any]] = None) -> IndexSettings:
        """Merge and validate configuration, returning typed settings."""
        config = self.merge_config(overrides)

        errors = ConfigValidator.validate_config(config)
        if errors:
            logger.warning(
                "Invalid tsindex configuration",
                config_dir=str(self.config_dir),
                fields=[error.field for error in errors],
            )
            first = errors[0]
            raise InvalidArgumentError(
                f"Invalid configuration for {first.field}: {first.message}",
                token=str(first.value),
                context={"errors": [error.field for error in errors]},
            )

        return IndexSettings(
            time=TimeParams(**config["time"]),
            serialization=SerializationParams(**config["serialization"]),
            logging=LoggingParams(**config["logging"]),
        )

    def _dataclass_to_dict(self, obj: Any) -> dict[str, Any]:
        """Convert nested dataclasses to dictionary."""
        if hasattr(obj, '__dataclass_fields__'):
            result = {}
            for field_name in obj.__dataclass_fields__:
                value = getattr(obj, field_name)
                if hasattr(value, '__dataclass_fields__'):
                    result[field_name] = self._dataclass_to_dict(value)
                else:
                    result[field_name] = value
            return result
        return obj  # type: ignore[no-any-return]

    def _deep_merge(self, base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        """Deep merge two dictionaries."""
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result
