"""Tests for structlog configuration and parser logging."""

import pytest
import structlog
from structlog.testing import capture_logs

from tsindex.config.defaults import get_default_config
from tsindex.errors import InvalidArgumentError
from tsindex.logging.config import configure_from_settings, configure_logging, get_logger
from tsindex.serialization import parse_index


@pytest.fixture(autouse=True)
def reset_structlog():
    yield
    structlog.reset_defaults()


class TestConfigureLogging:
    """Test logging configuration."""

    def test_json_renderer(self):
        configure_logging(level="DEBUG", format_json=True)
        config = structlog.get_config()
        assert structlog.is_configured()
        assert config["wrapper_class"] is structlog.stdlib.BoundLogger
        assert isinstance(config["processors"][-1], structlog.processors.JSONRenderer)

    def test_console_renderer_without_timestamp(self):
        configure_logging(include_timestamp=False)
        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)
        assert not any(isinstance(p, structlog.processors.TimeStamper) for p in processors)

    def test_timestamp_precedes_renderer(self):
        configure_logging()
        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-2], structlog.processors.TimeStamper)
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)

    def test_configure_from_settings(self):
        configure_from_settings(get_default_config())
        assert structlog.is_configured()

    def test_get_logger(self):
        assert get_logger("tsindex.test").bind(component="test") is not None


class TestParserLogging:
    """Parser rejections are logged before raising."""

    def test_rejection_logged(self):
        with capture_logs() as captured:
            with pytest.raises(InvalidArgumentError):
                parse_index("weekly,2015-04-08T00:00:00.000Z")

        warnings = [entry for entry in captured if entry["log_level"] == "warning"]
        assert len(warnings) == 1
        assert warnings[0]["token"] == "weekly"
        assert warnings[0]["subsystem"] == "serialization"

    def test_success_logged_at_debug(self):
        with capture_logs() as captured:
            parse_index("uniform,2015-04-08T00:00:00.000Z,5,days 1")

        debug = [entry for entry in captured if entry["log_level"] == "debug"]
        assert debug[0]["index_type"] == "uniform"
        assert debug[0]["size"] == 5
