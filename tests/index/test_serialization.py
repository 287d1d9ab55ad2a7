"""Tests for the canonical text encoding of indices."""

import pytest
from datetime import datetime, timedelta, timezone

from tsindex.config.loader import ConfigLoader
from tsindex.config.defaults import IndexSettings, SerializationParams, TimeParams, get_default_config
from tsindex.errors import InvalidArgumentError
from tsindex.frequency import BusinessDayFrequency, DayFrequency
from tsindex.index import IrregularDateTimeIndex, UniformDateTimeIndex, irregular, uniform
from tsindex.serialization import format_index, parse_index


def utc(*args) -> datetime:
    return datetime(*args, tzinfo=timezone.utc)


class TestUniformEncoding:
    """Uniform index text form."""

    def test_format(self, start):
        index = uniform(start, 5, DayFrequency(1))
        assert format_index(index) == "uniform,2015-04-08T00:00:00.000Z,5,days 1"

    def test_parse(self, start):
        parsed = parse_index("uniform,2015-04-08T00:00:00.000Z,5,days 1")
        assert isinstance(parsed, UniformDateTimeIndex)
        assert parsed == uniform(start, 5, DayFrequency(1))

    def test_business_days(self, start):
        index = uniform(start, 7, BusinessDayFrequency(2))
        text = format_index(index)
        assert text == "uniform,2015-04-08T00:00:00.000Z,7,businessDays 2"
        assert parse_index(text) == index

    def test_offset_preserved(self):
        offset = timezone(timedelta(hours=-5))
        index = uniform(datetime(2015, 4, 8, 9, 30, tzinfo=offset), 3, DayFrequency(1))
        text = format_index(index)
        assert text == "uniform,2015-04-08T09:30:00.000-05:00,3,days 1"
        assert parse_index(text).first().utcoffset() == timedelta(hours=-5)


class TestIrregularEncoding:
    """Irregular index text form."""

    def test_format(self):
        index = irregular([utc(2015, 4, 14), utc(2015, 4, 15, 0, 0, 0, 250000)])
        assert format_index(index) == (
            "irregular,2015-04-14T00:00:00.000Z,2015-04-15T00:00:00.250Z"
        )

    def test_parse(self, irregular_index):
        text = (
            "irregular,2015-04-14T00:00:00.000Z,2015-04-15T00:00:00.000Z,"
            "2015-04-17T00:00:00.000Z,2015-04-22T00:00:00.000Z,2015-04-26T00:00:00.000Z"
        )
        parsed = parse_index(text)
        assert isinstance(parsed, IrregularDateTimeIndex)
        assert parsed == irregular_index

    def test_parse_keeps_duplicates(self):
        parsed = parse_index("irregular,2015-04-08T00:00:00.000Z,2015-04-08T00:00:00.000Z")
        assert parsed.size() == 2
        assert parsed.loc_at_datetime(utc(2015, 4, 8)) == 0

    def test_empty(self):
        empty = irregular([])
        assert format_index(empty) == "irregular,"
        assert parse_index("irregular,") == empty
        assert parse_index("irregular") == empty


class TestRoundTrip:
    """parse_index(format_index(ix)) == ix."""

    @pytest.mark.parametrize("index", [
        uniform(utc(2015, 4, 8), 0, DayFrequency(1)),
        uniform(utc(2015, 4, 8), 1, DayFrequency(1)),
        uniform(utc(2015, 4, 8, 13, 45, 7, 891000), 30, DayFrequency(7)),
        uniform(utc(2015, 4, 11), 12, BusinessDayFrequency(1)),
        irregular([]),
        irregular([utc(2015, 4, 8)]),
        irregular([utc(2015, 4, 8), utc(2015, 4, 8), utc(2015, 4, 9, 0, 0, 0, 1000)]),
    ])
    def test_round_trip(self, index):
        assert parse_index(format_index(index)) == index

    def test_str_round_trip(self, business_index):
        assert parse_index(str(business_index)) == business_index


class TestParseErrors:
    """Rejected text names the offending token."""

    def test_unknown_index_type(self):
        with pytest.raises(InvalidArgumentError, match="weekly") as exc_info:
            parse_index("weekly,2015-04-08T00:00:00.000Z,5,days 1")
        assert exc_info.value.token == "weekly"

    def test_unknown_frequency_kind(self):
        with pytest.raises(InvalidArgumentError, match="fortnights") as exc_info:
            parse_index("uniform,2015-04-08T00:00:00.000Z,5,fortnights 1")
        assert exc_info.value.token == "fortnights"

    def test_bad_period_count(self):
        with pytest.raises(InvalidArgumentError) as exc_info:
            parse_index("uniform,2015-04-08T00:00:00.000Z,five,days 1")
        assert exc_info.value.token == "five"

    def test_bad_instant(self):
        with pytest.raises(InvalidArgumentError) as exc_info:
            parse_index("irregular,2015-04-08T00:00:00.000Z,yesterday")
        assert exc_info.value.token == "yesterday"

    def test_missing_fields(self):
        with pytest.raises(InvalidArgumentError):
            parse_index("uniform,2015-04-08T00:00:00.000Z,5")

    def test_decreasing_irregular(self):
        with pytest.raises(InvalidArgumentError):
            parse_index("irregular,2015-04-09T00:00:00.000Z,2015-04-08T00:00:00.000Z")

    def test_empty_field_between_instants(self):
        with pytest.raises(InvalidArgumentError):
            parse_index("irregular,2015-04-08T00:00:00.000Z,,2015-04-09T00:00:00.000Z")


class TestSettings:
    """Encoding honours explicit settings."""

    def test_default_timezone_for_naive_instants(self):
        settings = IndexSettings(
            time=TimeParams(default_timezone="America/New_York"),
            serialization=SerializationParams(),
            logging=get_default_config().logging,
        )
        parsed = parse_index("irregular,2015-04-08T00:00:00", settings)
        assert parsed.first() == utc(2015, 4, 8, 4)

    def test_custom_separators(self, start):
        settings = IndexSettings(
            time=TimeParams(),
            serialization=SerializationParams(field_separator=";", frequency_separator="/"),
            logging=get_default_config().logging,
        )
        index = uniform(start, 2, DayFrequency(1))
        text = format_index(index, settings)
        assert text == "uniform;2015-04-08T00:00:00.000Z;2;days/1"
        assert parse_index(text, settings) == index

    def test_microsecond_precision(self, start):
        settings = IndexSettings(
            time=TimeParams(timestamp_precision="microseconds"),
            serialization=SerializationParams(),
            logging=get_default_config().logging,
        )
        text = format_index(irregular([start]), settings)
        assert text == "irregular,2015-04-08T00:00:00.000000Z"
        assert parse_index(text) == irregular([start])

    @pytest.mark.parametrize("serialization", [
        {"field_separator": ";"},
        {"field_separator": "|", "frequency_separator": "_"},
        {"field_separator": "\t", "frequency_separator": "/"},
    ])
    def test_loaded_settings_round_trip(self, tmp_path, serialization):
        settings = ConfigLoader.create(tmp_path).load_settings({"serialization": serialization})
        for index in (
            irregular([]),
            irregular([utc(2015, 4, 8), utc(2015, 4, 8, 12, 30)]),
            uniform(utc(2015, 4, 8), 0, DayFrequency(1)),
            uniform(utc(2015, 4, 8), 6, BusinessDayFrequency(2)),
        ):
            assert parse_index(format_index(index, settings), settings) == index
