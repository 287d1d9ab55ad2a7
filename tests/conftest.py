"""Pytest configuration and shared fixtures."""

import pytest
from datetime import datetime, timezone

from tsindex.frequency import BusinessDayFrequency, DayFrequency
from tsindex.index import irregular, uniform


@pytest.fixture
def start() -> datetime:
    """Wednesday 2015-04-08, midnight UTC."""
    return datetime(2015, 4, 8, tzinfo=timezone.utc)


@pytest.fixture
def daily_index(start):
    """Five consecutive days starting 2015-04-08."""
    return uniform(start, 5, DayFrequency(1))


@pytest.fixture
def business_index(start):
    """Ten business days starting Wednesday 2015-04-08."""
    return uniform(start, 10, BusinessDayFrequency(1))


@pytest.fixture
def irregular_index():
    """Irregular samples from 2015-04-14 to 2015-04-26."""
    return irregular([
        datetime(2015, 4, 14, tzinfo=timezone.utc),
        datetime(2015, 4, 15, tzinfo=timezone.utc),
        datetime(2015, 4, 17, tzinfo=timezone.utc),
        datetime(2015, 4, 22, tzinfo=timezone.utc),
        datetime(2015, 4, 26, tzinfo=timezone.utc),
    ])
