"""Shared fixtures for calendar grid tests."""

import pytest

from core import Calendar, MonthResolution


@pytest.fixture
def april_2024():
    """Month resolution pointed at April 2024 with default options."""
    return MonthResolution({'year': 2024, 'month': 4, 'day': 1})


@pytest.fixture
def month_calendar():
    """Calendar pinned to 15 April 2024 with a month resolution."""
    calendar = Calendar(2024, 4, 15)
    calendar.set_resolution(MonthResolution())
    return calendar
