"""Tests for date anchoring and validation."""

from datetime import date, datetime

import pytest

from core import Calendar, DateAnchor, DateParts, InvalidDateError


@pytest.mark.parametrize("year, month, day", [
    (2024, 4, 15),
    (2020, 2, 29),
    (2021, 2, 28),
    (1999, 12, 31),
    (2024, 1, 1),
])
def test_valid_dates_construct(year, month, day):
    calendar = Calendar(year, month, day)

    assert calendar.get_current_date() == DateParts(year, month, day)
    assert calendar.get_current_date().to_dict() == {'day': day, 'month': month, 'year': year}
    assert calendar.is_specific_date() is True


@pytest.mark.parametrize("year, month, day, rejected", [
    (2021, 2, 30, "2021-02-30"),
    (2021, 2, 29, "2021-02-29"),
    (2024, 13, 1, "2024-13-01"),
    (2024, 4, 0, "2024-04-00"),
    (2024, 4, 31, "2024-04-31"),
])
def test_invalid_dates_raise(year, month, day, rejected):
    with pytest.raises(InvalidDateError) as excinfo:
        Calendar(year, month, day)

    assert excinfo.value.date_string == rejected
    assert rejected in str(excinfo.value)


@pytest.mark.parametrize("bad", ["2024", 4.0, True])
def test_non_integer_day_components_are_rejected(bad):
    with pytest.raises(InvalidDateError):
        DateAnchor(2024, 4, bad)


def test_defaults_use_today_and_the_first():
    today = date.today()
    anchor = DateAnchor()

    assert anchor.get_current_date() == DateParts(today.year, today.month, 1)
    assert anchor.is_specific_date() is False


def test_month_only_is_not_specific():
    anchor = DateAnchor(2024, 4)

    assert anchor.get_current_date() == DateParts(2024, 4, 1)
    assert anchor.is_specific_date() is False


def test_failed_update_leaves_previous_date():
    calendar = Calendar(2024, 4)

    with pytest.raises(InvalidDateError):
        calendar.set_current_date(2021, 2, 30)

    assert calendar.get_current_date() == DateParts(2024, 4, 1)
    assert calendar.is_specific_date() is False


def test_current_datetime_is_midnight():
    calendar = Calendar(2024, 4, 15)

    assert calendar.get_current_datetime() == datetime(2024, 4, 15, 0, 0)


def test_invalid_date_error_is_a_value_error():
    with pytest.raises(ValueError):
        Calendar(2023, 2, 29)
