"""Tests for the calendar facade."""

import pytest

from core import (
    Calendar,
    DateParts,
    InvalidDateError,
    MonthResolution,
    ResolutionNotSetError,
    WeekResolution,
)


def test_no_resolution_by_default():
    calendar = Calendar(2024, 4, 15)

    assert calendar.get_resolution() is None
    with pytest.raises(ResolutionNotSetError):
        calendar.build_cells()


def test_set_resolution_points_it_at_the_anchor():
    calendar = Calendar(2024, 4, 15)
    resolution = MonthResolution((2000, 1, 1))

    assert calendar.set_resolution(resolution) is calendar
    assert calendar.get_resolution() is resolution
    assert resolution.get_current_date() == DateParts(2024, 4, 15)
    assert resolution.is_specific_date() is True


def test_set_resolution_does_not_alter_the_anchor(month_calendar):
    month_calendar.set_resolution(WeekResolution())

    assert month_calendar.get_current_date() == DateParts(2024, 4, 15)
    assert month_calendar.is_specific_date() is True


def test_set_resolution_rejects_other_types():
    with pytest.raises(TypeError):
        Calendar(2024, 4).set_resolution("month")


def test_build_cells_highlights_the_specific_date(month_calendar):
    cells = month_calendar.build_cells()

    assert [c.date for c in cells if c.is_current_date] == [DateParts(2024, 4, 15)]


def test_month_only_calendar_highlights_nothing():
    calendar = Calendar(2024, 4).set_resolution(MonthResolution())

    assert not any(cell.is_current_date for cell in calendar.build_cells())


def test_changing_the_date_repoints_the_resolution(month_calendar):
    month_calendar.set_current_date(2024, 5)
    cells = month_calendar.build_cells()

    assert month_calendar.get_resolution().get_current_date() == DateParts(2024, 5, 1)
    assert cells[2].date == DateParts(2024, 5, 1)
    assert not any(cell.is_current_date for cell in cells)


def test_failed_date_change_keeps_resolution_in_place(month_calendar):
    with pytest.raises(InvalidDateError):
        month_calendar.set_current_date(2024, 2, 30)

    assert month_calendar.get_resolution().get_current_date() == DateParts(2024, 4, 15)


def test_replacing_the_resolution_keeps_configuration_separate(month_calendar):
    first = month_calendar.get_resolution().set_month_overflow(1, 1)
    second = MonthResolution()
    month_calendar.set_resolution(second)

    assert first.get_month_overflow() == {'left': 1, 'right': 1}
    assert second.get_month_overflow() == {'left': 0, 'right': 0}
    assert len(month_calendar.build_cells()) == 35
