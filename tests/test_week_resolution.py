"""Tests for week and work-week strips."""

import pytest

from core import DateParts, PeriodScope, WeekResolution, WorkWeekResolution


def dates(cells):
    return [cell.date for cell in cells]


def test_week_containing_a_midweek_day():
    cells = WeekResolution((2024, 4, 3)).build_cells()

    assert dates(cells) == [DateParts(2024, 4, day) for day in range(1, 8)]
    assert all(cell.belongs_to_requested_period for cell in cells)
    assert not any(cell.is_blank for cell in cells)


def test_week_containing_a_sunday():
    cells = WeekResolution((2024, 3, 31)).build_cells()

    assert dates(cells) == [DateParts(2024, 3, day) for day in range(25, 32)]


def test_week_overflow_spans_months():
    resolution = WeekResolution((2024, 4, 3)).set_week_overflow(1, 1)
    cells = resolution.build_cells()

    assert resolution.get_week_overflow() == {'left': 1, 'right': 1}
    assert len(cells) == 21
    assert cells[0].date == DateParts(2024, 3, 25)
    assert cells[-1].date == DateParts(2024, 4, 14)


def test_week_overflow_clamps_negative_values():
    resolution = WeekResolution((2024, 4, 3)).set_week_overflow(-2, "1")

    assert resolution.get_week_overflow() == {'left': 0, 'right': 1}


def test_week_across_year_boundary_with_anchor_scope():
    cells = (
        WeekResolution((2025, 1, 1))
        .set_period_scope(PeriodScope.ANCHOR)
        .build_cells()
    )

    assert dates(cells)[:2] == [DateParts(2024, 12, 30), DateParts(2024, 12, 31)]
    assert [c.belongs_to_requested_period for c in cells] == [False, False] + [True] * 5


def test_week_flags_current_date():
    cells = WeekResolution((2024, 4, 3), specific_date=True).build_cells()

    assert [c.date for c in cells if c.is_current_date] == [DateParts(2024, 4, 3)]


@pytest.mark.parametrize("anchor", [(2024, 4, 3), (2024, 4, 6), (2024, 4, 7), (2024, 4, 1)])
def test_work_week_is_monday_to_friday(anchor):
    resolution = WorkWeekResolution(anchor)
    cells = resolution.build_cells()

    assert resolution.row_length == 5
    assert dates(cells) == [DateParts(2024, 4, day) for day in range(1, 6)]


def test_work_week_overflow_skips_weekends():
    cells = WorkWeekResolution((2024, 4, 3)).set_week_overflow(0, 1).build_cells()

    assert len(cells) == 10
    assert dates(cells)[5:] == [DateParts(2024, 4, day) for day in range(8, 13)]
