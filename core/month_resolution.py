# core/month_resolution.py
"""Month grid resolution."""

from typing import Dict, List

from logger.logger import Logger
from utils.date_manager import DAYS_IN_WEEK, DateManager

from .resolution import Resolution
from .types import Cell, DateParts, PeriodScope


class MonthResolution(Resolution):
    """Arranges weeks by row and days by column, optionally over several months.

        | M | T | W | T | F | S | S |
        |   |   |   |   |   |   | 1 |
        | 2 | 3 | 4 | ... etc

    Weeks start on Monday. Each month is laid out independently and padded
    to whole weeks, so a window of months is a concatenation of month grids.
    """

    def __init__(self, current_date=None, specific_date: bool = False):
        super().__init__(current_date, specific_date)
        self._month_overflow = {'left': 0, 'right': 0}
        self._days_overflow = False

    @property
    def row_length(self) -> int:
        return DAYS_IN_WEEK

    # -------------------- Month overflow --------------------

    def set_month_overflow(self, num_left, num_right) -> "MonthResolution":
        """
        Set the number of months shown either side of the current one.
        So if it's April, values of (1, 2) give March - April - May - June.

        Args:
            num_left: Months before the current month (negatives clamp to 0)
            num_right: Months after the current month (negatives clamp to 0)

        Returns:
            self
        """
        left = self._coerce_count(num_left)
        right = self._coerce_count(num_right)
        self._month_overflow = {'left': left, 'right': right}
        return self

    def get_month_overflow(self) -> Dict[str, int]:
        """Return the month overflow as {'left': n, 'right': n}."""
        return dict(self._month_overflow)

    # -------------------- Days overflow --------------------

    def set_days_overflow(self, use_days_overflow) -> "MonthResolution":
        """
        Set whether week gaps at the month edges are filled with days from the
        adjacent months instead of blank cells.
        """
        self._days_overflow = bool(use_days_overflow)
        return self

    def get_days_overflow(self) -> bool:
        return self._days_overflow

    # -------------------- Generating the cells --------------------

    def target_months(self):
        """(year, month) pairs covered by the grid, in chronological order."""
        return DateManager.calculate_month_window(
            self._current_date.year,
            self._current_date.month,
            self._month_overflow['left'],
            self._month_overflow['right'],
        )

    def build_cells(self) -> List[Cell]:
        """
        Build the grid for every target month and concatenate them.

        Returns:
            Cells in chronological order, a multiple of 7 per month
        """
        cells: List[Cell] = []
        for year, month in self.target_months():
            cells.extend(self._build_month(year, month))

        Logger.debug(
            f"Built {len(cells)} month cells around "
            f"{self._current_date.year}-{self._current_date.month:02d}"
        )
        return cells

    def _build_month(self, year: int, month: int) -> List[Cell]:
        days = DateManager.days_in_month(year, month)
        leading_gap = DateManager.weekday(year, month, 1)
        trailing_gap = (DAYS_IN_WEEK - (leading_gap + days) % DAYS_IN_WEEK) % DAYS_IN_WEEK

        in_period = (
            self._period_scope is PeriodScope.ALL
            or (year, month) == (self._current_date.year, self._current_date.month)
        )

        cells = self._leading_cells(year, month, leading_gap)
        cells.extend(
            self._day_cell(DateParts(year, month, day), in_period)
            for day in range(1, days + 1)
        )
        cells.extend(self._trailing_cells(year, month, trailing_gap))
        return cells

    def _leading_cells(self, year: int, month: int, count: int) -> List[Cell]:
        if not self._days_overflow:
            return [Cell.blank() for _ in range(count)]

        prev_year, prev_month = DateManager.prev_month(year, month)
        last_day = DateManager.days_in_month(prev_year, prev_month)
        return [
            self._day_cell(DateParts(prev_year, prev_month, day), False)
            for day in range(last_day - count + 1, last_day + 1)
        ]

    def _trailing_cells(self, year: int, month: int, count: int) -> List[Cell]:
        if not self._days_overflow:
            return [Cell.blank() for _ in range(count)]

        next_year, next_month = DateManager.next_month(year, month)
        return [
            self._day_cell(DateParts(next_year, next_month, day), False)
            for day in range(1, count + 1)
        ]
