# core/week_resolution.py
"""Week and work-week strip resolutions."""

from typing import Dict, List

from logger.logger import Logger
from utils.date_manager import DAYS_IN_WEEK, DateManager

from .resolution import Resolution
from .types import Cell, DateParts, PeriodScope

WORK_DAYS = 5


class WeekResolution(Resolution):
    """One row per Monday-Sunday week, starting from the week of the current date."""

    def __init__(self, current_date=None, specific_date: bool = False):
        super().__init__(current_date, specific_date)
        self._week_overflow = {'left': 0, 'right': 0}

    @property
    def row_length(self) -> int:
        return DAYS_IN_WEEK

    def set_week_overflow(self, num_left, num_right) -> "WeekResolution":
        """Set the number of weeks shown either side of the current week."""
        self._week_overflow = {
            'left': self._coerce_count(num_left),
            'right': self._coerce_count(num_right),
        }
        return self

    def get_week_overflow(self) -> Dict[str, int]:
        return dict(self._week_overflow)

    def build_cells(self) -> List[Cell]:
        """
        Build one row of cells per week in the window.

        Returns:
            Cells in chronological order, row_length per week
        """
        year, month, day = self._current_date
        weeks = self._week_overflow['left'] + 1 + self._week_overflow['right']

        # Walk back to the Monday that opens the first week in the window
        offset = DateManager.weekday(year, month, day) + DAYS_IN_WEEK * self._week_overflow['left']
        year, month, day = self._step_back(year, month, day, offset)

        cells: List[Cell] = []
        for _ in range(weeks):
            for weekday in range(DAYS_IN_WEEK):
                if weekday < self.row_length:
                    cells.append(self._day_cell(
                        DateParts(year, month, day),
                        self._in_period(year, month),
                    ))
                year, month, day = self._step_forward(year, month, day)

        Logger.debug(f"Built {len(cells)} week cells around {self._current_date.isoformat()}")
        return cells

    def _in_period(self, year: int, month: int) -> bool:
        if self._period_scope is PeriodScope.ALL:
            return True
        return (year, month) == (self._current_date.year, self._current_date.month)

    @staticmethod
    def _step_forward(year: int, month: int, day: int):
        if day < DateManager.days_in_month(year, month):
            return year, month, day + 1
        year, month = DateManager.next_month(year, month)
        return year, month, 1

    @staticmethod
    def _step_back(year: int, month: int, day: int, count: int):
        while count >= day:
            count -= day
            year, month = DateManager.prev_month(year, month)
            day = DateManager.days_in_month(year, month)
        return year, month, day - count


class WorkWeekResolution(WeekResolution):
    """Week strip limited to Monday-Friday."""

    @property
    def row_length(self) -> int:
        return WORK_DAYS
