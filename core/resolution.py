# core/resolution.py
"""Base resolution interface."""

from abc import ABC, abstractmethod
from datetime import date
from typing import List, Mapping, Tuple, Union

from utils.date_manager import DateManager

from .exceptions import InvalidDateError
from .types import Cell, DateParts, PeriodScope

DateInput = Union[DateParts, date, Mapping[str, int], Tuple[int, int, int], None]


class Resolution(ABC):
    """Abstract base class for calendar resolutions.

    A resolution decides the shape of the grid (a month, a week strip...) and
    turns the date it is pointed at into an ordered list of cells.
    """

    def __init__(self, current_date: DateInput = None, specific_date: bool = False):
        """
        Initialize resolution with the date it is pointed at.

        Args:
            current_date: Date parts, either DateParts, a (year, month, day)
                tuple or a mapping with 'year', 'month' and 'day' keys.
                Defaults to today.
            specific_date: Whether the date should be highlighted as the
                current date in built cells
        """
        self._current_date = self._coerce_date(current_date)
        self._specific_date = bool(specific_date)
        self._period_scope = PeriodScope.ALL

    def set_current_date(self, current_date: DateInput, specific_date: bool = False) -> "Resolution":
        """Point the resolution at a date; the owning Calendar calls this."""
        self._current_date = self._coerce_date(current_date)
        self._specific_date = bool(specific_date)
        return self

    def get_current_date(self) -> DateParts:
        return self._current_date

    def is_specific_date(self) -> bool:
        return self._specific_date

    def set_period_scope(self, scope: Union[PeriodScope, str]) -> "Resolution":
        """
        Set which periods count as requested when overflow periods are shown.

        Args:
            scope: PeriodScope member or its value ('all' or 'anchor')

        Returns:
            self
        """
        self._period_scope = PeriodScope(scope)
        return self

    def get_period_scope(self) -> PeriodScope:
        return self._period_scope

    @property
    @abstractmethod
    def row_length(self) -> int:
        """Number of cells in one rendered row."""
        pass

    @abstractmethod
    def build_cells(self) -> List[Cell]:
        """
        Build the cells for the current date and configuration.

        Returns:
            Cells in chronological order
        """
        pass

    def _day_cell(self, parts: DateParts, in_period: bool) -> Cell:
        """Cell for a real date, flagged against the anchor."""
        return Cell(
            date=parts,
            belongs_to_requested_period=in_period,
            is_blank=False,
            is_current_date=self._specific_date and parts == self._current_date,
        )

    @staticmethod
    def _coerce_count(value) -> int:
        """Normalize an overflow count to a non-negative integer."""
        try:
            return max(0, int(value))
        except TypeError as e:
            raise ValueError(f"Invalid overflow count: {value!r}") from e

    @staticmethod
    def _coerce_date(current_date: DateInput) -> DateParts:
        """
        Normalize date input to DateParts.

        Raises:
            InvalidDateError: If the parts are not a real calendar date
        """
        if current_date is None:
            today = date.today()
            return DateParts(today.year, today.month, today.day)
        if isinstance(current_date, date):
            return DateParts(current_date.year, current_date.month, current_date.day)

        if isinstance(current_date, Mapping):
            raw = (current_date.get('year'), current_date.get('month'), current_date.get('day'))
        else:
            raw = tuple(current_date)

        try:
            parts = DateParts(*(int(part) for part in raw))
        except (TypeError, ValueError) as e:
            raise InvalidDateError("-".join(str(part) for part in raw)) from e

        if not DateManager.is_valid_date(*parts):
            raise InvalidDateError(parts.isoformat())
        return parts
