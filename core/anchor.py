# core/anchor.py
"""The date a calendar is pointed at."""

from datetime import MAXYEAR, MINYEAR, date, datetime
from typing import Optional

from logger.logger import Logger
from utils.date_manager import DateManager

from .exceptions import InvalidDateError
from .types import DateParts


class DateAnchor:
    """Validated year/month/day triple plus whether a day was given explicitly."""

    def __init__(
            self,
            year: Optional[int] = None,
            month: Optional[int] = None,
            day: Optional[int] = None
    ):
        """
        Initialize the anchor; see set_current_date for defaults.

        Raises:
            InvalidDateError: If the triple is not a real date
        """
        self._parts: Optional[DateParts] = None
        self._specific_date = False
        self.set_current_date(year, month, day)

    def set_current_date(
            self,
            year: Optional[int] = None,
            month: Optional[int] = None,
            day: Optional[int] = None
    ) -> "DateAnchor":
        """
        Point the anchor at a date.

        Year and month default to today's; day defaults to the 1st, since
        months have variable length. Supplying a day marks the anchor as a
        specific date.

        Args:
            year: Year (4 digits; 2014)
            month: Numeric month (February is 2)
            day: Day of the month

        Returns:
            self

        Raises:
            InvalidDateError: If the triple is not a real date. The anchor
                keeps its previous value.
        """
        specific_date = day is not None

        today = date.today()
        year = today.year if year is None else year
        month = today.month if month is None else month
        day = 1 if day is None else day

        if not self._is_valid(year, month, day):
            combined = f"{year}-{str(month).zfill(2)}-{str(day).zfill(2)}"
            Logger.debug(f"Rejected anchor date {combined}")
            raise InvalidDateError(combined)

        self._parts = DateParts(year, month, day)
        self._specific_date = specific_date
        return self

    def get_current_date(self) -> DateParts:
        """Return the anchor as (year, month, day)."""
        return self._parts

    def get_current_datetime(self) -> datetime:
        """Return the anchor at local midnight."""
        return datetime(self._parts.year, self._parts.month, self._parts.day)

    def is_specific_date(self) -> bool:
        """Whether a day was supplied rather than just a month/year."""
        return self._specific_date

    @staticmethod
    def _is_valid(year, month, day) -> bool:
        for part in (year, month, day):
            # bool is an int subclass but never a date component
            if isinstance(part, bool) or not isinstance(part, int):
                return False
        if not MINYEAR <= year <= MAXYEAR:
            return False
        return DateManager.is_valid_date(year, month, day)
