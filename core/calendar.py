# core/calendar.py
"""Calendar facade: the starting point for building grids."""

from datetime import datetime
from typing import List, Optional

from logger.logger import Logger

from .anchor import DateAnchor
from .exceptions import ResolutionNotSetError
from .resolution import Resolution
from .types import Cell, DateParts


class Calendar:
    """Composes the current date with a resolution.

    A calendar never picks a resolution on its own; set one with
    set_resolution() before building cells.
    """

    def __init__(
            self,
            year: Optional[int] = None,
            month: Optional[int] = None,
            day: Optional[int] = None
    ):
        """
        Initialize calendar with its current date.

        Args:
            year: Current year (4 digits; 2014)
            month: Current numeric month (February is 2)
            day: Current day of the month (15)

        Raises:
            InvalidDateError: If the date is invalid
        """
        self._anchor = DateAnchor(year, month, day)
        self._resolution: Optional[Resolution] = None

    def set_current_date(
            self,
            year: Optional[int] = None,
            month: Optional[int] = None,
            day: Optional[int] = None
    ) -> "Calendar":
        """
        Set the current date. The calendar uses this to work out which month
        to start on. Omitted year/month default to today, an omitted day
        defaults to the 1st.

        Returns:
            self

        Raises:
            InvalidDateError: If the date is invalid; nothing is changed
        """
        self._anchor.set_current_date(year, month, day)
        self._sync_resolution()
        return self

    def get_current_date(self) -> DateParts:
        """Return the current date as DateParts(year, month, day)."""
        return self._anchor.get_current_date()

    def get_current_datetime(self) -> datetime:
        """Return the current date at midnight."""
        return self._anchor.get_current_datetime()

    def is_specific_date(self) -> bool:
        """
        Whether the calendar was set to a specific day rather than just a
        month/year. Renderers use this to decide whether to highlight the
        current date.
        """
        return self._anchor.is_specific_date()

    # -------------------- Display options --------------------

    def set_resolution(self, resolution: Resolution) -> "Calendar":
        """
        Set the resolution (month grid, week strip...) of the calendar and
        point it at the current date.

        Returns:
            self
        """
        if not isinstance(resolution, Resolution):
            raise TypeError(
                f"Expected a Resolution, got {type(resolution).__name__}"
            )
        self._resolution = resolution
        self._sync_resolution()
        Logger.debug(f"Calendar resolution set to {type(resolution).__name__}")
        return self

    def get_resolution(self) -> Optional[Resolution]:
        """Return the active resolution, or None if none was set."""
        return self._resolution

    def build_cells(self) -> List[Cell]:
        """
        Build cells through the active resolution.

        Raises:
            ResolutionNotSetError: If no resolution was set
        """
        if self._resolution is None:
            raise ResolutionNotSetError()
        return self._resolution.build_cells()

    def _sync_resolution(self):
        if self._resolution is not None:
            self._resolution.set_current_date(
                self._anchor.get_current_date(),
                self._anchor.is_specific_date(),
            )
