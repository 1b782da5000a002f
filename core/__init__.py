"""Core calendar components."""

from .anchor import DateAnchor
from .calendar import Calendar
from .data_processor import GRID_COLUMNS, GridProcessor
from .exceptions import InvalidDateError, ResolutionNotSetError
from .month_resolution import MonthResolution
from .resolution import Resolution
from .types import Cell, DateParts, PeriodScope
from .week_resolution import WeekResolution, WorkWeekResolution

__all__ = [
    'Calendar',
    'DateAnchor',
    'Resolution',
    'MonthResolution',
    'WeekResolution',
    'WorkWeekResolution',
    'Cell',
    'DateParts',
    'PeriodScope',
    'InvalidDateError',
    'ResolutionNotSetError',
    'GridProcessor',
    'GRID_COLUMNS'
]
