"""Utility modules for calendar grids."""

from .date_manager import DAYS_IN_WEEK, DateManager
from .validation_manager import ValidationManager

__all__ = [
    'DAYS_IN_WEEK',
    'DateManager',
    'ValidationManager'
]
