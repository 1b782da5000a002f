# utils/date_manager.py
"""Gregorian calendar arithmetic utilities."""

from typing import List, Tuple

# Sakamoto's month offsets
_WEEKDAY_OFFSETS = (0, 3, 2, 5, 0, 3, 5, 1, 4, 6, 2, 4)

_MONTH_LENGTHS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

DAYS_IN_WEEK = 7


class DateManager:
    """Manages date calculations for month grids.

    All weekday numbers are Monday-first: Monday is 0, Sunday is 6.
    """

    @staticmethod
    def is_leap_year(year: int) -> bool:
        """Divisible by 4, not by 100 unless also by 400."""
        return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)

    @staticmethod
    def days_in_month(year: int, month: int) -> int:
        """
        Number of days in a month, accounting for leap-year February.

        Args:
            year: Year
            month: Month (1-12)

        Returns:
            Day count (28-31)
        """
        if month == 2 and DateManager.is_leap_year(year):
            return 29
        return _MONTH_LENGTHS[month - 1]

    @staticmethod
    def is_valid_date(year: int, month: int, day: int) -> bool:
        """Check a triple against the proleptic Gregorian calendar."""
        if not 1 <= month <= 12:
            return False
        return 1 <= day <= DateManager.days_in_month(year, month)

    @staticmethod
    def weekday(year: int, month: int, day: int) -> int:
        """
        Day of the week for a date.

        Args:
            year: Year
            month: Month (1-12)
            day: Day of month

        Returns:
            0 for Monday through 6 for Sunday
        """
        if month < 3:
            year -= 1
        sunday_first = (
            year + year // 4 - year // 100 + year // 400
            + _WEEKDAY_OFFSETS[month - 1] + day
        ) % 7
        return (sunday_first + 6) % 7

    @staticmethod
    def shift_month(year: int, month: int, offset: int) -> Tuple[int, int]:
        """Move a (year, month) pair by offset months, rolling the year over."""
        year_shift, month_index = divmod(month - 1 + offset, 12)
        return year + year_shift, month_index + 1

    @staticmethod
    def prev_month(year: int, month: int) -> Tuple[int, int]:
        """Return (year, month) for one month earlier."""
        if month == 1:
            return year - 1, 12
        return year, month - 1

    @staticmethod
    def next_month(year: int, month: int) -> Tuple[int, int]:
        """Return (year, month) for one month later."""
        if month == 12:
            return year + 1, 1
        return year, month + 1

    @staticmethod
    def calculate_month_window(
            year: int,
            month: int,
            months_before: int,
            months_after: int
    ) -> List[Tuple[int, int]]:
        """
        Calculate the months around an anchor month.

        Args:
            year: Anchor year
            month: Anchor month (1-12)
            months_before: Months to include before the anchor
            months_after: Months to include after the anchor

        Returns:
            List of (year, month) tuples in chronological order
        """
        return [
            DateManager.shift_month(year, month, offset)
            for offset in range(-months_before, months_after + 1)
        ]
