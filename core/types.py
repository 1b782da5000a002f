# core/types.py
"""Shared type definitions to avoid circular imports."""

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Dict, NamedTuple, Optional


class PeriodScope(Enum):
    """Which target periods count as requested when overflow is configured."""
    ALL = "all"
    ANCHOR = "anchor"


class DateParts(NamedTuple):
    """A (year, month, day) triple."""
    year: int
    month: int
    day: int

    def to_dict(self) -> Dict[str, int]:
        """Return the parts keyed by name: {'day': d, 'month': m, 'year': y}."""
        return {'day': self.day, 'month': self.month, 'year': self.year}

    def to_date(self) -> date:
        """Convert to a datetime.date (years 1-9999 only)."""
        return date(self.year, self.month, self.day)

    def isoformat(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"


@dataclass(frozen=True)
class Cell:
    """One slot in a calendar grid."""
    date: Optional[DateParts] = None
    belongs_to_requested_period: bool = False
    is_blank: bool = False
    is_current_date: bool = False

    @classmethod
    def blank(cls) -> "Cell":
        """Placeholder for a gap slot when day overflow is disabled."""
        return cls(date=None, is_blank=True)
