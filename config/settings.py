# config/settings.py
"""Configuration management for calendar grid defaults."""

import logging
import os

from dotenv import load_dotenv

from core.types import PeriodScope
from logger.logger import Logger

_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off", "")


class Config:
    """Centralized configuration management."""

    def __init__(self):
        """Initialize configuration by loading environment variables."""
        load_dotenv()
        self._validate_environment()

    @property
    def month_overflow_left(self) -> int:
        """Months shown before the anchor month."""
        return int(os.getenv("CALENDAR_MONTH_OVERFLOW_LEFT", "0"))

    @property
    def month_overflow_right(self) -> int:
        """Months shown after the anchor month."""
        return int(os.getenv("CALENDAR_MONTH_OVERFLOW_RIGHT", "0"))

    @property
    def days_overflow(self) -> bool:
        """Fill week gaps with adjacent-month days."""
        return os.getenv("CALENDAR_DAYS_OVERFLOW", "false").strip().lower() in _TRUE_VALUES

    @property
    def period_scope(self) -> PeriodScope:
        """Which overflow months count as requested."""
        return PeriodScope(os.getenv("CALENDAR_PERIOD_SCOPE", "all").strip().lower())

    @property
    def log_level(self) -> int:
        """Logging level for the calendar logger."""
        return logging.getLevelName(os.getenv("CALENDAR_LOG_LEVEL", "INFO").strip().upper())

    def apply_to(self, resolution):
        """
        Copy the configured month options onto a MonthResolution.

        Args:
            resolution: MonthResolution to configure

        Returns:
            The configured resolution
        """
        return (
            resolution
            .set_month_overflow(self.month_overflow_left, self.month_overflow_right)
            .set_days_overflow(self.days_overflow)
            .set_period_scope(self.period_scope)
        )

    def configure_logging(self) -> None:
        """Apply CALENDAR_LOG_LEVEL to the calendar logger."""
        Logger.setup(level=self.log_level)

    def _validate_environment(self):
        """Validate optional environment variables that are set."""
        invalid = []

        for var in ("CALENDAR_MONTH_OVERFLOW_LEFT", "CALENDAR_MONTH_OVERFLOW_RIGHT"):
            value = os.getenv(var)
            if value is not None and not value.strip().isdigit():
                invalid.append(var)

        days_overflow = os.getenv("CALENDAR_DAYS_OVERFLOW")
        if days_overflow is not None and \
                days_overflow.strip().lower() not in _TRUE_VALUES + _FALSE_VALUES:
            invalid.append("CALENDAR_DAYS_OVERFLOW")

        scope = os.getenv("CALENDAR_PERIOD_SCOPE")
        if scope is not None and \
                scope.strip().lower() not in [s.value for s in PeriodScope]:
            invalid.append("CALENDAR_PERIOD_SCOPE")

        level = os.getenv("CALENDAR_LOG_LEVEL")
        if level is not None and \
                not isinstance(logging.getLevelName(level.strip().upper()), int):
            invalid.append("CALENDAR_LOG_LEVEL")

        if invalid:
            raise RuntimeError(
                f"Invalid environment variables: {', '.join(invalid)}"
            )
