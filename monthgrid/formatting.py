"""
MonthGrid - Name Formatting Module.

Weekday and month names come from a formatter object so the model does
not depend on one locale. The default formatter reads the standard
library calendar name tables, which follow the LC_TIME locale.

Classes:
    DateFormatter: Protocol expected by CalendarModel.
    LocaleDateFormatter: Formatter backed by the calendar module.
"""

import calendar
from contextlib import nullcontext
from datetime import datetime
from typing import ContextManager, Optional, Protocol

from loguru import logger

from monthgrid.date_math import title_case


class DateFormatter(Protocol):
    """Formats the names shown in headers and the month label."""

    def format_weekday_initial(self, value: datetime) -> str:
        ...

    def format_month_name(self, value: datetime) -> str:
        ...


class LocaleDateFormatter:
    """
    Formats names using calendar.day_name and calendar.month_name.

    Example:
        >>> fmt = LocaleDateFormatter()
        >>> fmt.format_month_name(datetime(2024, 3, 1))
        'March'
        >>> fmt.format_weekday_initial(datetime(2024, 3, 1))
        'F'
    """

    def __init__(self, locale_name: Optional[str] = None):
        """
        Initialises the formatter.

        Args:
            locale_name: LC_TIME locale to format in. None keeps the
                process locale.

        Raises:
            locale.Error: If the locale is not available on this system.
        """
        self._locale_name = locale_name
        if locale_name is not None:
            # Fail now rather than on the first render
            with self._names():
                pass
            logger.debug("Formatting calendar names in locale {}", locale_name)

    @property
    def locale_name(self) -> Optional[str]:
        return self._locale_name

    def _names(self) -> ContextManager:
        if self._locale_name is None:
            return nullcontext()
        return calendar.different_locale(self._locale_name)

    def format_weekday_initial(self, value: datetime) -> str:
        """First letter of the full weekday name, upper-cased."""
        with self._names():
            name = calendar.day_name[value.weekday()]
        return name[0].upper()

    def format_month_name(self, value: datetime) -> str:
        """Full month name with its first letter upper-cased."""
        with self._names():
            name = calendar.month_name[value.month]
        return title_case(name)
