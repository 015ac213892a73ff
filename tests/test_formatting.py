"""
MonthGrid - Name Formatting Tests.

Unit tests for LocaleDateFormatter and the title_case helper. Tests run
in the process locale, which is the C locale unless the test runner
changes it, so English names are expected.
"""

import locale
from datetime import datetime

import pytest
from loguru import logger

from monthgrid.date_math import title_case
from monthgrid.formatting import LocaleDateFormatter


class TestTitleCaseUnit:
    """Unit tests for title_case."""

    def test_first_letter_upper_cased(self) -> None:
        """Verify only the first character changes."""
        assert title_case("março") == "Março"

    def test_rest_of_text_unchanged(self) -> None:
        """Verify later characters keep their case."""
        assert title_case("sEPTEMBER") == "SEPTEMBER"

    def test_empty_text(self) -> None:
        """Verify an empty string is returned unchanged."""
        assert title_case("") == ""


class TestLocaleDateFormatterUnit:
    """Unit tests for the calendar-backed formatter."""

    def setup_method(self) -> None:
        """Initialise a formatter in the process locale."""
        self.fmt = LocaleDateFormatter()

    def test_month_name(self) -> None:
        """Verify the full month name is returned."""
        assert self.fmt.format_month_name(datetime(2024, 3, 1)) == "March"

    def test_month_name_ignores_day_and_year(self) -> None:
        """Verify only the month of the date matters."""
        assert self.fmt.format_month_name(datetime(1901, 12, 31)) == "December"

    def test_weekday_initials_for_a_week(self) -> None:
        """Verify Sunday..Saturday initials are single upper-case letters."""
        # Mar 10 2024 is a Sunday
        week = [datetime(2024, 3, 10 + i) for i in range(7)]
        initials = [self.fmt.format_weekday_initial(d) for d in week]
        assert initials == ["S", "M", "T", "W", "T", "F", "S"]

    def test_default_locale_name_is_none(self) -> None:
        """Verify the formatter keeps the process locale by default."""
        assert self.fmt.locale_name is None

    def test_unknown_locale_fails_at_construction(self) -> None:
        """Verify an unavailable locale is reported immediately."""
        with pytest.raises(locale.Error):
            LocaleDateFormatter("xx_NOWHERE.UTF-8")


class TestNamedLocaleUnit:
    """Unit tests for a formatter built with an explicit locale name."""

    def setup_method(self) -> None:
        """Initialise a formatter in the C locale, present on every libc."""
        self.fmt = LocaleDateFormatter("C")

    def test_locale_name_is_kept(self) -> None:
        """Verify the configured locale name is exposed."""
        assert self.fmt.locale_name == "C"

    def test_month_name_in_named_locale(self) -> None:
        """Verify month names are looked up inside the locale switch."""
        assert self.fmt.format_month_name(datetime(2024, 3, 1)) == "March"

    def test_weekday_initials_in_named_locale(self) -> None:
        """Verify Sunday..Saturday initials inside the locale switch."""
        # Mar 10 2024 is a Sunday
        week = [datetime(2024, 3, 10 + i) for i in range(7)]
        initials = [self.fmt.format_weekday_initial(d) for d in week]
        assert initials == ["S", "M", "T", "W", "T", "F", "S"]

    def test_construction_is_logged(self) -> None:
        """Verify building a named-locale formatter leaves a debug record."""
        messages = []
        sink_id = logger.add(messages.append, level="DEBUG", format="{message}")
        logger.enable("monthgrid")
        try:
            LocaleDateFormatter("C")
        finally:
            logger.disable("monthgrid")
            logger.remove(sink_id)
        assert any("locale C" in str(m) for m in messages)
