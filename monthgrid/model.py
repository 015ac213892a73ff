"""
MonthGrid - Calendar Model Module.

This module holds the navigation and selection state of a month-view
calendar and derives the grid, weekday headers and month label from it.

Only month, year and the selection are stored. The grid and the month
label are rebuilt from them on every access, so no derived view can go
stale after a mutation. The headers depend on the real current date
only and are computed once.

Known limitations kept for compatibility:
    - month_for_grid_cell guesses the owning month from the row index
      and the size of the day number (thresholds 7 and 20, rows 4 and
      5) instead of computing it from dates.
    - is_today always builds its date in current_year, so a spill-over
      cell that belongs to the neighbouring year is never flagged.

Classes:
    CalendarModel: Navigation state plus derived calendar views.
"""

from datetime import datetime
from typing import Callable, Iterator, List, Optional, Tuple

from loguru import logger

from monthgrid.date_math import (
    at_midnight,
    days_in_month,
    make_date,
    next_week,
    week_dates,
    week_from,
)
from monthgrid.formatting import DateFormatter, LocaleDateFormatter
from monthgrid.schema import (
    CalendarConfig,
    CalendarGrid,
    CalendarView,
    GridCell,
)


Listener = Callable[["CalendarModel"], None]


class CalendarModel:
    """
    Month-view calendar state with navigation and day selection.

    Attributes:
        current_month: Displayed month (1-12).
        current_year: Displayed year.
        selected_day: Day number of the last selection.
        selected_date: Midnight datetime of the last selection.

    Example:
        >>> model = CalendarModel(clock=lambda: datetime(2024, 3, 10))
        >>> model.grid[0]
        [25, 26, 27, 28, 29, 1, 2]
        >>> model.select_date(28, 0)
        >>> (model.current_month, model.selected_day)
        (2, 28)
    """

    # Position heuristic thresholds for spill-over cells
    FIRST_WEEK_MAX_DAY = 7
    LAST_WEEKS = (4, 5)
    LAST_WEEKS_MIN_DAY = 20

    # Rows always present before the optional sixth one
    BASE_ROWS = 5

    def __init__(
        self,
        config: Optional[CalendarConfig] = None,
        formatter: Optional[DateFormatter] = None,
        clock: Optional[Callable[[], datetime]] = None
    ):
        """
        Initialises the model at the current system date.

        Args:
            config: Year bounds and locale. Defaults to CalendarConfig().
            formatter: Weekday/month name formatter. Defaults to a
                LocaleDateFormatter in config.locale_name.
            clock: Callable returning the current datetime. Defaults to
                datetime.now.
        """
        self._config = config or CalendarConfig()
        self._formatter = formatter or LocaleDateFormatter(
            self._config.locale_name
        )
        self._clock = clock or datetime.now
        self._listeners: List[Listener] = []

        today = self._clock()
        self._current_month = today.month
        self._current_year = today.year
        self._selected_day = today.day
        self._selected_date = make_date(today.day, today.month, today.year)
        self._headers = self._build_headers(today)

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def config(self) -> CalendarConfig:
        return self._config

    @property
    def formatter(self) -> DateFormatter:
        return self._formatter

    @property
    def current_month(self) -> int:
        return self._current_month

    @property
    def current_year(self) -> int:
        return self._current_year

    @property
    def selected_day(self) -> int:
        return self._selected_day

    @property
    def selected_date(self) -> datetime:
        return self._selected_date

    def _state(self) -> Tuple[int, int, int, datetime]:
        return (
            self._current_month,
            self._current_year,
            self._selected_day,
            self._selected_date,
        )

    # ------------------------------------------------------------------
    # Change notification
    # ------------------------------------------------------------------

    def subscribe(self, callback: Listener) -> Callable[[], None]:
        """
        Registers a callback run after every state change.

        Args:
            callback: Called with this model once the change is applied.

        Returns:
            A function that removes the callback again.
        """
        self._listeners.append(callback)

        def unsubscribe() -> None:
            if callback in self._listeners:
                self._listeners.remove(callback)

        return unsubscribe

    def _commit(self, before: Tuple[int, int, int, datetime], action: str) -> None:
        """Logs and notifies listeners if the state differs from before."""
        if self._state() == before:
            return
        logger.debug(
            "{}: month={} year={} selected={}",
            action,
            self._current_month,
            self._current_year,
            self._selected_date.date(),
        )
        for callback in list(self._listeners):
            callback(self)

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    def back_month(self) -> None:
        """
        Moves to the previous month.

        January wraps to December of the previous year. The year bounds
        are not applied here, only by the year operations.
        """
        before = self._state()
        if self._current_month == 1:
            self._current_year -= 1
            self._current_month = 12
        else:
            self._current_month -= 1
        self._commit(before, "back_month")

    def next_month(self) -> None:
        """
        Moves to the next month.

        December wraps to January of the next year.
        """
        before = self._state()
        if self._current_month == 12:
            self._current_year += 1
            self._current_month = 1
        else:
            self._current_month += 1
        self._commit(before, "next_month")

    def back_year(self) -> None:
        """Moves one year back unless already at config.min_year."""
        if self._current_year > self._config.min_year:
            before = self._state()
            self._current_year -= 1
            self._commit(before, "back_year")
        else:
            logger.debug("back_year ignored at lower bound {}", self._current_year)

    def next_year(self) -> None:
        """Moves one year forward unless already at config.max_year."""
        if self._current_year < self._config.max_year:
            before = self._state()
            self._current_year += 1
            self._commit(before, "next_year")
        else:
            logger.debug("next_year ignored at upper bound {}", self._current_year)

    def jump_to_today(self) -> None:
        """Resets month, year and selection to the current system date."""
        before = self._state()
        today = self._clock()
        self._current_month = today.month
        self._current_year = today.year
        self._selected_day = today.day
        self._selected_date = make_date(today.day, today.month, today.year)
        self._commit(before, "jump_to_today")

    # ------------------------------------------------------------------
    # Selection
    # ------------------------------------------------------------------

    def month_for_grid_cell(self, day: int, week_index: int) -> int:
        """
        Resolves the month a grid cell belongs to from its position.

        A day above 7 in the first row is a tail of the previous month.
        A day below 20 in row 4 or 5 is a head of the next month.
        Anything else is the current month.

        Args:
            day: Day number shown in the cell.
            week_index: Row of the cell (0-5).

        Returns:
            current_month - 1, current_month or current_month + 1. The
            result is 0 or 13 when the cell crosses a year boundary.
        """
        if week_index == 0 and day > self.FIRST_WEEK_MAX_DAY:
            return self._current_month - 1
        if week_index in self.LAST_WEEKS and day < self.LAST_WEEKS_MIN_DAY:
            return self._current_month + 1
        return self._current_month

    def select_date(self, day: int, week_index: int) -> None:
        """
        Selects a grid cell, moving to its month when it is a spill-over.

        Args:
            day: Day number shown in the cell.
            week_index: Row of the cell (0-5).
        """
        before = self._state()
        month = self.month_for_grid_cell(day, week_index)
        year = self._current_year

        if month < 1:
            month = 12
            year -= 1
        elif month > 12:
            month = 1
            year += 1

        self._current_year = year
        self._current_month = month
        self._selected_day = day
        self._selected_date = make_date(day, month, year)
        self._commit(before, "select_date")

    def is_today(self, day: int, month: int) -> bool:
        """
        Checks whether day/month in current_year is the system date.

        Args:
            day: Day number.
            month: Month number as returned by month_for_grid_cell.

        Returns:
            True if the date matches today. Always False for a month
            outside 1-12.
        """
        if not 1 <= month <= 12:
            return False
        where = make_date(day, month, self._current_year)
        return at_midnight(self._clock()) == at_midnight(where)

    # ------------------------------------------------------------------
    # Derived views
    # ------------------------------------------------------------------

    @property
    def grid(self) -> CalendarGrid:
        """
        Week rows of the displayed month, five or six of them.

        Row 0 is the week of the 1st; each later row follows the one
        before it. A sixth row is added when the last day of the month
        is not in row 4.
        """
        month, year = self._current_month, self._current_year
        rows = [week_from(1, month, year)]
        while len(rows) < self.BASE_ROWS:
            rows.append(next_week(rows[-1], month, year))

        if days_in_month(year, month) not in rows[-1]:
            rows.append(next_week(rows[-1], month, year))
        return rows

    @property
    def headers(self) -> List[str]:
        """Weekday initials, Sunday first."""
        return list(self._headers)

    @property
    def month_label(self) -> str:
        """Full name of the displayed month, first letter upper-cased."""
        return self._formatter.format_month_name(
            make_date(1, self._current_month, self._current_year)
        )

    def _build_headers(self, today: datetime) -> List[str]:
        # Mid-month anchor keeps the whole week inside one month
        dates = week_dates(self._config.header_anchor_day, today.month, today.year)
        return [self._formatter.format_weekday_initial(d) for d in dates]

    def cells(self) -> Iterator[GridCell]:
        """
        Yields every grid cell in row order with its resolved month.

        Yields:
            GridCell per day number, as a renderer would iterate them.
        """
        for week_index, row in enumerate(self.grid):
            for day in row:
                month = self.month_for_grid_cell(day, week_index)
                yield GridCell(
                    week_index=week_index,
                    day=day,
                    month=month,
                    is_today=self.is_today(day, month),
                )

    def view(self) -> CalendarView:
        """Returns an immutable snapshot of the current state."""
        return CalendarView(
            grid=tuple(tuple(row) for row in self.grid),
            headers=tuple(self._headers),
            month_label=self.month_label,
            current_month=self._current_month,
            current_year=self._current_year,
            selected_day=self._selected_day,
            selected_date=self._selected_date,
        )
