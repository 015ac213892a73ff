"""
MonthGrid - Data Schema Module.

This module defines the data types shared by the date helpers and the
calendar model.

Types:
    WeekRow: Seven day-of-month numbers, Sunday first.
    CalendarGrid: Five or six week rows covering a month view.
    CalendarConfig: Year bounds, locale and header anchor settings.
    GridCell: One resolved cell of the grid.
    CalendarView: Immutable snapshot of everything a view renders.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional, Tuple


WeekRow = List[int]
CalendarGrid = List[WeekRow]

# Year navigation bounds (inclusive)
MIN_YEAR = 1900
MAX_YEAR = 3000

# Mid-month day used to derive the weekday headers
HEADER_ANCHOR_DAY = 15


@dataclass
class CalendarConfig:
    """
    Settings for a CalendarModel.

    Attributes:
        min_year: Lowest year reachable through back_year().
        max_year: Highest year reachable through next_year().
        locale_name: Locale used for weekday and month names, e.g.
            "pt_BR.UTF-8". None uses the process locale.
        header_anchor_day: Day of the current month whose week supplies
            the weekday headers. Must be 1-28 so it exists in every month.
    """

    min_year: int = MIN_YEAR
    max_year: int = MAX_YEAR
    locale_name: Optional[str] = None
    header_anchor_day: int = HEADER_ANCHOR_DAY

    def __post_init__(self) -> None:
        """Validates year bounds and anchor day."""
        if self.min_year > self.max_year:
            raise ValueError(
                f"min_year ({self.min_year}) must not exceed "
                f"max_year ({self.max_year})"
            )
        if not 1 <= self.header_anchor_day <= 28:
            raise ValueError(
                f"header_anchor_day must be between 1 and 28, "
                f"got {self.header_anchor_day}"
            )


@dataclass(frozen=True)
class GridCell:
    """
    One cell of the month grid as seen by a renderer.

    Attributes:
        week_index: Row of the cell (0-5).
        day: Day-of-month number shown in the cell.
        month: Owning month as resolved by the position heuristic. May be
            0 or 13 for spill-over cells across a year boundary.
        is_today: True if the cell is the current system date.
    """

    week_index: int
    day: int
    month: int
    is_today: bool


@dataclass(frozen=True)
class CalendarView:
    """
    Snapshot of the calendar state handed to the UI layer.

    Rows and headers are stored as tuples so a snapshot cannot be
    changed after it is taken.
    """

    grid: Tuple[Tuple[int, ...], ...]
    headers: Tuple[str, ...]
    month_label: str
    current_month: int
    current_year: int
    selected_day: int
    selected_date: datetime
