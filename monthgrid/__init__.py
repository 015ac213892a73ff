"""
MonthGrid - Month-Grid Calendar Model.

Derives the week rows, weekday headers and month label of a month-view
calendar, and keeps its navigation and selection state.

Version: 0.1.0
"""

from loguru import logger

from monthgrid.model import CalendarModel
from monthgrid.schema import CalendarConfig, CalendarView, GridCell

__version__ = "0.1.0"
__author__ = "MonthGrid Team"

__all__ = ["CalendarModel", "CalendarConfig", "CalendarView", "GridCell"]

# Library logging stays silent until an application opts in with
# logger.enable("monthgrid")
logger.disable("monthgrid")
