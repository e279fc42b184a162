"""
Automation Module

Browser automation for the hotel search site:
- Browser session setup and teardown
- Destination, calendar and guest selection
- Sorting, result extraction and pagination
"""

from .driver import get_driver, quit_driver
from .errors import CalendarDateNotFoundError, InvalidDateRangeError, NoResultsError
from .home_page import HomePage
from .outcomes import GuestAdjustment, PageAdvance, PageWrite, PaginationReport, SortSelection
from .results_page import ResultsPage

__all__ = [
    'get_driver',
    'quit_driver',
    'CalendarDateNotFoundError',
    'InvalidDateRangeError',
    'NoResultsError',
    'HomePage',
    'GuestAdjustment',
    'PageAdvance',
    'PageWrite',
    'PaginationReport',
    'SortSelection',
    'ResultsPage',
]
