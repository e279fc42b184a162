"""
Automation Errors

InvalidDateRangeError: precondition, raised before touching the page.
CalendarDateNotFoundError: the calendar never rendered the wanted day.
NoResultsError: the search finished without a single result card.
"""

from selenium.common.exceptions import TimeoutException

from models import InvalidDateRangeError


class CalendarDateNotFoundError(TimeoutException):
    def __init__(self, day, max_months):
        self.day = day
        self.max_months = max_months
        super().__init__(f"Target date not found within {max_months} months: {day}")


class NoResultsError(AssertionError):
    def __init__(self, count):
        self.count = count
        super().__init__(f"Expected > 0 results; actual: {count}")


__all__ = ['CalendarDateNotFoundError', 'InvalidDateRangeError', 'NoResultsError']
