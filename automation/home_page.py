"""
Home Page

Destination autocomplete, check-in/check-out calendar and guest selection.
The page object keeps only the driver and its timing settings; every call
queries the DOM afresh because the calendar re-renders on month changes.
"""

import time
import logging

from selenium.common.exceptions import StaleElementReferenceException
from selenium.webdriver.support import expected_conditions as EC
from selenium.webdriver.support.ui import WebDriverWait

from automation.errors import CalendarDateNotFoundError
from automation.interactions import click_if_present
from automation.outcomes import GuestAdjustment
from config import selectors
from models import validate_date_range
from utils.date_converter import convert_to_day_testid

logger = logging.getLogger(__name__)


class HomePage:
    def __init__(
        self,
        driver,
        timeout=30,
        optional_timeout=10,
        poll_frequency=0.5,
        settle_delay=0.15,
        max_calendar_months=24,
    ):
        self.driver = driver
        self.wait = WebDriverWait(driver, timeout, poll_frequency=poll_frequency)
        self.optional_timeout = optional_timeout
        self.poll_frequency = poll_frequency
        self.settle_delay = settle_delay
        self.max_calendar_months = max_calendar_months

    # --- Destination ---

    def enter_destination(self, city):
        """Type the city and pick the first autocomplete suggestion."""
        search_box = self.wait.until(EC.element_to_be_clickable(selectors.DESTINATION_INPUT))
        search_box.clear()
        search_box.send_keys(city)

        suggestion = self.wait.until(
            self._first_visible_suggestion,
            message=f"No destination suggestion appeared for '{city}'",
        )
        suggestion.click()
        logger.info(f"Destination selected: {city}")

    def _first_visible_suggestion(self, driver):
        try:
            suggestions = driver.find_elements(*selectors.DESTINATION_SUGGESTIONS)
            if suggestions and suggestions[0].is_displayed():
                return suggestions[0]
        except StaleElementReferenceException:
            pass
        return False

    # --- Calendar ---

    def select_date_range(self, check_in, check_out):
        """
        Pick check-in then check-out in the calendar.

        Raises:
            InvalidDateRangeError: check_out is not after check_in (nothing is clicked)
            CalendarDateNotFoundError: a date is not reachable within max_calendar_months
        """
        validate_date_range(check_in, check_out)
        self.open_calendar_if_closed()

        for day in (check_in, check_out):
            hops = self.navigate_until_day_visible(day)
            self.click_day(day)
            logger.info(f"Selected {day.isoformat()} after {hops} month change(s)")

    def is_calendar_open(self):
        try:
            return any(root.is_displayed() for root in self.driver.find_elements(*selectors.CALENDAR_ROOT))
        except StaleElementReferenceException:
            return False

    def open_calendar_if_closed(self):
        if self.is_calendar_open():
            return False
        self.wait.until(EC.element_to_be_clickable(selectors.CALENDAR_OPEN_BUTTON)).click()
        self.wait.until(EC.visibility_of_element_located(selectors.CALENDAR_ROOT))
        return True

    def is_day_visible(self, day):
        locator = selectors.calendar_day(convert_to_day_testid(day))
        try:
            return any(button.is_displayed() for button in self.driver.find_elements(*locator))
        except StaleElementReferenceException:
            return False

    def navigate_until_day_visible(self, day):
        """
        Press "next month" until the day's button is displayed.

        Returns:
            int: Number of month changes needed
        """
        hops = 0
        while not self.is_day_visible(day):
            if hops >= self.max_calendar_months:
                raise CalendarDateNotFoundError(day, self.max_calendar_months)
            self.wait.until(EC.element_to_be_clickable(selectors.CALENDAR_NEXT_MONTH)).click()
            hops += 1
            time.sleep(self.settle_delay)
        return hops

    def click_day(self, day):
        locator = selectors.calendar_day(convert_to_day_testid(day))
        try:
            self.wait.until(EC.element_to_be_clickable(locator)).click()
        except StaleElementReferenceException:
            logger.debug(f"Day {day.isoformat()} went stale, retrying once")
            time.sleep(self.settle_delay)
            self.wait.until(EC.element_to_be_clickable(locator)).click()

    # --- Guests ---

    def adjust_guests(self):
        """
        Remove one adult if possible, then confirm with Apply.

        The decrease button is optional (it is missing at the minimum guest count);
        the Apply button is required.
        """
        decreased = click_if_present(
            self.driver, selectors.ADULTS_DECREASE, self.optional_timeout, self.poll_frequency
        )
        self.wait.until(
            EC.element_to_be_clickable(selectors.GUESTS_APPLY),
            message="Guest Apply button not clickable",
        ).click()
        logger.info(f"Guests applied (adult removed: {decreased})")
        return GuestAdjustment(decreased=decreased)
