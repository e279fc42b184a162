"""Tests for destination entry, calendar navigation and guest selection."""

from datetime import date

import pytest
from selenium.common.exceptions import StaleElementReferenceException, TimeoutException

from automation.errors import CalendarDateNotFoundError, InvalidDateRangeError
from automation.home_page import HomePage
from config import selectors
from utils.date_converter import convert_to_day_testid
from fakes import FakeDriver, FakeElement

CHECK_IN = date(2025, 6, 10)
CHECK_OUT = date(2025, 6, 12)


def make_page(driver, max_calendar_months=24):
    return HomePage(
        driver,
        timeout=0.2,
        optional_timeout=0.05,
        poll_frequency=0.01,
        settle_delay=0,
        max_calendar_months=max_calendar_months,
    )


class FakeCalendar:
    """A calendar that shows each day only after enough "next month" clicks."""

    def __init__(self, driver, months_until_visible, is_open=False):
        self.driver = driver
        self.hops = 0
        self.is_open = is_open
        self.days = {}
        self.clicked = []
        self.months_until_visible = months_until_visible

        self.root = FakeElement()
        self.open_button = FakeElement(on_click=self.open)
        self.next_button = FakeElement(on_click=self.advance)

        driver.locators[selectors.CALENDAR_ROOT] = lambda: [self.root] if self.is_open else []
        driver.locators[selectors.CALENDAR_OPEN_BUTTON] = [self.open_button]
        driver.locators[selectors.CALENDAR_NEXT_MONTH] = [self.next_button]
        for day, needed in months_until_visible.items():
            self.days[day] = FakeElement(on_click=lambda d=day: self.clicked.append(d))
            driver.locators[selectors.calendar_day(convert_to_day_testid(day))] = (
                lambda d=day, n=needed: [self.days[d]] if self.hops >= n else []
            )

    def open(self):
        self.is_open = True

    def advance(self):
        self.hops += 1


def test_enter_destination_picks_first_suggestion():
    search_box = FakeElement()
    first, second = FakeElement(text="Mumbai, India"), FakeElement(text="Mumbai Suburban")
    driver = FakeDriver({
        selectors.DESTINATION_INPUT: [search_box],
        selectors.DESTINATION_SUGGESTIONS: [first, second],
    })

    make_page(driver).enter_destination("Mumbai")

    assert search_box.cleared
    assert search_box.typed == ["Mumbai"]
    assert first.clicks == 1
    assert second.clicks == 0


def test_enter_destination_times_out_without_suggestions():
    driver = FakeDriver({selectors.DESTINATION_INPUT: [FakeElement()]})

    with pytest.raises(TimeoutException, match="No destination suggestion"):
        make_page(driver).enter_destination("Atlantis")


def test_enter_destination_waits_for_hidden_suggestion():
    suggestion = FakeElement(displayed=False)
    driver = FakeDriver({
        selectors.DESTINATION_INPUT: [FakeElement()],
        selectors.DESTINATION_SUGGESTIONS: [suggestion],
    })

    with pytest.raises(TimeoutException):
        make_page(driver).enter_destination("Mumbai")
    assert suggestion.clicks == 0


def test_select_date_range_navigates_forward():
    driver = FakeDriver()
    calendar = FakeCalendar(driver, {CHECK_IN: 2, CHECK_OUT: 3})

    make_page(driver).select_date_range(CHECK_IN, CHECK_OUT)

    assert calendar.open_button.clicks == 1
    assert calendar.next_button.clicks == 3
    assert calendar.clicked == [CHECK_IN, CHECK_OUT]


def test_select_date_range_does_not_reopen_open_calendar():
    driver = FakeDriver()
    calendar = FakeCalendar(driver, {CHECK_IN: 0, CHECK_OUT: 0}, is_open=True)

    make_page(driver).select_date_range(CHECK_IN, CHECK_OUT)

    assert calendar.open_button.clicks == 0
    assert calendar.next_button.clicks == 0
    assert calendar.clicked == [CHECK_IN, CHECK_OUT]


@pytest.mark.parametrize("check_out", [CHECK_IN, date(2025, 6, 9)])
def test_select_date_range_rejects_bad_range_before_clicking(check_out):
    driver = FakeDriver()
    calendar = FakeCalendar(driver, {CHECK_IN: 0})

    with pytest.raises(InvalidDateRangeError):
        make_page(driver).select_date_range(CHECK_IN, check_out)
    assert calendar.open_button.clicks == 0
    assert not calendar.is_open


def test_navigation_is_bounded():
    driver = FakeDriver()
    calendar = FakeCalendar(driver, {CHECK_IN: 100, CHECK_OUT: 100}, is_open=True)

    with pytest.raises(CalendarDateNotFoundError) as excinfo:
        make_page(driver, max_calendar_months=24).select_date_range(CHECK_IN, CHECK_OUT)

    assert calendar.next_button.clicks == 24
    assert excinfo.value.day == CHECK_IN
    assert isinstance(excinfo.value, TimeoutException)


def test_navigation_reaches_date_at_the_limit():
    driver = FakeDriver()
    calendar = FakeCalendar(driver, {CHECK_IN: 24, CHECK_OUT: 24}, is_open=True)

    make_page(driver, max_calendar_months=24).select_date_range(CHECK_IN, CHECK_OUT)

    assert calendar.clicked == [CHECK_IN, CHECK_OUT]


def test_click_day_retries_once_after_stale():
    driver = FakeDriver()
    calendar = FakeCalendar(driver, {CHECK_IN: 0, CHECK_OUT: 0}, is_open=True)
    calendar.days[CHECK_IN].click_errors = [StaleElementReferenceException("re-rendered")]

    make_page(driver).select_date_range(CHECK_IN, CHECK_OUT)

    assert calendar.clicked == [CHECK_IN, CHECK_OUT]


def test_click_day_gives_up_after_second_stale():
    driver = FakeDriver()
    calendar = FakeCalendar(driver, {CHECK_IN: 0, CHECK_OUT: 0}, is_open=True)
    calendar.days[CHECK_IN].click_errors = [
        StaleElementReferenceException("re-rendered"),
        StaleElementReferenceException("re-rendered again"),
    ]

    with pytest.raises(StaleElementReferenceException):
        make_page(driver).select_date_range(CHECK_IN, CHECK_OUT)


def test_adjust_guests_decreases_and_applies():
    minus, apply = FakeElement(), FakeElement()
    driver = FakeDriver({selectors.ADULTS_DECREASE: [minus], selectors.GUESTS_APPLY: [apply]})

    outcome = make_page(driver).adjust_guests()

    assert outcome.decreased
    assert (minus.clicks, apply.clicks) == (1, 1)


def test_adjust_guests_tolerates_missing_decrease():
    apply = FakeElement()
    driver = FakeDriver({selectors.GUESTS_APPLY: [apply]})

    outcome = make_page(driver).adjust_guests()

    assert not outcome.decreased
    assert apply.clicks == 1


def test_adjust_guests_tolerates_disabled_decrease():
    apply = FakeElement()
    driver = FakeDriver({
        selectors.ADULTS_DECREASE: [FakeElement(enabled=False)],
        selectors.GUESTS_APPLY: [apply],
    })

    assert not make_page(driver).adjust_guests().decreased
    assert apply.clicks == 1


def test_adjust_guests_requires_apply():
    driver = FakeDriver({selectors.ADULTS_DECREASE: [FakeElement()]})

    with pytest.raises(TimeoutException, match="Apply"):
        make_page(driver).adjust_guests()
