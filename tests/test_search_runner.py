"""Tests for the per-row run orchestration."""

from dataclasses import replace
from datetime import date
from unittest.mock import MagicMock, patch

import pytest
from openpyxl import Workbook, load_workbook
from selenium.common.exceptions import TimeoutException

from automation.outcomes import PageWrite, PaginationReport
from models import SearchRequest
from reporting.run_set import RunSetError
from services.search_runner import run_all, run_request, run_search
from fakes import FakeDriver

MUMBAI = SearchRequest("Mumbai", date(2025, 6, 10), date(2025, 6, 12))


class DriverFactory:
    def __init__(self):
        self.drivers = []
        self.calls = []

    def __call__(self, browser, **kwargs):
        self.calls.append((browser, kwargs))
        driver = FakeDriver()
        self.drivers.append(driver)
        return driver


@pytest.fixture
def pages():
    """Patch both page objects with mocks that report one written page."""
    with patch("services.search_runner.HomePage") as home_cls, \
            patch("services.search_runner.ResultsPage") as results_cls:
        results = results_cls.return_value
        results.get_result_count.return_value = 5
        results.write_hotels_for_first_n_pages.return_value = PaginationReport(
            pages=[PageWrite(page=1, extracted=5, written=5)]
        )
        yield home_cls.return_value, results


def test_run_search_runs_steps_in_order(fast_settings, pages):
    home, results = pages
    steps = MagicMock()
    steps.attach_mock(home, "home")
    steps.attach_mock(results, "results")
    recorder = MagicMock()
    driver = FakeDriver()

    outcome = run_search(driver, MUMBAI, fast_settings, recorder)

    assert outcome.succeeded
    assert outcome.rows_written == 5
    assert driver.visited == [fast_settings.base_url]
    called = [name for name, _, _ in steps.mock_calls if not name.endswith("return_value")]
    assert called[:6] == [
        "home.enter_destination",
        "home.select_date_range",
        "home.adjust_guests",
        "results.open_sort_dropdown_only",
        "results.select_top_guest_ratings_only",
        "results.wait_until_results_present",
    ]
    home.select_date_range.assert_called_once_with(MUMBAI.check_in, MUMBAI.check_out)
    results.write_hotels_for_first_n_pages.assert_called_once_with(
        fast_settings.output_path, "Mumbai", fast_settings.pages
    )


def test_run_search_takes_step_screenshots(fast_settings, pages):
    recorder = MagicMock()

    run_search(FakeDriver(), MUMBAI, fast_settings, recorder)

    labels = [c.args[1] for c in recorder.capture.call_args_list]
    assert labels == [
        "01_open_Trivago",
        "02_city_Mumbai",
        "03_dates_In/Out for Mumbai",
        "04_guests_set_to_1 for Mumbai",
        "05_sort_open_dropdown for Mumbai",
        "06_sorted_Top_Guest_Ratings for Mumbai",
    ]
    assert all(c.kwargs["city"] == "Mumbai" for c in recorder.capture.call_args_list)


def test_run_search_prepares_city_sheet(fast_settings, pages):
    run_search(FakeDriver(), MUMBAI, fast_settings, MagicMock())

    sheet = load_workbook(fast_settings.output_path)["Mumbai"]
    assert sheet["A1"].value == "Hotel Name"
    assert (sheet["F1"].value, sheet["G1"].value) == ("Check-in", "2025-06-10")
    assert (sheet["F2"].value, sheet["G2"].value) == ("Check-out", "2025-06-12")


def test_run_search_sheet_failure_does_not_abort(fast_settings, pages):
    _, results = pages
    with patch("services.search_runner.prepare_city_sheet", side_effect=OSError("locked")):
        outcome = run_search(FakeDriver(), MUMBAI, fast_settings, MagicMock())

    assert outcome.succeeded
    results.write_hotels_for_first_n_pages.assert_called_once()


def test_run_request_closes_session_on_success(fast_settings, pages):
    factory = DriverFactory()

    outcome = run_request(MUMBAI, fast_settings, factory, MagicMock())

    assert outcome.succeeded
    assert factory.drivers[0].quit_called
    browser, kwargs = factory.calls[0]
    assert browser == "chrome"
    assert kwargs["page_load_timeout"] == fast_settings.page_load_timeout


def test_run_request_failure_is_reported_and_session_closed(fast_settings, pages):
    home, _ = pages
    home.enter_destination.side_effect = TimeoutException("no suggestions")
    factory = DriverFactory()
    recorder = MagicMock()

    outcome = run_request(MUMBAI, fast_settings, factory, recorder)

    assert not outcome.succeeded
    assert "TimeoutException" in outcome.error
    assert factory.drivers[0].quit_called
    recorder.capture.assert_called_with(factory.drivers[0], "99_failure for Mumbai", "Fail", city="Mumbai")


def test_run_request_no_results(fast_settings, pages):
    _, results = pages
    results.get_result_count.return_value = 0
    factory = DriverFactory()

    outcome = run_request(MUMBAI, fast_settings, factory, MagicMock())

    assert not outcome.succeeded
    assert "Expected > 0 results; actual: 0" in outcome.error
    results.write_hotels_for_first_n_pages.assert_not_called()
    assert factory.drivers[0].quit_called


def test_run_request_driver_start_failure(fast_settings):
    def broken_factory(browser, **kwargs):
        raise ValueError(f"Unsupported browser: {browser}")

    outcome = run_request(MUMBAI, replace(fast_settings, browser="opera"), broken_factory, MagicMock())

    assert not outcome.succeeded
    assert "opera" in outcome.error


def test_run_all_skips_invalid_rows_and_runs_sequentially(fast_settings, pages):
    workbook = Workbook()
    sheet = workbook.active
    sheet.title = fast_settings.input_sheet
    sheet.append(["City", "CheckIn", "CheckOut"])
    sheet.append(["Mumbai", "2025-06-10", "2025-06-12"])
    sheet.append(["Delhi", "2025-06-12", "2025-06-10"])
    sheet.append(["Pune", "2025-07-01", "2025-07-02"])
    workbook.save(fast_settings.input_path)
    factory = DriverFactory()

    outcomes = run_all(fast_settings, factory, MagicMock())

    assert [o.request.city for o in outcomes] == ["Mumbai", "Pune"]
    assert len(factory.drivers) == 2
    assert all(driver.quit_called for driver in factory.drivers)


def test_run_all_continues_after_failed_row(fast_settings, pages):
    home, _ = pages
    home.enter_destination.side_effect = [TimeoutException("slow"), None]
    workbook = Workbook()
    sheet = workbook.active
    sheet.title = fast_settings.input_sheet
    sheet.append(["City", "CheckIn", "CheckOut"])
    sheet.append(["Mumbai", "2025-06-10", "2025-06-12"])
    sheet.append(["Pune", "2025-07-01", "2025-07-02"])
    workbook.save(fast_settings.input_path)

    outcomes = run_all(fast_settings, DriverFactory(), MagicMock())

    assert [o.succeeded for o in outcomes] == [False, True]


def test_run_all_missing_input(fast_settings):
    with pytest.raises(RunSetError):
        run_all(fast_settings, DriverFactory(), MagicMock())
