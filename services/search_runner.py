"""
Search Runner

Drives one full hotel search per run set row, each in its own browser session:
open site -> destination -> dates -> guests -> sort -> results -> Excel.
A failed row is logged and reported, never retried; its session is always closed.
"""

import logging
from dataclasses import dataclass

from automation.driver import get_driver, quit_driver
from automation.errors import NoResultsError
from automation.home_page import HomePage
from automation.results_page import ResultsPage
from reporting.excel_writer import prepare_city_sheet
from reporting.run_set import read_search_runs
from utils.screenshots import ScreenshotRecorder

logger = logging.getLogger(__name__)


@dataclass
class RunResult:
    request: object
    succeeded: bool
    result_count: int = 0
    report: object = None
    error: str = None

    @property
    def rows_written(self):
        return self.report.rows_written if self.report else 0


def run_search(driver, request, settings, recorder):
    """
    Run the whole search flow for one request in an existing session.

    Returns:
        RunResult: Successful result with the pagination report

    Raises:
        NoResultsError: The sorted search shows no result cards
        TimeoutException: A required control never became usable
    """
    city = request.city

    def shot(label, status="Info"):
        recorder.capture(driver, label, status, city=city)

    logger.info(f"Opening {settings.base_url} for {request}")
    driver.get(settings.base_url)
    shot("01_open_Trivago")

    home = HomePage(
        driver,
        timeout=settings.wait_timeout,
        optional_timeout=settings.optional_timeout,
        poll_frequency=settings.poll_frequency,
        settle_delay=settings.settle_delay,
        max_calendar_months=settings.max_calendar_months,
    )
    results = ResultsPage(
        driver,
        timeout=settings.wait_timeout,
        optional_timeout=settings.optional_timeout,
        poll_frequency=settings.poll_frequency,
        currency_marker=settings.currency_marker,
    )

    home.enter_destination(city)
    shot(f"02_city_{city}")

    home.select_date_range(request.check_in, request.check_out)
    shot(f"03_dates_In/Out for {city}")

    home.adjust_guests()
    shot(f"04_guests_set_to_1 for {city}")

    results.open_sort_dropdown_only()
    shot(f"05_sort_open_dropdown for {city}")

    results.select_top_guest_ratings_only()
    shot(f"06_sorted_Top_Guest_Ratings for {city}")

    results.wait_until_results_present()
    count = results.get_result_count()
    if count <= 0:
        raise NoResultsError(count)
    logger.info(f"{count} results on the first page for {city}")

    try:
        prepare_city_sheet(settings.output_path, city, request.check_in, request.check_out)
    except Exception as e:
        logger.error(f"[Excel] Failed writing header/check-in block: {e}", exc_info=True)

    report = results.write_hotels_for_first_n_pages(settings.output_path, city, settings.pages)
    logger.info(
        f"{city}: {report.rows_written} hotels written from {report.pages_written} page(s)"
    )
    return RunResult(request=request, succeeded=True, result_count=count, report=report)


def run_request(request, settings, driver_factory=get_driver, recorder=None):
    """
    Run one request in a fresh browser session that is closed whatever happens.

    Returns:
        RunResult: succeeded=False with the error text when the flow failed
    """
    recorder = recorder or ScreenshotRecorder(settings.screenshot_dir)
    driver = None

    try:
        driver = driver_factory(
            settings.browser,
            headless=settings.headless,
            page_load_timeout=settings.page_load_timeout,
            script_timeout=settings.script_timeout,
        )
        return run_search(driver, request, settings, recorder)
    except Exception as e:
        logger.error(f"Run failed for {request}: {e}", exc_info=True)
        recorder.capture(driver, f"99_failure for {request.city}", "Fail", city=request.city)
        return RunResult(request=request, succeeded=False, error=f"{type(e).__name__}: {e}")
    finally:
        quit_driver(driver)


def run_all(settings, driver_factory=get_driver, recorder=None):
    """
    Run every valid row of the input workbook, one after another.

    Raises:
        RunSetError: The input workbook or sheet is missing
    """
    requests = read_search_runs(settings.input_path, settings.input_sheet)
    recorder = recorder or ScreenshotRecorder(settings.screenshot_dir)

    results = []
    for number, request in enumerate(requests, 1):
        logger.info(f"===== Run {number}/{len(requests)}: {request} =====")
        results.append(run_request(request, settings, driver_factory, recorder))

    succeeded = sum(1 for r in results if r.succeeded)
    logger.info(f"Finished {len(results)} run(s): {succeeded} succeeded, {len(results) - succeeded} failed")
    return results
