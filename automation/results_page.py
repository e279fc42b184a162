"""
Search Results Page

Sorting, result card extraction and pagination. Extracted rows go straight
to the city sheet, one save per row, so an interrupted run keeps every row
written so far.
"""

import logging

from selenium.common.exceptions import StaleElementReferenceException, TimeoutException
from selenium.webdriver.support import expected_conditions as EC
from selenium.webdriver.support.ui import WebDriverWait

from automation.extraction import DEFAULT_CURRENCY_MARKER, extract_row, is_pagination_enabled
from automation.interactions import click_if_present, click_with_script_fallback, scroll_into_view
from automation.outcomes import PageAdvance, PageWrite, PaginationReport, SortSelection
from config import selectors
from reporting import excel_writer

logger = logging.getLogger(__name__)


class ResultsPage:
    def __init__(
        self,
        driver,
        timeout=30,
        optional_timeout=10,
        poll_frequency=0.5,
        currency_marker=DEFAULT_CURRENCY_MARKER,
    ):
        self.driver = driver
        self.wait = WebDriverWait(driver, timeout, poll_frequency=poll_frequency)
        self.optional_wait = WebDriverWait(driver, optional_timeout, poll_frequency=poll_frequency)
        self.optional_timeout = optional_timeout
        self.poll_frequency = poll_frequency
        self.currency_marker = currency_marker

    # --- Sorting ---

    def open_sort_dropdown_only(self):
        self.wait.until(EC.element_to_be_clickable(selectors.SORT_DROPDOWN)).click()
        self.wait.until(EC.visibility_of_element_located(selectors.SORT_TOP_GUEST_RATINGS))

    def select_top_guest_ratings_only(self):
        """Pick "Top guest ratings", confirm if the site asks for it, and wait for results."""
        self.wait.until(EC.element_to_be_clickable(selectors.SORT_TOP_GUEST_RATINGS)).click()
        confirmed = click_if_present(
            self.driver, selectors.SORT_APPLY, self.optional_timeout, self.poll_frequency
        )
        self.wait_until_results_present()
        logger.info(f"Sorted by top guest ratings (apply clicked: {confirmed})")
        return SortSelection(confirmed=confirmed)

    # --- Results ---

    def wait_until_results_present(self):
        self.wait.until(
            lambda d: len(d.find_elements(*selectors.RESULT_CARD)) > 0,
            message="No result cards present",
        )

    def get_result_count(self):
        return len(self.driver.find_elements(*selectors.RESULT_CARD))

    def first_card_or_none(self):
        cards = self.driver.find_elements(*selectors.RESULT_CARD)
        return cards[0] if cards else None

    def write_current_page(self, excel_path, sheet_name, page=1):
        """
        Extract every card on the current page and append each one to the sheet.

        Stale cards are skipped; a shrinking card list ends the page early.
        Write failures are logged and do not stop the loop.

        Returns:
            PageWrite: Counts and rows for this page
        """
        self.wait_until_results_present()
        result = PageWrite(page=page)

        try:
            excel_writer.ensure_sheet_with_headers(excel_path, sheet_name)
        except Exception as e:
            logger.error(f"[Excel] ensure_sheet_with_headers failed: {e}", exc_info=True)

        total = self.get_result_count()
        for index in range(total):
            try:
                cards = self.driver.find_elements(*selectors.RESULT_CARD)
                if index >= len(cards):
                    logger.debug(f"Card list shrank to {len(cards)}, ending page {page}")
                    break
                row = extract_row(cards[index], self.currency_marker)
            except StaleElementReferenceException:
                result.skipped_stale += 1
                logger.warning(f"Card {index + 1} on page {page} went stale, skipping")
                continue

            result.extracted += 1
            result.rows.append(row)
            logger.debug(f"Hotel: {row.hotel_name} | Price: {row.price} | Rating: {row.rating}")

            try:
                excel_writer.append_hotel_row(excel_path, sheet_name, row)
                result.written += 1
            except Exception as e:
                result.failed_writes += 1
                logger.error(f"[Excel] append_hotel_row failed: {e}", exc_info=True)

        logger.info(f"[Pagination] Page {page}: {result.written}/{total} hotels written")
        return result

    # --- Pagination ---

    def click_next_if_enabled(self):
        """
        Advance to the next result page when the control allows it.

        Returns:
            PageAdvance: What happened; only ADVANCED* values mean a new page is loading
        """
        try:
            button = self.optional_wait.until(EC.presence_of_element_located(selectors.NEXT_RESULT_PAGE))
        except TimeoutException:
            return PageAdvance.NO_CONTROL

        if not is_pagination_enabled(button):
            return PageAdvance.DISABLED

        scroll_into_view(self.driver, button)
        strategy = click_with_script_fallback(self.driver, self.wait, button)
        if strategy == "regular":
            return PageAdvance.ADVANCED
        if strategy == "script":
            return PageAdvance.ADVANCED_BY_SCRIPT
        return PageAdvance.CLICK_FAILED

    def write_hotels_for_first_n_pages(self, excel_path, sheet_name, pages):
        """
        Write hotels for the first `pages` result pages (page 1 is the one already loaded).

        Running out of pages is a normal stop, recorded in the report's stop_reason.
        """
        pages = max(pages, 1)
        report = PaginationReport()

        for page in range(1, pages + 1):
            if page > 1:
                logger.info(f"[Pagination] Navigating to page {page}")
                previous_first = self.first_card_or_none()

                advance = self.click_next_if_enabled()
                if not advance.advanced:
                    logger.warning(
                        f"[Pagination] Next button not available ({advance.value}). Stopping at page {page - 1}"
                    )
                    report.stop_reason = advance
                    break

                if previous_first is not None:
                    try:
                        self.wait.until(EC.staleness_of(previous_first))
                    except TimeoutException:
                        # Some result lists swap content without replacing the node
                        logger.debug("Previous first card never went stale, continuing")
                self.wait_until_results_present()

            logger.info(f"[Pagination] Writing page {page}")
            report.pages.append(self.write_current_page(excel_path, sheet_name, page))

        return report
