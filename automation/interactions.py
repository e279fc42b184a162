"""
Shared click helpers for page objects.
"""

import logging

from selenium.common.exceptions import (
    ElementClickInterceptedException,
    ElementNotInteractableException,
    NoSuchElementException,
    StaleElementReferenceException,
    TimeoutException,
    WebDriverException,
)
from selenium.webdriver.support import expected_conditions as EC
from selenium.webdriver.support.ui import WebDriverWait

logger = logging.getLogger(__name__)

# Failures that mean "the optional control is not there (or not usable) right now"
OPTIONAL_CLICK_ERRORS = (
    TimeoutException,
    NoSuchElementException,
    StaleElementReferenceException,
    ElementClickInterceptedException,
    ElementNotInteractableException,
)


def clickable_element(element):
    """Wait condition for an element reference: the element once displayed and enabled."""

    def _predicate(driver):
        return element if element.is_displayed() and element.is_enabled() else False

    return _predicate


def click_if_present(driver, locator, timeout, poll_frequency=0.5):
    """
    Click an optional control if it becomes clickable within timeout.

    Returns:
        bool: True if the click happened, False if the control was absent or unusable
    """
    try:
        WebDriverWait(driver, timeout, poll_frequency=poll_frequency).until(
            EC.element_to_be_clickable(locator)
        ).click()
        return True
    except OPTIONAL_CLICK_ERRORS as e:
        logger.info(f"Optional control {locator[1]!r} not clicked: {type(e).__name__}")
        return False


def scroll_into_view(driver, element):
    try:
        driver.execute_script("arguments[0].scrollIntoView({block:'center'});", element)
        return True
    except WebDriverException as e:
        logger.debug(f"scrollIntoView failed: {e}")
        return False


def click_with_script_fallback(driver, wait, element):
    """
    Click an element, falling back to a JavaScript click when the regular click fails.

    Returns:
        str | None: "regular" or "script" for the strategy that worked, None if both failed
    """
    try:
        wait.until(clickable_element(element)).click()
        return "regular"
    except WebDriverException as e:
        logger.warning(f"Regular click failed ({type(e).__name__}), trying JavaScript click")

    try:
        driver.execute_script("arguments[0].click();", element)
        return "script"
    except WebDriverException as e:
        logger.warning(f"JavaScript click failed: {e}")
        return None
