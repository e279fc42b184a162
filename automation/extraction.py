"""
Result Card Extraction

Pure helpers that turn result card elements into ResultRow values and
decide whether the pagination control can be used. They only rely on the
element methods find_element, text, is_displayed, is_enabled and
get_attribute, so any object offering those works.
"""

import logging

from selenium.common.exceptions import NoSuchElementException, StaleElementReferenceException, WebDriverException

from config import selectors
from models import NAME_NOT_FOUND, PRICE_NOT_FOUND, RATING_NOT_FOUND, ResultRow

logger = logging.getLogger(__name__)

DEFAULT_CURRENCY_MARKER = "₹"


def normalize_price(raw_text, marker=DEFAULT_CURRENCY_MARKER):
    """
    Clean up price text.

    "Deal ₹4,250 per night" -> "₹4,250 per night"; "4,250" -> "4,250"; "" -> "Price not found"
    """
    if raw_text is None:
        return PRICE_NOT_FOUND
    index = raw_text.find(marker) if marker else -1
    if index != -1:
        return raw_text[index:].strip()
    return raw_text.strip() or PRICE_NOT_FOUND


def read_text(scope, locator, fallback):
    """
    Text of the first element matching locator inside scope, or fallback when missing or blank.

    StaleElementReferenceException is not caught: a stale card is skipped by the caller.
    """
    try:
        text = scope.find_element(*locator).text
    except NoSuchElementException:
        return fallback
    text = (text or "").strip()
    return text or fallback


def read_price(card, marker=DEFAULT_CURRENCY_MARKER):
    for locator in (selectors.CARD_PRICE, selectors.CARD_PRICE_ALT):
        try:
            raw = card.find_element(*locator).text
        except NoSuchElementException:
            continue
        price = normalize_price(raw, marker)
        if price != PRICE_NOT_FOUND:
            return price
    return PRICE_NOT_FOUND


def extract_row(card, marker=DEFAULT_CURRENCY_MARKER):
    """Build a ResultRow from one result card element."""
    return ResultRow(
        hotel_name=read_text(card, selectors.CARD_HOTEL_NAME, NAME_NOT_FOUND),
        price=read_price(card, marker),
        rating=read_text(card, selectors.CARD_RATING, RATING_NOT_FOUND),
    )


def _attribute(control, name):
    try:
        return control.get_attribute(name)
    except WebDriverException:
        return None


def is_pagination_enabled(control):
    """
    Heuristic "enabled" check for the next-page control.

    Enabled means present, displayed, enabled, no disabled attribute and aria-disabled not "true".
    """
    if control is None:
        return False
    try:
        usable = control.is_displayed() and control.is_enabled()
    except StaleElementReferenceException:
        return False
    if not usable:
        return False
    if _attribute(control, "disabled") is not None:
        return False
    return str(_attribute(control, "aria-disabled") or "").strip().lower() != "true"
