"""
Target Site Locators

Every locator the automation relies on, as (By, value) tuples.
The hotel search site owns this markup; when it changes, only this file should need edits.
"""

from selenium.webdriver.common.by import By

# Search form
DESTINATION_INPUT = (By.ID, "input-auto-complete")
DESTINATION_SUGGESTIONS = (By.CLASS_NAME, "Qrvi3L")

# Calendar
CALENDAR_OPEN_BUTTON = (
    By.XPATH,
    "//button[@data-testid='search-form-calendar' or contains(@aria-label,'calendar')]",
)
CALENDAR_ROOT = (
    By.XPATH,
    "//*[contains(@data-testid,'calendar-popover') or contains(@class,'calendar')]",
)
CALENDAR_NEXT_MONTH = (
    By.XPATH,
    "//button[contains(@aria-label,'Next') or @data-testid='calendar-button-next' "
    "or contains(@data-testid,'next')]",
)
CALENDAR_DAY_TEMPLATE = "button[data-testid='{testid}']"

# Guests
ADULTS_DECREASE = (By.XPATH, "//button[@data-testid='adults-amount-minus-button']")
GUESTS_APPLY = (By.XPATH, "//button[text()='Apply']")

# Sorting
SORT_DROPDOWN = (By.CSS_SELECTOR, "button[name='sorting_selector']")
SORT_TOP_GUEST_RATINGS = (By.XPATH, "//label[.//text()='Top guest ratings']")
SORT_APPLY = (
    By.XPATH,
    "//button[normalize-space()='Apply' or contains(@data-testid,'apply')]",
)

# Result cards (card-relative locators below the first entry)
RESULT_CARD = (By.CSS_SELECTOR, "li[data-testid='accommodation-list-element']")
CARD_HOTEL_NAME = (By.CSS_SELECTOR, "span[itemprop='name']")
CARD_PRICE = (By.CSS_SELECTOR, "div[itemprop='price']")
CARD_PRICE_ALT = (By.CSS_SELECTOR, "span[data-testid='recommended-price']")
CARD_RATING = (By.CSS_SELECTOR, "span[itemprop='ratingValue']")

# Pagination
NEXT_RESULT_PAGE = (By.CSS_SELECTOR, "button[data-testid='next-result-page']")


def calendar_day(testid):
    """Locator for a calendar day button given its data-testid."""
    return (By.CSS_SELECTOR, CALENDAR_DAY_TEMPLATE.format(testid=testid))
