"""
Browser Session Factory

Creates one configured WebDriver per search run and tears it down afterwards.
Driver binaries are resolved by webdriver-manager.
"""

import logging

from selenium import webdriver
from selenium.common.exceptions import WebDriverException
from selenium.webdriver.chrome.options import Options as ChromeOptions
from selenium.webdriver.chrome.service import Service as ChromeService
from selenium.webdriver.edge.options import Options as EdgeOptions
from selenium.webdriver.edge.service import Service as EdgeService
from selenium.webdriver.firefox.options import Options as FirefoxOptions
from selenium.webdriver.firefox.service import Service as FirefoxService
from webdriver_manager.chrome import ChromeDriverManager
from webdriver_manager.firefox import GeckoDriverManager
from webdriver_manager.microsoft import EdgeChromiumDriverManager

logger = logging.getLogger(__name__)

SUPPORTED_BROWSERS = ("chrome", "edge", "firefox")


def _chromium_arguments(options, headless):
    if headless:
        options.add_argument("--headless=new")
    options.add_argument("--no-sandbox")
    options.add_argument("--disable-dev-shm-usage")
    options.add_argument("--window-size=1920,1080")
    options.add_argument("--disable-blink-features=AutomationControlled")
    options.add_experimental_option("excludeSwitches", ["enable-automation"])
    return options


def _build_driver(browser, headless):
    if browser == "chrome":
        options = _chromium_arguments(ChromeOptions(), headless)
        return webdriver.Chrome(service=ChromeService(ChromeDriverManager().install()), options=options)

    if browser == "edge":
        options = _chromium_arguments(EdgeOptions(), headless)
        return webdriver.Edge(service=EdgeService(EdgeChromiumDriverManager().install()), options=options)

    if browser == "firefox":
        options = FirefoxOptions()
        if headless:
            options.add_argument("-headless")
        return webdriver.Firefox(service=FirefoxService(GeckoDriverManager().install()), options=options)

    raise ValueError(f"Unsupported browser: {browser}")


def get_driver(browser="chrome", headless=False, page_load_timeout=60, script_timeout=30):
    """
    Get a configured browser session.

    Args:
        browser (str): "chrome", "edge" or "firefox"
        headless (bool): Run without a visible window
        page_load_timeout (float): Seconds allowed for driver.get()
        script_timeout (float): Seconds allowed for async scripts

    Returns:
        WebDriver: Session with implicit waits disabled (all waits are explicit)
    """
    browser = (browser or "").strip().lower()
    if browser not in SUPPORTED_BROWSERS:
        raise ValueError(f"Unsupported browser: {browser}")

    logger.info(f"Starting {browser} session (headless={headless})")
    driver = _build_driver(browser, headless)

    try:
        driver.maximize_window()
    except WebDriverException as e:
        # Headless sessions may refuse; the window size argument covers it
        logger.debug(f"Could not maximize window: {e}")

    driver.implicitly_wait(0)
    driver.set_page_load_timeout(page_load_timeout)
    driver.set_script_timeout(script_timeout)
    return driver


def quit_driver(driver):
    """Close the session, logging instead of raising on teardown errors."""
    if driver is None:
        return
    try:
        driver.quit()
        logger.info("Browser session closed")
    except WebDriverException as e:
        logger.warning(f"Error while closing browser session: {e}")
