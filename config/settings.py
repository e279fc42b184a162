"""
Runtime Settings

Loads hotel search configuration from the environment (and a local .env file).
Every key is prefixed with HOTEL_SEARCH_, e.g. HOTEL_SEARCH_BROWSER=firefox.
"""

import os
import logging
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

logger = logging.getLogger(__name__)

ENV_PREFIX = "HOTEL_SEARCH_"
PROJECT_ROOT = Path(__file__).parent.parent


def _env(name, default=None):
    return os.getenv(ENV_PREFIX + name, default)


def _env_flag(name, default):
    value = _env(name)
    if value is None:
        return default
    return value.strip().lower() not in {"0", "false", "no", "off"}


def _env_int(name, default):
    value = _env(name)
    if value is None:
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        logger.warning(f"Ignoring malformed {ENV_PREFIX}{name}={value!r}, using {default}")
        return default


def _env_float(name, default):
    value = _env(name)
    if value is None:
        return default
    try:
        return float(value)
    except (TypeError, ValueError):
        logger.warning(f"Ignoring malformed {ENV_PREFIX}{name}={value!r}, using {default}")
        return default


def _env_path(name, default):
    value = _env(name)
    path = Path(value).expanduser() if value else default
    return path if path.is_absolute() else PROJECT_ROOT / path


@dataclass(frozen=True)
class Settings:
    base_url: str = "https://trivago.in/"
    browser: str = "chrome"
    headless: bool = False

    # Seconds
    wait_timeout: float = 30
    optional_timeout: float = 10
    poll_frequency: float = 0.5
    page_load_timeout: float = 60
    script_timeout: float = 30
    settle_delay: float = 0.15

    max_calendar_months: int = 24
    pages: int = 2

    input_path: Path = PROJECT_ROOT / "test-data" / "RunSet.xlsx"
    input_sheet: str = "SearchRuns"
    output_path: Path = PROJECT_ROOT / "test-data" / "CityResults.xlsx"
    screenshot_dir: Path = PROJECT_ROOT / "target" / "screenshots"

    currency_marker: str = "₹"
    log_file: Path = None


def load_settings():
    """
    Build Settings from HOTEL_SEARCH_* environment variables.

    Returns:
        Settings: Immutable settings; unset or malformed values keep their defaults.
    """
    defaults = Settings()
    log_file = _env("LOG_FILE")

    return Settings(
        base_url=_env("BASE_URL", defaults.base_url),
        browser=_env("BROWSER", defaults.browser).strip().lower(),
        headless=_env_flag("HEADLESS", defaults.headless),
        wait_timeout=_env_float("WAIT_TIMEOUT", defaults.wait_timeout),
        optional_timeout=_env_float("OPTIONAL_TIMEOUT", defaults.optional_timeout),
        poll_frequency=_env_float("POLL_FREQUENCY", defaults.poll_frequency),
        page_load_timeout=_env_float("PAGE_LOAD_TIMEOUT", defaults.page_load_timeout),
        script_timeout=_env_float("SCRIPT_TIMEOUT", defaults.script_timeout),
        settle_delay=_env_float("SETTLE_DELAY", defaults.settle_delay),
        max_calendar_months=_env_int("MAX_CALENDAR_MONTHS", defaults.max_calendar_months),
        pages=max(1, _env_int("PAGES", defaults.pages)),
        input_path=_env_path("INPUT_PATH", defaults.input_path),
        input_sheet=_env("INPUT_SHEET", defaults.input_sheet),
        output_path=_env_path("OUTPUT_PATH", defaults.output_path),
        screenshot_dir=_env_path("SCREENSHOT_DIR", defaults.screenshot_dir),
        currency_marker=_env("CURRENCY_MARKER", defaults.currency_marker),
        log_file=Path(log_file).expanduser() if log_file else None,
    )
