"""
Screenshot Recorder

Saves one PNG per workflow step under <root>/<city>/<label>_<status>.png.
"""

import re
import logging
from pathlib import Path

from selenium.common.exceptions import WebDriverException

logger = logging.getLogger(__name__)

UNKNOWN_CITY = "UnknownCity"
_UNSAFE_CHARS = re.compile(r"[^a-zA-Z0-9_.-]")


def sanitize(name):
    """Replace every character outside [a-zA-Z0-9_.-] with an underscore."""
    if name is None:
        return "shot"
    return _UNSAFE_CHARS.sub("_", name)


def city_from_label(label):
    """
    Guess the city folder from a step label by taking its last underscore token.

    "02_city_Mumbai" -> "Mumbai", "05_sort_open_dropdown for Pune" -> "Pune".
    Labels with fewer than three tokens go to UnknownCity. Labels that do not
    end with the city (e.g. "01_open_Trivago") are misfiled, so callers that
    know the city should pass it explicitly.
    """
    parts = sanitize(label).split("_")
    if len(parts) >= 3 and parts[-1]:
        return parts[-1]
    return UNKNOWN_CITY


class ScreenshotRecorder:
    def __init__(self, root_dir):
        self.root_dir = Path(root_dir)

    def path_for(self, label, status="Info", city=None):
        folder = sanitize(city) if city else city_from_label(label)
        return self.root_dir / folder / f"{sanitize(label)}_{sanitize(status)}.png"

    def capture(self, driver, label, status="Info", city=None):
        """
        Save a screenshot of the current page.

        Args:
            driver: Active WebDriver session
            label (str): Step label, e.g. "02_city_Mumbai"
            status (str): Step status suffix, e.g. "Info" or "Fail"
            city (str): Folder override; derived from the label when omitted

        Returns:
            Path | None: Absolute path of the image, or None if capture failed
        """
        if driver is None:
            return None

        dest = self.path_for(label, status, city)
        try:
            dest.parent.mkdir(parents=True, exist_ok=True)
            dest.write_bytes(driver.get_screenshot_as_png())
        except (WebDriverException, OSError) as e:
            logger.error(f"Screenshot {dest.name} failed: {e}")
            return None

        logger.info(f"Screenshot saved: {dest.resolve()}")
        return dest.resolve()
