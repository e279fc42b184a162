"""
Utility modules for the hotel search automation.
"""

from .date_converter import (
    cell_to_date_text,
    convert_from_day_testid,
    convert_to_day_testid,
    parse_iso_date,
)
from .screenshots import ScreenshotRecorder, city_from_label, sanitize

__all__ = [
    'cell_to_date_text',
    'convert_from_day_testid',
    'convert_to_day_testid',
    'parse_iso_date',
    'ScreenshotRecorder',
    'city_from_label',
    'sanitize',
]
