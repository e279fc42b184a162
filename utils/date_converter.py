"""
Date Conversion Utility

Converts dates between the run set format (YYYY-MM-DD) and the
data-testid format used by the hotel site's calendar day buttons
(e.g., "valid-calendar-day-2025-06-10").
"""

from datetime import date, datetime

DAY_TESTID_PREFIX = "valid-calendar-day-"


def parse_iso_date(date_str):
    """
    Parse a date in strict YYYY-MM-DD format.

    Args:
        date_str (str): Date text, surrounding whitespace is ignored

    Returns:
        datetime.date: Parsed date

    Raises:
        ValueError: If date_str is not in valid YYYY-MM-DD format
    """
    try:
        return datetime.strptime(str(date_str).strip(), '%Y-%m-%d').date()
    except ValueError as e:
        raise ValueError(f"Invalid date format '{date_str}'. Expected YYYY-MM-DD") from e


def convert_to_day_testid(day):
    """
    Convert a date to the data-testid of its calendar day button.

    Args:
        day (datetime.date | str): Date object or YYYY-MM-DD string

    Returns:
        str: data-testid value (e.g., "valid-calendar-day-2025-06-10")
    """
    if not isinstance(day, date):
        day = parse_iso_date(day)
    return f"{DAY_TESTID_PREFIX}{day.isoformat()}"


def convert_from_day_testid(testid):
    """
    Convert a calendar day data-testid back to a date.

    Args:
        testid (str): data-testid value (e.g., "valid-calendar-day-2025-06-10")

    Returns:
        datetime.date: The date the button stands for
    """
    if not testid or not testid.startswith(DAY_TESTID_PREFIX):
        raise ValueError(f"Invalid calendar day testid '{testid}'")
    return parse_iso_date(testid[len(DAY_TESTID_PREFIX):])


def cell_to_date_text(value):
    """
    Render a spreadsheet cell value as text, turning native date cells into YYYY-MM-DD.
    """
    if value is None:
        return ""
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    return str(value).strip()
