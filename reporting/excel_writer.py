"""
Excel Result Writer

Writes hotel results into one sheet per city:
- A1:C1 bold headers "Hotel Name", "Price", "Ratings"
- F1:G2 check-in / check-out side block
- rows 2+ one hotel per row in A..C, no gaps

Every call loads the workbook from disk, changes it and saves it back, so a
partially finished run always leaves a consistent file. This relies on a
single writer; runs are sequential.
"""

import re
import logging
from pathlib import Path

from openpyxl import Workbook, load_workbook
from openpyxl.styles import Font
from openpyxl.utils import get_column_letter

logger = logging.getLogger(__name__)

HEADERS = ("Hotel Name", "Price", "Ratings")
DATA_COLUMNS = len(HEADERS)
FIRST_DATA_ROW = 2

SIDE_LABEL_COLUMN = 6  # F
SIDE_VALUE_COLUMN = 7  # G
CHECK_IN_LABEL = "Check-in"
CHECK_OUT_LABEL = "Check-out"

MAX_COLUMN_WIDTH = 60
MAX_SHEET_TITLE = 31
_INVALID_TITLE_CHARS = re.compile(r"[\[\]:*?/\\]")


def sheet_title(name):
    """Make a city name usable as a worksheet title."""
    title = _INVALID_TITLE_CHARS.sub("_", str(name).strip())[:MAX_SHEET_TITLE]
    return title or "Sheet"


def _load(path):
    path = Path(path)
    if path.exists():
        return load_workbook(path)
    workbook = Workbook()
    # Drop openpyxl's default empty sheet; the city sheet replaces it
    workbook.remove(workbook.active)
    return workbook


def _save(workbook, path):
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    workbook.save(path)


def _find_sheet(workbook, title):
    # Excel sheet titles are case-insensitive
    wanted = title.lower()
    return next((ws for ws in workbook.worksheets if ws.title.lower() == wanted), None)


def _get_or_create_sheet(workbook, sheet_name):
    title = sheet_title(sheet_name)
    sheet = _find_sheet(workbook, title)
    if sheet is not None:
        return sheet
    return workbook.create_sheet(title)


def find_city_sheet(workbook, sheet_name):
    """The worksheet holding a city's results, or None."""
    return _find_sheet(workbook, sheet_title(sheet_name))


def _cell_text(sheet, row, column):
    value = sheet.cell(row=row, column=column).value
    return "" if value is None else str(value).strip()


def _write_headers(sheet, headers=HEADERS):
    bold = Font(bold=True)
    for column, text in enumerate(headers, 1):
        cell = sheet.cell(row=1, column=column, value=text)
        cell.font = bold


def _fit_columns(sheet, columns):
    for column in columns:
        longest = 0
        for (value,) in sheet.iter_rows(min_col=column, max_col=column, values_only=True):
            if value is not None:
                longest = max(longest, len(str(value)))
        if longest:
            sheet.column_dimensions[get_column_letter(column)].width = min(longest + 2, MAX_COLUMN_WIDTH)


def is_data_row_empty(sheet, row):
    """True when columns A..C of the row hold nothing but whitespace."""
    return all(not _cell_text(sheet, row, column) for column in range(1, DATA_COLUMNS + 1))


def find_next_write_row(sheet):
    """First row >= 2 whose A..C cells are all empty."""
    row = FIRST_DATA_ROW
    while not is_data_row_empty(sheet, row):
        row += 1
    return row


def ensure_sheet_with_headers(path, sheet_name):
    """
    Create the workbook and/or city sheet if missing and write bold headers in A1:C1.

    Safe to call repeatedly: headers are rewritten in place, never duplicated.
    """
    workbook = _load(path)
    sheet = _get_or_create_sheet(workbook, sheet_name)
    _write_headers(sheet)
    _fit_columns(sheet, range(1, DATA_COLUMNS + 1))
    _save(workbook, path)
    logger.debug(f"Headers ensured on sheet '{sheet.title}' in {path}")


def clear_data_keep_header(path, sheet_name):
    """
    Recreate the city sheet keeping only the header text of A1:C1.

    Removes leftovers from earlier (possibly partial) runs, including the side block.
    """
    if not Path(path).exists():
        ensure_sheet_with_headers(path, sheet_name)
        return

    workbook = _load(path)
    title = sheet_title(sheet_name)
    headers = list(HEADERS)
    index = len(workbook.sheetnames)

    old_sheet = _find_sheet(workbook, title)
    if old_sheet is not None:
        title = old_sheet.title
        index = workbook.worksheets.index(old_sheet)
        for column in range(1, DATA_COLUMNS + 1):
            text = _cell_text(old_sheet, 1, column)
            if text:
                headers[column - 1] = text
        workbook.remove(old_sheet)

    sheet = workbook.create_sheet(title, index)
    _write_headers(sheet, headers)
    _fit_columns(sheet, range(1, DATA_COLUMNS + 1))
    _save(workbook, path)
    logger.info(f"Cleared previous results on sheet '{title}'")


def write_check_in_out_side_block(path, sheet_name, check_in, check_out):
    """Write Check-in/<date> to F1:G1 and Check-out/<date> to F2:G2."""
    workbook = _load(path)
    sheet = _get_or_create_sheet(workbook, sheet_name)

    sheet.cell(row=1, column=SIDE_LABEL_COLUMN, value=CHECK_IN_LABEL)
    sheet.cell(row=1, column=SIDE_VALUE_COLUMN, value=check_in.isoformat())
    sheet.cell(row=2, column=SIDE_LABEL_COLUMN, value=CHECK_OUT_LABEL)
    sheet.cell(row=2, column=SIDE_VALUE_COLUMN, value=check_out.isoformat())

    _fit_columns(sheet, (SIDE_LABEL_COLUMN, SIDE_VALUE_COLUMN))
    _save(workbook, path)


def append_hotel_row(path, sheet_name, row):
    """
    Write one ResultRow into A..C of the first empty data row.

    Args:
        path: Workbook file
        sheet_name (str): City sheet
        row (ResultRow): Extracted hotel fields

    Returns:
        int: 1-based spreadsheet row that was written (first data row is 2)
    """
    workbook = _load(path)
    sheet = _get_or_create_sheet(workbook, sheet_name)

    write_row = find_next_write_row(sheet)
    for column, value in enumerate(row.as_cells(), 1):
        sheet.cell(row=write_row, column=column, value=value if value is not None else "")

    _fit_columns(sheet, range(1, DATA_COLUMNS + 1))
    _save(workbook, path)
    return write_row


def prepare_city_sheet(path, sheet_name, check_in, check_out):
    """Headers, fresh data region and side block for a new city run."""
    ensure_sheet_with_headers(path, sheet_name)
    clear_data_keep_header(path, sheet_name)
    write_check_in_out_side_block(path, sheet_name, check_in, check_out)
