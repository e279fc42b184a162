"""
Run Set Reader

Reads (city, check-in, check-out) rows from the input workbook, starting at row 2.
Rows with a blank field, a date that is not YYYY-MM-DD, or check-out not
strictly after check-in are left out of the run set.
"""

import logging
from pathlib import Path

from openpyxl import load_workbook

from models import InvalidDateRangeError, SearchRequest
from utils.date_converter import cell_to_date_text, parse_iso_date

logger = logging.getLogger(__name__)


class RunSetError(Exception):
    """The input workbook or its sheet cannot be used."""


def parse_run_row(values):
    """
    Turn one input row into a SearchRequest.

    Args:
        values (tuple): Raw cell values of columns A..C

    Returns:
        SearchRequest | None: None when the row is excluded from the run set
    """
    values = tuple(values) + (None,) * (3 - len(values))
    city, check_in_text, check_out_text = (cell_to_date_text(v) for v in values[:3])

    if not city or not check_in_text or not check_out_text:
        return None

    try:
        return SearchRequest(
            city=city,
            check_in=parse_iso_date(check_in_text),
            check_out=parse_iso_date(check_out_text),
        )
    except InvalidDateRangeError:
        logger.debug(f"Skipping {city}: check-out {check_out_text} is not after {check_in_text}")
    except ValueError as e:
        logger.debug(f"Skipping {city}: {e}")
    return None


def read_search_runs(path, sheet_name):
    """
    Load every valid SearchRequest from the input workbook.

    Raises:
        RunSetError: If the file or the sheet is missing
    """
    path = Path(path)
    if not path.exists():
        raise RunSetError(f"Input Excel not found at {path}")

    workbook = load_workbook(path, read_only=True, data_only=True)
    try:
        if sheet_name not in workbook.sheetnames:
            raise RunSetError(f"Sheet '{sheet_name}' not found in {path}")

        requests = []
        for values in workbook[sheet_name].iter_rows(min_row=2, max_col=3, values_only=True):
            request = parse_run_row(values)
            if request is not None:
                requests.append(request)
    finally:
        workbook.close()

    logger.info(f"Total valid rows found: {len(requests)}")
    for request in requests:
        logger.info(f"ROW: {request}")
    return requests
