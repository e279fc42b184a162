"""
Spreadsheet input and output for hotel search runs.
"""

from .excel_writer import (
    HEADERS,
    append_hotel_row,
    clear_data_keep_header,
    ensure_sheet_with_headers,
    find_city_sheet,
    prepare_city_sheet,
    sheet_title,
    write_check_in_out_side_block,
)
from .run_set import RunSetError, parse_run_row, read_search_runs

__all__ = [
    'HEADERS',
    'append_hotel_row',
    'clear_data_keep_header',
    'ensure_sheet_with_headers',
    'find_city_sheet',
    'prepare_city_sheet',
    'sheet_title',
    'write_check_in_out_side_block',
    'RunSetError',
    'parse_run_row',
    'read_search_runs',
]
