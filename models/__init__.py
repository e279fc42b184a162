"""
Data models for hotel search runs.
"""

from .search import (
    NAME_NOT_FOUND,
    PRICE_NOT_FOUND,
    RATING_NOT_FOUND,
    InvalidDateRangeError,
    ResultRow,
    SearchRequest,
    validate_date_range,
)

__all__ = [
    'NAME_NOT_FOUND',
    'PRICE_NOT_FOUND',
    'RATING_NOT_FOUND',
    'InvalidDateRangeError',
    'ResultRow',
    'SearchRequest',
    'validate_date_range',
]
