"""
Search Data Models

Defines the input of one run (SearchRequest) and the record extracted
from one result card (ResultRow).
"""

from dataclasses import dataclass
from datetime import date

NAME_NOT_FOUND = "Name not found"
PRICE_NOT_FOUND = "Price not found"
RATING_NOT_FOUND = ""


class InvalidDateRangeError(ValueError):
    """Check-out is not strictly after check-in."""

    def __init__(self, check_in, check_out):
        self.check_in = check_in
        self.check_out = check_out
        super().__init__(
            f"Check-out date must be after check-in date "
            f"(check-in {check_in}, check-out {check_out})."
        )


def validate_date_range(check_in, check_out):
    if not check_out > check_in:
        raise InvalidDateRangeError(check_in, check_out)


@dataclass(frozen=True)
class SearchRequest:
    city: str
    check_in: date
    check_out: date

    def __post_init__(self):
        if not self.city or not self.city.strip():
            raise ValueError("City must not be blank.")
        validate_date_range(self.check_in, self.check_out)

    @property
    def nights(self):
        return (self.check_out - self.check_in).days

    def __str__(self):
        return f"{self.city} ({self.check_in.isoformat()} -> {self.check_out.isoformat()})"


@dataclass(frozen=True)
class ResultRow:
    hotel_name: str = NAME_NOT_FOUND
    price: str = PRICE_NOT_FOUND
    rating: str = RATING_NOT_FOUND

    def as_cells(self):
        return [self.hotel_name, self.price, self.rating]
