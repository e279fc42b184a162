"""
Step Outcomes

Optional UI steps report what happened instead of hiding failures in
except blocks; required steps raise.
"""

from dataclasses import dataclass, field
from enum import Enum


@dataclass(frozen=True)
class GuestAdjustment:
    decreased: bool


@dataclass(frozen=True)
class SortSelection:
    confirmed: bool


class PageAdvance(Enum):
    ADVANCED = "advanced"
    ADVANCED_BY_SCRIPT = "advanced_by_script"
    NO_CONTROL = "no_control"
    DISABLED = "disabled"
    CLICK_FAILED = "click_failed"

    @property
    def advanced(self):
        return self in (PageAdvance.ADVANCED, PageAdvance.ADVANCED_BY_SCRIPT)


@dataclass
class PageWrite:
    page: int
    extracted: int = 0
    written: int = 0
    skipped_stale: int = 0
    failed_writes: int = 0
    rows: list = field(default_factory=list)


@dataclass
class PaginationReport:
    pages: list = field(default_factory=list)
    stop_reason: PageAdvance = None

    @property
    def pages_written(self):
        return len(self.pages)

    @property
    def rows_written(self):
        return sum(page.written for page in self.pages)

    @property
    def stopped_early(self):
        return self.stop_reason is not None
