"""datebook: lists of dates built from rules.

Most callers only need ``Datebook`` or ``get_dates`` and ``format_entry``.
"""

from datebook.errors import (
    DatebookError,
    DateOutOfRangeError,
    GenerationLimitError,
    InvalidDateError,
)
from datebook.models.entry import Entry
from datebook.schemas.config import (
    Count,
    DateConfig,
    EndDate,
    FixedPattern,
    Pattern,
    Tester,
    Weekday,
)
from datebook.services.datebook import Datebook, format_dates, get_dates
from datebook.services.formatting import format_entry
from datebook.services.sequence import generate

__all__ = [
    "Count",
    "DateConfig",
    "DateOutOfRangeError",
    "Datebook",
    "DatebookError",
    "EndDate",
    "Entry",
    "FixedPattern",
    "GenerationLimitError",
    "InvalidDateError",
    "Pattern",
    "Tester",
    "Weekday",
    "format_dates",
    "format_entry",
    "generate",
    "get_dates",
]
