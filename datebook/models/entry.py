"""Entry: one accepted date in a generated sequence."""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class Entry:
    """A date in the list of matched dates, with its running counters."""

    date: date
    iso_date: str  # YYYY-MM-DD
    year_month_day: tuple[int, int, int]
    weekday_name: str  # "Monday" .. "Sunday"
    day_count: int  # position within the accepted sequence, from 1
    week_count: int  # Monday-based week, counted from the first entry's week
