"""Entry derivation: turns a calendar date into an Entry with running counters."""

import math
from collections.abc import Sequence
from datetime import date

from datebook.errors import InvalidDateError
from datebook.models.entry import Entry
from datebook.utils.date_utils import (
    invalid_reason,
    start_of_week,
    to_iso_date,
    unit_difference,
    weekday_name,
    year_month_day,
)


def derive_entry(current: date, accepted: Sequence[Entry]) -> Entry:
    """Build the entry ``current`` would become if appended to ``accepted``.

    The week count is measured from the Monday of the first accepted entry,
    so it starts at 1 whichever weekday the sequence begins on.
    """
    if not isinstance(current, date):
        raise InvalidDateError(invalid_reason(current) or f"not a date: {current!r}")

    if accepted:
        first_week = start_of_week(accepted[0].date)
        week_count = 1 + math.floor(unit_difference(current, first_week, "week"))
    else:
        week_count = 1

    return Entry(
        date=current,
        iso_date=to_iso_date(current),
        year_month_day=year_month_day(current),
        weekday_name=weekday_name(current),
        day_count=len(accepted) + 1,
        week_count=week_count,
    )
