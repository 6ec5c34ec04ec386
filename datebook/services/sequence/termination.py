"""Termination policy: compiles an end condition into a keep-going Tester."""

from collections.abc import Sequence
from datetime import date, timedelta

from dateutil.relativedelta import relativedelta

from datebook.models.entry import Entry
from datebook.schemas.config import Count, EndCondition, EndDate, Tester
from datebook.utils.date_utils import start_of_month, start_of_week, unit_difference

_UNIT_START = {
    "weeks": ("week", start_of_week),
    "months": ("month", start_of_month),
}


def should_continue(end: EndCondition) -> Tester:
    """Return a Tester that is true while generation should go on.

    Weeks and months are counted from the start of the week or month holding
    the first accepted entry, not from the configured start date.
    """
    if isinstance(end, EndDate):
        last = end.end_date
        return lambda curr, accepted: curr.date <= last

    if isinstance(end, Count):
        if end.type == "times":
            return lambda curr, accepted: len(accepted) < end.times
        return _count_units(end)

    raise TypeError(f"Unknown end condition: {end!r}")


def _count_units(end: Count) -> Tester:
    unit, unit_start = _UNIT_START[end.type]

    def _tester(curr: Entry, accepted: Sequence[Entry]) -> bool:
        if not accepted:
            return True
        anchor = unit_start(accepted[0].date)
        return unit_difference(curr.date, anchor, unit) < end.times

    return _tester


def is_complete(end: EndCondition, accepted: Sequence[Entry]) -> bool:
    """Whether ``accepted`` fulfils ``end`` when no later date exists.

    An end date never lies past the calendar, so it is always fulfilled. A
    week or month count is fulfilled when its last day fits in the calendar.
    """
    if isinstance(end, EndDate):
        return True
    if end.type == "times":
        return len(accepted) >= end.times
    if not accepted:
        return False

    anchor = _UNIT_START[end.type][1](accepted[0].date)
    try:
        if end.type == "weeks":
            last_day = anchor + timedelta(days=7 * end.times - 1)
        else:
            # day=31 clamps to the end of the final month
            last_day = anchor + relativedelta(months=end.times - 1, day=31)
    except (OverflowError, ValueError):
        return False
    return last_day <= date.max
