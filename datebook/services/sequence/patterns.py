"""Pattern matching: compiles a pattern into a single Tester."""

from collections.abc import Sequence

from datebook.models.entry import Entry
from datebook.schemas.config import FixedPattern, Pattern, Tester


def _is_true(curr: Entry, accepted: Sequence[Entry]) -> bool:
    return True


def matches(pattern: Pattern | None) -> Tester:
    """Return a Tester accepting the entries described by ``pattern``.

    No pattern accepts everything and a callable is used as is. A FixedPattern
    accepts an entry only when each of its facets does.
    """
    if pattern is None:
        return _is_true
    if not isinstance(pattern, FixedPattern):
        return pattern

    testers = (
        matches_weekdays(pattern.weekdays),
        matches_nth_in_month(pattern.nth_in_month),
        is_every_nth_week(pattern.every_nth_week),
    )
    return lambda curr, accepted: all(t(curr, accepted) for t in testers)


def matches_weekdays(weekdays: Sequence[str] | None) -> Tester:
    if weekdays is None:
        return _is_true
    allowed = frozenset(weekdays)
    return lambda curr, accepted: curr.weekday_name in allowed


def nth_in_month(day: int) -> int:
    """Occurrence number within the month for a day of month."""
    return day // 7 + 1


def matches_nth_in_month(ns: Sequence[int] | None) -> Tester:
    if ns is None:
        return _is_true
    allowed = frozenset(ns)
    return lambda curr, accepted: nth_in_month(curr.year_month_day[2]) in allowed


def is_every_nth_week(n: int | None) -> Tester:
    """Accept an entry only n weeks after the last accepted entry on its weekday.

    The first occurrence of each weekday is always accepted. Rejected
    candidates never count as a previous occurrence.
    """
    if n is None:
        return _is_true

    def _tester(curr: Entry, accepted: Sequence[Entry]) -> bool:
        last = _last_on_weekday(accepted, curr.weekday_name)
        if last is None:
            return True
        return curr.week_count - last.week_count == n

    return _tester


def _last_on_weekday(accepted: Sequence[Entry], weekday: str) -> Entry | None:
    for entry in reversed(accepted):
        if entry.weekday_name == weekday:
            return entry
    return None
