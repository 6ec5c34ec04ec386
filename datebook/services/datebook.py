"""Datebook: immutable builder and entry points for generating dates."""

import logging
from collections.abc import Sequence
from datetime import date

from datebook.config import settings
from datebook.errors import DateOutOfRangeError
from datebook.models.entry import Entry
from datebook.schemas.config import (
    Count,
    CountUnit,
    DateConfig,
    EndCondition,
    EndDate,
    FixedPattern,
    Pattern,
    Tester,
    Weekday,
)
from datebook.services.formatting import format_entry
from datebook.services.sequence import (
    derive_entry,
    generate,
    is_complete,
    matches,
    should_continue,
)
from datebook.utils.date_utils import add_days

logger = logging.getLogger(__name__)


def get_dates(config: DateConfig, max_iterations: int | None = None) -> list[Entry]:
    """Generate the entries described by ``config``.

    Args:
        config: Start date, end condition and pattern.
        max_iterations: Candidate days to examine before giving up;
            defaults to ``settings.max_iterations``.

    Raises:
        GenerationLimitError: If the end condition never stops the sequence.
        DateOutOfRangeError: If the calendar ends before the end condition
            is met.
    """
    reached_end = False

    def next_day(current: date, accepted: Sequence[Entry]) -> date | None:
        nonlocal reached_end
        if current == date.max:
            reached_end = True
            return None
        return add_days(current, 1)

    if max_iterations is None:
        max_iterations = settings.max_iterations
    logger.debug(
        "Generating dates from %s until %r with pattern %r",
        config.start, config.end, config.pattern,
    )
    entries = generate(
        start=config.start,
        step=next_day,
        convert=derive_entry,
        include=matches(config.pattern),
        keep_going=should_continue(config.end),
        max_iterations=max_iterations,
    )
    if reached_end and not is_complete(config.end, entries):
        raise DateOutOfRangeError(
            f"Calendar ends on {date.max.isoformat()} before {config.end!r} is met"
        )
    return entries


def format_dates(
    config: DateConfig,
    template: str | None = None,
    lang: str | None = None,
    max_iterations: int | None = None,
) -> list[str]:
    """Generate the dates of ``config`` rendered with ``template``."""
    template = template or settings.default_format
    entries = get_dates(config, max_iterations)
    return [format_entry(entry, template, lang) for entry in entries]


class Datebook:
    """A sequence of dates built from chained rules.

    Every chaining method returns a new Datebook; the receiver is unchanged.

    Example:
        Datebook().start_on("2025-06-16").on("Monday", "Friday").for_(4, "weeks").dates
    """

    def __init__(self, config: DateConfig | None = None) -> None:
        self.config = config or DateConfig()

    def __repr__(self) -> str:
        return f"Datebook({self.config!r})"

    def _replace(self, **changes: object) -> "Datebook":
        fields = {
            "start": self.config.start,
            "end": self.config.end,
            "pattern": self.config.pattern,
        }
        fields.update(changes)
        return Datebook(DateConfig(**fields))

    def _add_to_pattern(self, **facets: object) -> "Datebook":
        current = self.config.pattern
        base = current.model_dump() if isinstance(current, FixedPattern) else {}
        base.update(facets)
        return self._replace(pattern=FixedPattern(**base))

    def start_on(self, start: date | str) -> "Datebook":
        """Start at the given date."""
        return self._replace(start=start)

    def end_on(self, end: date | str) -> "Datebook":
        """End at the given date (inclusive)."""
        return self._replace(end=EndDate(end_date=end))

    def for_(self, n: int, unit: CountUnit = "times") -> "Datebook":
        """Produce ``n`` dates, or all matching dates within ``n`` weeks or months."""
        return self._replace(end=Count(times=n, type=unit))

    def until(self, end: EndCondition) -> "Datebook":
        return self._replace(end=end)

    def on(self, *weekdays: Weekday) -> "Datebook":
        """Only include the given weekdays, e.g. ``on("Monday", "Wednesday")``."""
        return self._add_to_pattern(weekdays=weekdays)

    def every_week(self, n: int) -> "Datebook":
        """Skip weeks: 1 skips none, 2 is every other week, and so on."""
        return self._add_to_pattern(every_nth_week=n)

    def if_time_in_month(self, *ns: int) -> "Datebook":
        """Only include the n-th occurrences within each month, e.g. 1st and 3rd."""
        return self._add_to_pattern(nth_in_month=ns)

    def where(self, pattern: Pattern | Tester) -> "Datebook":
        """Use an arbitrary pattern, replacing any rules set so far."""
        return self._replace(pattern=pattern)

    @property
    def dates(self) -> list[Entry]:
        """Generate the list of entries."""
        return get_dates(self.config)

    def formatted(self, template: str | None = None, lang: str | None = None) -> list[str]:
        """Generate the dates rendered with ``template``, see ``format_entry``."""
        return format_dates(self.config, template, lang)
