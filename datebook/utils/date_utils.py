"""Calendar helpers: parsing, stepping, unit differences and pattern formatting.

Weeks start on Monday throughout. Names are always English so output does not
depend on the process locale.
"""

import re
from collections.abc import Callable
from datetime import date, datetime, timedelta
from typing import Literal

from dateutil.relativedelta import relativedelta

from datebook.errors import DateOutOfRangeError, InvalidDateError

Unit = Literal["week", "month"]

WEEKDAY_NAMES = (
    "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday",
)
MONTH_NAMES = (
    "", "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)

_DATE_FORMATS = ("%Y-%m-%d", "%d.%m.%Y", "%d/%m/%Y")


def parse_date(value: date | str) -> date:
    """Coerce a date or a date string into a ``date``.

    Accepts ISO (YYYY-MM-DD), DD.MM.YYYY and DD/MM/YYYY strings. Datetimes are
    truncated to their date.

    Raises:
        InvalidDateError: with a human-readable reason.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise InvalidDateError(f"unsupported date value {value!r}")

    text = value.strip()
    reason = f"unparsable date {text!r}"
    for fmt in _DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError as exc:
            if "out of range" in str(exc):
                reason = f"{text!r}: {exc}"
    raise InvalidDateError(reason)


def invalid_reason(value: object) -> str | None:
    """Return why ``value`` is not a calendar date, or None if it is one."""
    try:
        parse_date(value)  # type: ignore[arg-type]
    except InvalidDateError as exc:
        return str(exc)
    return None


def to_iso_date(d: date) -> str:
    return d.isoformat()


def year_month_day(d: date) -> tuple[int, int, int]:
    return (d.year, d.month, d.day)


def weekday_name(d: date) -> str:
    return WEEKDAY_NAMES[d.weekday()]


def add_days(d: date, n: int) -> date:
    try:
        return d + timedelta(days=n)
    except OverflowError as exc:
        raise DateOutOfRangeError(f"{d.isoformat()} + {n} days: {exc}") from exc


def start_of_week(d: date) -> date:
    """Monday of the week containing d."""
    return d - timedelta(days=d.weekday())


def start_of_month(d: date) -> date:
    return d.replace(day=1)


def unit_difference(later: date, earlier: date, unit: Unit) -> float:
    """Fractional number of weeks or months from ``earlier`` to ``later``.

    Callers floor the result. Months count calendar months; the remainder is
    the fraction of the following month that has elapsed.
    """
    if unit == "week":
        return (later - earlier).days / 7
    if unit == "month":
        delta = relativedelta(later, earlier)
        whole = delta.years * 12 + delta.months
        anchor = earlier + relativedelta(months=whole)
        following = earlier + relativedelta(months=whole + 1)
        return whole + (later - anchor).days / (following - anchor).days
    raise ValueError(f"Unknown unit: {unit}")


# --- Pattern formatting ---------------------------------------------------

_TOKEN_RE = re.compile(r"'([^']*)'|([A-Za-z])\2*")

_TOKENS: dict[str, Callable[[date], str]] = {
    "y": lambda d: str(d.year),
    "yy": lambda d: f"{d.year % 100:02d}",
    "yyyy": lambda d: f"{d.year:04d}",
    "yyyyyy": lambda d: f"{d.year:06d}",
    "M": lambda d: str(d.month),
    "MM": lambda d: f"{d.month:02d}",
    "MMM": lambda d: MONTH_NAMES[d.month][:3],
    "MMMM": lambda d: MONTH_NAMES[d.month],
    "MMMMM": lambda d: MONTH_NAMES[d.month][0],
    "L": lambda d: str(d.month),
    "LL": lambda d: f"{d.month:02d}",
    "LLL": lambda d: MONTH_NAMES[d.month][:3],
    "LLLL": lambda d: MONTH_NAMES[d.month],
    "LLLLL": lambda d: MONTH_NAMES[d.month][0],
    "d": lambda d: str(d.day),
    "dd": lambda d: f"{d.day:02d}",
    "E": lambda d: str(d.isoweekday()),
    "EEE": lambda d: WEEKDAY_NAMES[d.weekday()][:3],
    "EEEE": lambda d: WEEKDAY_NAMES[d.weekday()],
    "EEEEE": lambda d: WEEKDAY_NAMES[d.weekday()][0],
    "c": lambda d: str(d.isoweekday()),
    "ccc": lambda d: WEEKDAY_NAMES[d.weekday()][:3],
    "cccc": lambda d: WEEKDAY_NAMES[d.weekday()],
    "ccccc": lambda d: WEEKDAY_NAMES[d.weekday()][0],
    "o": lambda d: str(d.timetuple().tm_yday),
    "ooo": lambda d: f"{d.timetuple().tm_yday:03d}",
    "W": lambda d: str(d.isocalendar()[1]),
    "WW": lambda d: f"{d.isocalendar()[1]:02d}",
    "kk": lambda d: f"{d.isocalendar()[0] % 100:02d}",
    "kkkk": lambda d: f"{d.isocalendar()[0]:04d}",
    "q": lambda d: str((d.month - 1) // 3 + 1),
    "qq": lambda d: f"{(d.month - 1) // 3 + 1:02d}",
    "D": lambda d: f"{d.month}/{d.day}/{d.year}",
    "DD": lambda d: f"{MONTH_NAMES[d.month][:3]} {d.day}, {d.year}",
    "DDD": lambda d: f"{MONTH_NAMES[d.month]} {d.day}, {d.year}",
    "DDDD": lambda d: f"{WEEKDAY_NAMES[d.weekday()]}, {MONTH_NAMES[d.month]} {d.day}, {d.year}",
}


def format_with_pattern(d: date, pattern: str) -> str:
    """Format a date with Luxon-style tokens, e.g. ``yyyy-MM-dd`` or ``EEEE, d MMMM``.

    Supported tokens:

    - year: ``y``, ``yy``, ``yyyy``, ``yyyyyy``; ISO week year: ``kk``, ``kkkk``
    - month: ``M``/``L``, ``MM``/``LL``, ``MMM``/``LLL`` (Jun), ``MMMM``/``LLLL``
      (June), ``MMMMM``/``LLLLL`` (J)
    - day: ``d``, ``dd``; day of year: ``o``, ``ooo``
    - weekday: ``E``/``c`` (1-7 from Monday), ``EEE``/``ccc`` (Mon),
      ``EEEE``/``cccc`` (Monday), ``EEEEE``/``ccccc`` (M)
    - ISO week: ``W``, ``WW``; quarter: ``q``, ``qq``
    - whole dates: ``D`` (6/16/2025), ``DD``, ``DDD``, ``DDDD``

    Text in single quotes is literal (``''`` is a quote). Any other letter run,
    e.g. ``EE`` or ``yyy``, is copied unchanged.
    """

    def _replace(match: re.Match[str]) -> str:
        literal = match.group(1)
        if literal is not None:
            return literal or "'"
        token = match.group(0)
        render = _TOKENS.get(token)
        return render(d) if render is not None else token

    return _TOKEN_RE.sub(_replace, pattern)
