import argparse
import logging
import sys

from datebook.config import settings
from datebook.errors import DatebookError
from datebook.services.datebook import Datebook, format_dates
from datebook.utils.date_utils import WEEKDAY_NAMES

logger = logging.getLogger(__name__)


def _build(args: argparse.Namespace) -> Datebook:
    book = Datebook().start_on(args.start)
    if args.until is not None:
        book = book.end_on(args.until)
    else:
        n, unit = args.for_
        book = book.for_(int(n), unit)
    if args.on:
        book = book.on(*args.on)
    if args.every_week is not None:
        book = book.every_week(args.every_week)
    if args.nth:
        book = book.if_time_in_month(*args.nth)
    return book


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
    )

    p = argparse.ArgumentParser(prog="datebook", description="Print a list of dates built from rules")
    p.add_argument("start", help="YYYY-MM-DD")
    end = p.add_mutually_exclusive_group()
    end.add_argument(
        "--for", dest="for_", nargs=2, metavar=("N", "UNIT"), default=("1", "times"),
        help="count of times, weeks or months (default: 1 times)",
    )
    end.add_argument("--until", help="inclusive end date, YYYY-MM-DD")
    p.add_argument("--on", nargs="+", choices=WEEKDAY_NAMES, help="weekdays to include")
    p.add_argument("--every-week", type=int, help="1 = every week, 2 = every other week, ...")
    p.add_argument("--nth", nargs="+", type=int, help="occurrences within the month to include")
    p.add_argument("--format", default=settings.default_format, help="template, e.g. '%%D: %%{EEEE d MMMM}'")
    p.add_argument("--lang", default=settings.default_lang, help="language for ordinals (en, ru)")
    p.add_argument("--max-iterations", type=int, help="candidate days to examine before giving up")
    args = p.parse_args(argv)

    try:
        book = _build(args)
        lines = format_dates(book.config, args.format, args.lang, args.max_iterations)
    except (DatebookError, ValueError) as exc:
        logger.debug("Failed to generate dates", exc_info=True)
        print(f"datebook: {exc}", file=sys.stderr)
        return 2

    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
