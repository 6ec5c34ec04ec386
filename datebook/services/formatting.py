"""Entry formatting with a small template language."""

import re

from datebook.config import settings
from datebook.models.entry import Entry
from datebook.utils.date_utils import format_with_pattern
from datebook.utils.declension import ordinal

_TOKEN_RE = re.compile(r"%\{(.*?)\}|%([^{}])")


def format_entry(entry: Entry, template: str, lang: str | None = None) -> str:
    """Render an entry according to ``template``.

    - ``%{...}`` is a date pattern, see ``format_with_pattern``
    - ``%d`` is the day count, ``%D`` the same as an ordinal (1st, 2nd, ...)
    - ``%w`` is the week count, ``%W`` the same as an ordinal
    - ``%%`` is a literal percent sign
    - everything else, including unknown ``%x`` and an unclosed ``%{``,
      is copied as is

    Args:
        entry: The entry to render.
        template: Template following the rules above.
        lang: Language for ordinals; defaults to ``settings.default_lang``.
    """
    lang = lang or settings.default_lang

    def _replace(match: re.Match[str]) -> str:
        pattern, code = match.groups()
        if pattern is not None:
            return format_with_pattern(entry.date, pattern)
        if code == "d":
            return str(entry.day_count)
        if code == "D":
            return ordinal(entry.day_count, lang)
        if code == "w":
            return str(entry.week_count)
        if code == "W":
            return ordinal(entry.week_count, lang)
        if code == "%":
            return "%"
        return match.group(0)

    return _TOKEN_RE.sub(_replace, template)
