"""English and Russian ordinal helpers."""

import inflect

_inflect_engine = inflect.engine()

SUPPORTED_LANGUAGES = ("en", "ru")


def ordinal_en(n: int) -> str:
    """English ordinal with suffix.

    Example: ordinal_en(1) -> '1st', ordinal_en(12) -> '12th', ordinal_en(23) -> '23rd'
    """
    return _inflect_engine.ordinal(n)


def ordinal_ru(n: int) -> str:
    """Russian numeric ordinal in the short masculine form: ordinal_ru(3) -> '3-й'."""
    return f"{n}-й"


def ordinal(n: int, lang: str = "en") -> str:
    """Ordinal number in given language, English for unsupported ones."""
    if lang == "ru":
        return ordinal_ru(n)
    return ordinal_en(n)
