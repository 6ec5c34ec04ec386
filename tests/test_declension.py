"""Tests for ordinal helpers."""

from datebook.utils.declension import ordinal, ordinal_en, ordinal_ru


class TestEnglishOrdinals:
    def test_first_few(self):
        assert ordinal_en(1) == "1st"
        assert ordinal_en(2) == "2nd"
        assert ordinal_en(3) == "3rd"
        assert ordinal_en(4) == "4th"

    def test_teens(self):
        assert ordinal_en(11) == "11th"
        assert ordinal_en(12) == "12th"
        assert ordinal_en(13) == "13th"

    def test_larger(self):
        assert ordinal_en(21) == "21st"
        assert ordinal_en(102) == "102nd"
        assert ordinal_en(111) == "111th"


class TestRussianOrdinals:
    def test_short_form(self):
        assert ordinal_ru(1) == "1-й"
        assert ordinal_ru(23) == "23-й"


class TestOrdinalDispatch:
    def test_russian(self):
        assert ordinal(3, "ru") == "3-й"

    def test_english(self):
        assert ordinal(3, "en") == "3rd"

    def test_unknown_language_falls_back_to_english(self):
        assert ordinal(3, "de") == "3rd"
