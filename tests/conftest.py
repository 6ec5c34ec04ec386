"""Shared fixtures for datebook tests."""

from datetime import date

import pytest

from datebook.models.entry import Entry
from datebook.services.sequence import derive_entry

START = date(2025, 6, 16)  # a Monday


@pytest.fixture
def first_entry() -> Entry:
    """Entry for 2025-06-16 as the first date of a sequence."""
    return derive_entry(START, [])
