"""Date sequence generation engine."""

from datebook.services.sequence.engine import generate
from datebook.services.sequence.entry import derive_entry
from datebook.services.sequence.patterns import matches
from datebook.services.sequence.termination import is_complete, should_continue

__all__ = [
    "derive_entry",
    "generate",
    "is_complete",
    "matches",
    "should_continue",
]
