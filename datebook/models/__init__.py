from datebook.models.entry import Entry

__all__ = [
    "Entry",
]
