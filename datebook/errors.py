"""Exceptions raised by datebook."""


class DatebookError(Exception):
    """Base error."""


class InvalidDateError(DatebookError, ValueError):
    """Raised when a value is not a well-formed calendar date."""


class DateOutOfRangeError(DatebookError, OverflowError):
    """Raised when date stepping leaves the supported calendar range."""


class GenerationLimitError(DatebookError):
    """Raised when generation examines more candidates than allowed."""

    def __init__(self, limit: int) -> None:
        self.limit = limit
        super().__init__(
            f"Gave up after {limit} candidate dates; "
            "the end condition never stopped the sequence"
        )
