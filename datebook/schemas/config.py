from collections.abc import Callable, Sequence
from datetime import date
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt, PositiveInt, field_validator

from datebook.errors import InvalidDateError
from datebook.models.entry import Entry
from datebook.utils.date_utils import parse_date

Weekday = Literal[
    "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday",
]

# Decides whether the entry under consideration joins the entries accepted so far
Tester = Callable[[Entry, Sequence[Entry]], bool]


class FixedPattern(BaseModel):
    """Inclusion rules; every facet that is set must hold."""

    model_config = ConfigDict(frozen=True)

    weekdays: tuple[Weekday, ...] | None = None
    # Occurrence within the month, computed as day // 7 + 1
    nth_in_month: tuple[PositiveInt, ...] | None = None
    # 1 skips no weeks, 2 is every other week, ...
    every_nth_week: PositiveInt | None = None


class EndDate(BaseModel):
    """Stop after this date (inclusive)."""

    model_config = ConfigDict(frozen=True)

    type: Literal["date"] = "date"
    end_date: date

    @field_validator("end_date", mode="before")
    @classmethod
    def _parse_end_date(cls, value: object) -> object:
        if isinstance(value, (str, date)):
            return parse_date(value)
        return value


CountUnit = Literal["times", "weeks", "months"]


class Count(BaseModel):
    """How many to produce: entries, or weeks/months from the first entry."""

    model_config = ConfigDict(frozen=True)

    type: CountUnit = "times"
    times: NonNegativeInt


EndCondition = Annotated[Union[EndDate, Count], Field(discriminator="type")]
Pattern = Union[FixedPattern, Tester]


class DateConfig(BaseModel):
    """Which dates to produce: a start date, an end condition and a pattern."""

    model_config = ConfigDict(frozen=True)

    start: date = Field(default_factory=date.today)
    end: EndCondition = Field(default_factory=lambda: Count(times=1, type="times"))
    pattern: Pattern | None = None

    @field_validator("start", mode="before")
    @classmethod
    def _parse_start(cls, value: object) -> object:
        if isinstance(value, (str, date)):
            try:
                return parse_date(value)
            except InvalidDateError as exc:
                raise ValueError(f"Invalid start date: {exc}") from exc
        return value
