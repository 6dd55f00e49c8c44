"""
Calendar date value model.

A `CalendarDate` is the parsed form of a date string: year, 1-based
month, day, and optional wall-clock time fields. Instances are frozen
and only exist for real proleptic Gregorian dates.
"""

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field, model_validator

from dateconv.core.errors import InvalidCalendarDate


def is_calendar_date(year: int, month_index: int, day: int) -> bool:
    """Check that (year, zero-based month, day) names a real date.

    The triple must survive a round trip through `datetime.date`: an
    overflowing day or month (31 April, 29 February of a common year,
    month index 12) is rejected, never rolled over into the next month.

    Args:
        year: Full year, 1 to 9999.
        month_index: Month as 0 (January) to 11 (December).
        day: Day of the month.

    Returns:
        True if the triple is a real calendar date.
    """
    if not 0 <= month_index <= 11:
        return False

    try:
        built = date(year, month_index + 1, day)
    except (ValueError, OverflowError):
        return False

    return (built.year, built.month - 1, built.day) == (year, month_index, day)


class CalendarDate(BaseModel):
    """A validated calendar date with optional time-of-day fields.

    Time fields default to zero. Use `from_datetime` to capture a
    specific moment.
    """

    model_config = ConfigDict(frozen=True)

    year: int
    month: int = Field(..., description="1-based month")
    day: int
    hour: int = Field(default=0, ge=0, le=23)
    minute: int = Field(default=0, ge=0, le=59)
    second: int = Field(default=0, ge=0, le=59)

    @model_validator(mode="after")
    def validate_calendar_fields(self) -> "CalendarDate":
        """Year, month and day must form a real date.

        Raises InvalidCalendarDate, which pydantic propagates as-is
        (only ValueError and AssertionError become ValidationError).
        """
        if not is_calendar_date(self.year, self.month - 1, self.day):
            raise InvalidCalendarDate(
                f"{self.year:04d}-{self.month:02d}-{self.day:02d} is not a valid calendar date"
            )
        return self

    @classmethod
    def from_datetime(cls, value: date | datetime) -> "CalendarDate":
        """Copy the wall-clock fields of a `date` or `datetime`.

        Timezone info and microseconds are dropped; a bare `date` gets
        zero time fields.
        """
        if isinstance(value, datetime):
            return cls(
                year=value.year,
                month=value.month,
                day=value.day,
                hour=value.hour,
                minute=value.minute,
                second=value.second,
            )
        return cls(year=value.year, month=value.month, day=value.day)

    def to_date(self) -> date:
        return date(self.year, self.month, self.day)

    def to_datetime(self) -> datetime:
        return datetime(self.year, self.month, self.day, self.hour, self.minute, self.second)
