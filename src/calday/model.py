"""Calendar day value type and day-level arithmetic."""

import datetime as dt
from typing import Literal, Union

from calday.config import DAYS_IN_WEEK
from calday.logging import get_logger

DayInterval = Literal["year", "quarter", "month", "week", "day"]
DayParameter = Union["CalendarDay", dt.date]

INTERVALS: tuple[str, ...] = ("year", "quarter", "month", "week", "day")
MONTHS_IN_YEAR = 12
MONTHS_IN_QUARTER = 3
WEEKDAY_MIN = 1  # Monday
WEEKDAY_MAX = 5  # Friday

_DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
_FEBRUARY = 1

_log = get_logger(__name__)


class CalDayError(Exception):
    """Base class for calday errors."""
    pass


class InvalidIntervalError(CalDayError, ValueError):
    """Raised when an unknown interval unit is used for day arithmetic."""

    def __init__(self, unit: object) -> None:
        super().__init__(f"Invalid interval: {unit}")
        self.unit = unit


def is_leap(year: int) -> bool:
    """Return True for leap years in the proleptic Gregorian calendar."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in a zero-based month of a year."""
    if not 0 <= month < MONTHS_IN_YEAR:
        raise ValueError(f"Invalid month specified: {month}")
    if month == _FEBRUARY and is_leap(year):
        return 29
    return _DAYS_IN_MONTH[month]


def _normalize(year: int, month: int, day: int) -> dt.date:
    """Build a date, rolling out-of-range months and days into neighbours.

    month=12 is January of the next year, day=0 is the last day of the
    previous month, day=32 of a 31-day month is the 1st of the next one.
    """
    year += month // MONTHS_IN_YEAR
    month %= MONTHS_IN_YEAR
    return dt.date.fromordinal(dt.date(year, month + 1, 1).toordinal() + day - 1)


def to_calendar_day(value: DayParameter) -> "CalendarDay":
    """Convert a native date (or datetime) into a CalendarDay."""
    if isinstance(value, CalendarDay):
        return value
    if isinstance(value, dt.date):
        return CalendarDay.from_date(value)
    raise TypeError(
        f"Expected CalendarDay, date or datetime, got {type(value).__name__}"
    )


class CalendarDay:
    """An immutable calendar date at day granularity.

    ``month`` is zero-based (0 = January) and ``day`` is the day of the
    week with 0 = Sunday. Every operation returns a new instance.

    Example:
        >>> day = CalendarDay(2024, 0, 31)
        >>> day.add("month", 1)
        CalendarDay(2024, 1, 29)
    """

    __slots__ = ("_date",)

    def __init__(self, year: int, month: int, date: int = 1) -> None:
        self._date = _normalize(year, month, date)

    @classmethod
    def _from_ordinal(cls, ordinal: int) -> "CalendarDay":
        value = dt.date.fromordinal(ordinal)
        return cls(value.year, value.month - 1, value.day)

    @classmethod
    def from_date(cls, value: dt.date) -> "CalendarDay":
        """Construct from a native date or datetime, dropping time of day."""
        return cls(value.year, value.month - 1, value.day)

    @classmethod
    def today(cls) -> "CalendarDay":
        """Construct the current local day."""
        return cls.from_date(dt.datetime.now())

    @staticmethod
    def compare(first: DayParameter, second: DayParameter) -> int:
        """Compare the date portion of two values.

        Returns:
            0 if equal, 1 if ``first`` is later, -1 if ``first`` is earlier.
        """
        a = to_calendar_day(first)
        b = to_calendar_day(second)

        if a.equal_to(b):
            return 0
        return 1 if a.greater_than(b) else -1

    def clone(self) -> "CalendarDay":
        """Return a copy of this instance."""
        return CalendarDay.from_date(self._date)

    def set(
        self,
        year: int | None = None,
        month: int | None = None,
        date: int | None = None,
    ) -> "CalendarDay":
        """Return a new instance with the given fields replaced.

        A positive ``date`` past the end of the target month is clamped to
        the last day of that month. Zero or negative dates roll back into
        earlier months.
        """
        year = self.year if year is None else year
        month = self.month if month is None else month
        date = self.date if date is None else date

        if date > 0:
            year += month // MONTHS_IN_YEAR
            month %= MONTHS_IN_YEAR
            date = min(date, days_in_month(year, month))

        return CalendarDay(year, month, date)

    def add(self, unit: DayInterval, value: int) -> "CalendarDay":
        """Return a new instance shifted by ``value`` units.

        Month and quarter shifts that land past the end of a shorter month
        are clamped to its last day (Jan 31 + 1 month is Feb 28 or 29).
        Year shifts keep the calendar fields and let Feb 29 roll into
        Mar 1 when the target year is not a leap year.

        Raises:
            InvalidIntervalError: If ``unit`` is not a known interval.
        """
        if unit == "day":
            return CalendarDay._from_ordinal(self._date.toordinal() + value)
        elif unit == "week":
            return CalendarDay._from_ordinal(
                self._date.toordinal() + DAYS_IN_WEEK * value
            )
        elif unit == "month":
            return self._add_months(value)
        elif unit == "quarter":
            return self._add_months(MONTHS_IN_QUARTER * value)
        elif unit == "year":
            return CalendarDay(self.year + value, self.month, self.date)
        else:
            raise InvalidIntervalError(unit)

    def _add_months(self, months: int) -> "CalendarDay":
        total = self.month + months
        year = self.year + total // MONTHS_IN_YEAR
        month = total % MONTHS_IN_YEAR
        last = days_in_month(year, month)

        if self.date > last:
            _log.debug(
                "month_rollover_clamped",
                origin=self.isoformat(),
                months=months,
                clamped_to=last,
            )
            return CalendarDay(year, month, last)
        return CalendarDay(year, month, self.date)

    @property
    def year(self) -> int:
        """The full year."""
        return self._date.year

    @property
    def month(self) -> int:
        """The zero-based month (0 = January)."""
        return self._date.month - 1

    @property
    def date(self) -> int:
        """The day of the month."""
        return self._date.day

    @property
    def day(self) -> int:
        """The day of the week (0 = Sunday)."""
        return self._date.isoweekday() % DAYS_IN_WEEK

    @property
    def week(self) -> int:
        """Week of the year counted in 7-day blocks from January 1st."""
        return (self._date.timetuple().tm_yday - 1) // DAYS_IN_WEEK + 1

    @property
    def iso_week(self) -> int:
        """ISO 8601 week number (weeks start on Monday)."""
        return self._date.isocalendar()[1]

    @property
    def weekend(self) -> bool:
        """Whether this is a Saturday or a Sunday."""
        return self.day < WEEKDAY_MIN or self.day > WEEKDAY_MAX

    @property
    def timestamp(self) -> int:
        """Milliseconds since epoch at local midnight."""
        return round(self.native.timestamp() * 1000)

    @property
    def native(self) -> dt.datetime:
        """A new naive datetime at local midnight of this day."""
        return dt.datetime(self._date.year, self._date.month, self._date.day)

    def to_date(self) -> dt.date:
        """Return this day as a ``datetime.date``."""
        return dt.date(self._date.year, self._date.month, self._date.day)

    def isoformat(self) -> str:
        return self._date.isoformat()

    def equal_to(self, value: DayParameter) -> bool:
        return self._ordinal() == to_calendar_day(value)._ordinal()

    def greater_than(self, value: DayParameter) -> bool:
        return self._ordinal() > to_calendar_day(value)._ordinal()

    def greater_than_or_equal(self, value: DayParameter) -> bool:
        return self._ordinal() >= to_calendar_day(value)._ordinal()

    def less_than(self, value: DayParameter) -> bool:
        return self._ordinal() < to_calendar_day(value)._ordinal()

    def less_than_or_equal(self, value: DayParameter) -> bool:
        return self._ordinal() <= to_calendar_day(value)._ordinal()

    def _ordinal(self) -> int:
        return self._date.toordinal()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CalendarDay):
            return NotImplemented
        return self.equal_to(other)

    def __hash__(self) -> int:
        return hash(self._date)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, CalendarDay):
            return NotImplemented
        return self.less_than(other)

    def __le__(self, other: object) -> bool:
        if not isinstance(other, CalendarDay):
            return NotImplemented
        return self.less_than_or_equal(other)

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, CalendarDay):
            return NotImplemented
        return self.greater_than(other)

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, CalendarDay):
            return NotImplemented
        return self.greater_than_or_equal(other)

    def __repr__(self) -> str:
        return f"CalendarDay({self.year}, {self.month}, {self.date})"

    def __str__(self) -> str:
        return self.isoformat()
