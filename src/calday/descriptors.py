"""Date range descriptors and day membership tests."""

import datetime as dt
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Union

from calday.logging import get_logger
from calday.model import CalendarDay, DayParameter, to_calendar_day

_log = get_logger(__name__)


class DateRangeType(IntEnum):
    """Kinds of rules a DateRangeDescriptor can express."""

    AFTER = 0
    BEFORE = 1
    BETWEEN = 2
    SPECIFIC = 3
    WEEKDAYS = 4
    WEEKENDS = 5


_BOUNDED = (DateRangeType.AFTER, DateRangeType.BEFORE, DateRangeType.BETWEEN)


@dataclass(frozen=True)
class DateRangeDescriptor:
    """A rule matching a set of days.

    ``date_range`` holds the reference days: one for AFTER and BEFORE, two
    (in any order) for BETWEEN, any number for SPECIFIC and none for
    WEEKDAYS and WEEKENDS.
    """

    type: DateRangeType
    date_range: tuple[DayParameter, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "type", DateRangeType(self.type))
        object.__setattr__(self, "date_range", tuple(self.date_range))

    @classmethod
    def after(cls, value: DayParameter) -> "DateRangeDescriptor":
        return cls(DateRangeType.AFTER, (value,))

    @classmethod
    def before(cls, value: DayParameter) -> "DateRangeDescriptor":
        return cls(DateRangeType.BEFORE, (value,))

    @classmethod
    def between(
        cls, start: DayParameter, end: DayParameter
    ) -> "DateRangeDescriptor":
        return cls(DateRangeType.BETWEEN, (start, end))

    @classmethod
    def specific(cls, values: Iterable[DayParameter]) -> "DateRangeDescriptor":
        return cls(DateRangeType.SPECIFIC, tuple(values))

    @classmethod
    def weekdays(cls) -> "DateRangeDescriptor":
        return cls(DateRangeType.WEEKDAYS)

    @classmethod
    def weekends(cls) -> "DateRangeDescriptor":
        return cls(DateRangeType.WEEKENDS)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "DateRangeDescriptor":
        """Build a descriptor from ``{"type": ..., "date_range": [...]}``.

        ``dateRange`` is accepted as an alias of ``date_range``.

        Raises:
            ValueError: If ``type`` is missing or not a DateRangeType value.
        """
        if "type" not in data:
            raise ValueError("Date range descriptor is missing 'type'")
        dates = data.get("date_range", data.get("dateRange")) or ()
        return cls(DateRangeType(data["type"]), tuple(dates))

    @property
    def days(self) -> list[CalendarDay]:
        """The reference days normalised to CalendarDay."""
        return [to_calendar_day(value) for value in self.date_range]

    @property
    def well_formed(self) -> bool:
        """Whether the rule carries the reference days it needs.

        Bounded rules need at least one reference day, and every reference
        day must be a CalendarDay or a native date.
        """
        return self.problem() is None

    def problem(self) -> str | None:
        """Describe why this rule cannot be evaluated, or None if it can."""
        if self.type in _BOUNDED and not self.date_range:
            return "missing bounds"
        for value in self.date_range:
            if not isinstance(value, (CalendarDay, dt.date)):
                return f"unsupported bound {type(value).__name__}"
        return None

    def matches(self, value: DayParameter) -> bool:
        """Check whether a day satisfies this rule."""
        day = to_calendar_day(value)

        problem = self.problem()
        if problem is not None:
            _log.warning(
                "descriptor_skipped",
                type=self.type.name,
                reason=problem,
                day=day.isoformat(),
            )
            return False

        days = self.days
        if self.type == DateRangeType.AFTER:
            return day > days[0]
        elif self.type == DateRangeType.BEFORE:
            return day < days[0]
        elif self.type == DateRangeType.BETWEEN:
            low, high = sorted((days[0], days[-1]))
            return low <= day <= high
        elif self.type == DateRangeType.SPECIFIC:
            return any(day == other for other in days)
        elif self.type == DateRangeType.WEEKDAYS:
            return not day.weekend
        elif self.type == DateRangeType.WEEKENDS:
            return day.weekend
        return False


DescriptorLike = Union[DateRangeDescriptor, Mapping[str, Any]]


def coerce_descriptor(value: DescriptorLike) -> DateRangeDescriptor | None:
    """Convert a descriptor or mapping, returning None if it is malformed."""
    if isinstance(value, DateRangeDescriptor):
        return value
    if isinstance(value, Mapping):
        try:
            return DateRangeDescriptor.from_mapping(value)
        except ValueError as e:
            _log.warning("descriptor_skipped", reason=str(e))
            return None
    _log.warning("descriptor_skipped", reason=f"unsupported {type(value).__name__}")
    return None


def well_formed_descriptors(
    ranges: Iterable[DescriptorLike] | None,
) -> Iterator[DateRangeDescriptor]:
    """Yield the usable descriptors of a collection, skipping malformed ones."""
    for item in ranges or ():
        descriptor = coerce_descriptor(item)
        if descriptor is None:
            continue
        problem = descriptor.problem()
        if problem is not None:
            _log.warning(
                "descriptor_skipped", type=descriptor.type.name, reason=problem
            )
            continue
        yield descriptor


def is_date_in_ranges(
    value: DayParameter,
    ranges: Iterable[DescriptorLike] | None,
) -> bool:
    """Check whether a day matches any of the given descriptors.

    Descriptors are evaluated in order and the first match wins. An empty
    or missing collection never matches, and malformed descriptors are
    skipped.

    Example:
        >>> day = CalendarDay(1987, 6, 17)
        >>> is_date_in_ranges(day, [DateRangeDescriptor.weekends()])
        False
    """
    if not ranges:
        return False

    day = to_calendar_day(value)
    return any(
        descriptor.matches(day) for descriptor in well_formed_descriptors(ranges)
    )
