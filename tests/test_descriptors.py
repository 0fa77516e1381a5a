"""Tests for date range descriptors."""

from datetime import datetime

import pytest
from structlog.testing import capture_logs

from calday import (
    CalendarDay,
    DateRangeDescriptor,
    DateRangeType,
    coerce_descriptor,
    is_date_in_ranges,
)


@pytest.fixture
def start():
    """July 17th 1987, a Friday."""
    return CalendarDay(1987, 6, 17)


class TestIsDateInRanges:
    """Test is_date_in_ranges with each descriptor type."""

    def test_after(self, start):
        """AFTER matches days strictly later than the reference."""
        day_before = start.add("day", -1).native

        assert is_date_in_ranges(start, [DateRangeDescriptor.after(day_before)])
        assert not is_date_in_ranges(start, [DateRangeDescriptor.after(start)])

    def test_before(self, start):
        """BEFORE matches days strictly earlier than the reference."""
        day_after = start.add("day", 1).native

        assert is_date_in_ranges(start, [DateRangeDescriptor.before(day_after)])
        assert not is_date_in_ranges(start, [DateRangeDescriptor.before(start)])

    def test_between(self, start):
        """BETWEEN matches days inside the span."""
        ranges = [
            DateRangeDescriptor.between(CalendarDay(1987, 6, 10), CalendarDay(1987, 6, 24))
        ]

        assert is_date_in_ranges(start, ranges)

    def test_between_bounds_are_inclusive(self, start):
        """Both BETWEEN bounds match."""
        ranges = [DateRangeDescriptor.between(start, start.add("week", 1))]

        assert is_date_in_ranges(start, ranges)
        assert is_date_in_ranges(start.add("week", 1), ranges)
        assert not is_date_in_ranges(start.add("day", 8), ranges)

    def test_between_bounds_order_independent(self, start):
        """Reversed BETWEEN bounds give the same result."""
        begin, end = start.add("week", -1).native, start.add("week", 1).native

        assert is_date_in_ranges(start, [DateRangeDescriptor.between(end, begin)])
        assert not is_date_in_ranges(
            start.add("day", 8), [DateRangeDescriptor.between(end, begin)]
        )

    def test_specific(self, start):
        """SPECIFIC matches listed days, ignoring time of day."""
        ranges = [DateRangeDescriptor.specific([datetime(1987, 7, 17, 15, 30), datetime(1987, 7, 20)])]

        assert is_date_in_ranges(start, ranges)
        assert not is_date_in_ranges(start.add("day", 1), ranges)

    def test_specific_empty(self, start):
        """An empty SPECIFIC list never matches."""
        assert not is_date_in_ranges(start, [DateRangeDescriptor.specific([])])

    def test_weekdays(self, start):
        """WEEKDAYS matches Monday to Friday."""
        assert is_date_in_ranges(start, [DateRangeDescriptor.weekdays()])
        assert not is_date_in_ranges(start.add("day", 1), [DateRangeDescriptor.weekdays()])

    def test_weekends(self, start):
        """WEEKENDS matches Saturday and Sunday."""
        assert not is_date_in_ranges(start, [DateRangeDescriptor.weekends()])
        assert is_date_in_ranges(start.add("day", 1), [DateRangeDescriptor.weekends()])
        assert is_date_in_ranges(start.add("day", 2), [DateRangeDescriptor.weekends()])

    def test_empty_collection(self, start):
        """No descriptors never match."""
        assert not is_date_in_ranges(start, [])
        assert not is_date_in_ranges(start, None)

    def test_any_descriptor_matches(self, start):
        """Descriptors are combined with logical OR."""
        ranges = [
            DateRangeDescriptor.weekends(),
            DateRangeDescriptor.specific([start]),
        ]

        assert is_date_in_ranges(start, ranges)

    def test_stops_at_first_match(self, start):
        """Later descriptors are not evaluated after a match."""
        ranges = iter([DateRangeDescriptor.weekdays(), DateRangeDescriptor.weekends()])

        assert is_date_in_ranges(start, ranges)
        assert next(ranges) == DateRangeDescriptor.weekends()

    def test_native_day(self):
        """The tested day may be a native datetime."""
        assert is_date_in_ranges(datetime(1987, 7, 18, 22), [DateRangeDescriptor.weekends()])

    def test_mapping_descriptors(self, start):
        """Plain mappings are accepted, including the dateRange alias."""
        ranges = [
            {"type": DateRangeType.BEFORE, "date_range": [datetime(1987, 1, 1)]},
            {"type": 3, "dateRange": [datetime(1987, 7, 17)]},
        ]

        assert is_date_in_ranges(start, ranges)

    def test_malformed_descriptors_do_not_match(self, start):
        """Descriptors missing bounds or with unknown types are skipped."""
        ranges = [
            DateRangeDescriptor(DateRangeType.AFTER),
            DateRangeDescriptor(DateRangeType.BETWEEN, ()),
            {"type": 42},
            {"date_range": [datetime(1987, 7, 17)]},
            "weekdays",
        ]

        assert not is_date_in_ranges(start, ranges)  # type: ignore[arg-type]

    def test_string_in_specific_does_not_match(self, start):
        """An ISO string reference day is skipped instead of raising."""
        ranges = [{"type": 3, "date_range": ["1987-07-17"]}]

        with capture_logs() as logs:
            assert not is_date_in_ranges(start, ranges)

        assert logs[0]["event"] == "descriptor_skipped"
        assert logs[0]["reason"] == "unsupported bound str"

    def test_between_with_none_bounds_does_not_match(self, start):
        """BETWEEN with None bounds is skipped instead of raising."""
        descriptor = DateRangeDescriptor(2, (None, None))  # type: ignore[arg-type]

        assert not is_date_in_ranges(start, [descriptor])
        assert not descriptor.matches(start)

    def test_malformed_descriptor_does_not_hide_later_match(self, start):
        """A skipped descriptor does not stop evaluation of the rest."""
        ranges = [DateRangeDescriptor(DateRangeType.BEFORE), DateRangeDescriptor.weekdays()]

        assert is_date_in_ranges(start, ranges)

    def test_inputs_are_not_mutated(self, start):
        """The descriptor collection is left untouched."""
        ranges = [DateRangeDescriptor.specific([start])]
        snapshot = list(ranges)

        is_date_in_ranges(start, ranges)

        assert ranges == snapshot


class TestDateRangeDescriptor:
    """Test descriptor construction helpers."""

    def test_constructors(self, start):
        """Named constructors set the type and reference days."""
        assert DateRangeDescriptor.after(start).type == DateRangeType.AFTER
        assert DateRangeDescriptor.before(start).date_range == (start,)
        assert DateRangeDescriptor.between(start, start).type == DateRangeType.BETWEEN
        assert DateRangeDescriptor.weekdays().date_range == ()

    def test_type_is_coerced(self, start):
        """Integer types are converted to DateRangeType."""
        descriptor = DateRangeDescriptor(2, [start, start])

        assert descriptor.type is DateRangeType.BETWEEN
        assert descriptor.date_range == (start, start)

    def test_unknown_type_raises(self):
        """Constructing with an unknown type is a ValueError."""
        with pytest.raises(ValueError):
            DateRangeDescriptor(9)

    def test_well_formed(self, start):
        """Bounded types need at least one reference day."""
        assert DateRangeDescriptor.weekends().well_formed
        assert DateRangeDescriptor.specific([]).well_formed
        assert not DateRangeDescriptor(DateRangeType.BEFORE).well_formed

    def test_problem(self, start):
        """problem names why a descriptor cannot be evaluated."""
        assert DateRangeDescriptor.after(start).problem() is None
        assert DateRangeDescriptor(DateRangeType.AFTER).problem() == "missing bounds"
        assert DateRangeDescriptor.between(start, None).problem() == (  # type: ignore[arg-type]
            "unsupported bound NoneType"
        )

    def test_matches(self, start):
        """matches evaluates a single descriptor."""
        assert DateRangeDescriptor.specific([start]).matches(start.native)
        assert not DateRangeDescriptor(DateRangeType.AFTER).matches(start)

    def test_from_mapping_requires_type(self):
        """Mappings without a type are rejected."""
        with pytest.raises(ValueError, match="missing 'type'"):
            DateRangeDescriptor.from_mapping({"date_range": []})

    def test_coerce_descriptor(self, start):
        """coerce_descriptor passes descriptors through and drops bad input."""
        descriptor = DateRangeDescriptor.weekdays()

        assert coerce_descriptor(descriptor) is descriptor
        assert coerce_descriptor({"type": "nope"}) is None
        assert coerce_descriptor(42) is None  # type: ignore[arg-type]
