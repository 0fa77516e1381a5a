"""Abstract backend protocol for materialising calendar days."""

from collections.abc import Iterable
from typing import Any, Protocol, TypeVar

from calday.descriptors import DescriptorLike
from calday.model import CalendarDay, DayParameter

S = TypeVar("S", covariant=True)


class Backend(Protocol[S]):
    """Protocol defining the column operations a backend provides."""

    def from_days(self, days: Iterable[DayParameter], name: str = "date") -> S:
        """Materialise days into a date column."""
        ...

    def to_days(self, series: Any) -> list[CalendarDay]:
        """Convert a date column back to CalendarDay values, dropping nulls."""
        ...

    def in_ranges(
        self,
        series: Any,
        ranges: Iterable[DescriptorLike] | None,
        name: str = "in_ranges",
    ) -> S:
        """Element-wise ``is_date_in_ranges`` over a date column.

        Args:
            series: Date column, as produced by ``from_days``.
            ranges: Descriptors to test against. Malformed descriptors are
                skipped; an empty collection yields an all-False column.
            name: Name of the returned boolean column.
        """
        ...
