"""
Filtering duration: operator + raw value -> ``(start, end)`` date pair.

Every operator resolves to a two-element range, including point-in-time
ones, so that date filters always reach ``range_filter`` the same way.
"""

from __future__ import annotations

import datetime
from collections.abc import Callable, Sequence
from typing import Any, NamedTuple

from .date_formats import DateFormatProvider, parse_filter_date
from .operators import FilterOperator

Clock = Callable[[], datetime.date]


class Duration(NamedTuple):
    """Inclusive date range; a ``None`` endpoint could not be resolved."""

    start: datetime.date | None
    end: datetime.date | None

    @property
    def is_resolved(self) -> bool:
        return self.start is not None or self.end is not None


UNRESOLVED_DURATION = Duration(None, None)


def beginning_of_week(day: datetime.date) -> datetime.date:
    """Monday of the week containing *day*."""
    return day - datetime.timedelta(days=day.weekday())


def end_of_week(day: datetime.date) -> datetime.date:
    """Sunday of the week containing *day*."""
    return beginning_of_week(day) + datetime.timedelta(days=6)


class FilteringDuration:
    """Resolve a date filter into a :class:`Duration`."""

    def __init__(
        self,
        operator: str | None,
        value: Any,
        *,
        date_format: DateFormatProvider | None = None,
        today: Clock | None = None,
    ) -> None:
        self._operator = operator
        self._value = value
        self._date_format = date_format
        self._clock = today or datetime.date.today

    def get_duration(self) -> Duration:
        handlers: dict[str, Callable[[], Duration]] = {
            FilterOperator.BETWEEN.value: self.between,
            FilterOperator.TODAY.value: self.today,
            FilterOperator.YESTERDAY.value: self.yesterday,
            FilterOperator.THIS_WEEK.value: self.this_week,
            FilterOperator.LAST_WEEK.value: self.last_week,
        }
        operator = getattr(self._operator, "value", self._operator)
        return handlers.get(operator, self.default)()  # type: ignore[arg-type]

    def today(self) -> Duration:
        today = self._clock()
        return Duration(today, today)

    def yesterday(self) -> Duration:
        yesterday = self._clock() - datetime.timedelta(days=1)
        return Duration(yesterday, yesterday)

    def this_week(self) -> Duration:
        today = self._clock()
        return Duration(beginning_of_week(today), end_of_week(today))

    def last_week(self) -> Duration:
        week_ago = self._clock() - datetime.timedelta(weeks=1)
        return Duration(beginning_of_week(week_ago), end_of_week(week_ago))

    def between(self) -> Duration:
        # Widgets send [operator_placeholder, start, end]
        return Duration(self._convert_to_date(1), self._convert_to_date(2))

    def default(self) -> Duration:
        # Only the first element is used for single-value operators.
        value = self._value
        if isinstance(value, Sequence) and not isinstance(value, str):
            value = value[0] if value else None
        date = parse_filter_date(value, self._date_format)
        if date is None:
            return UNRESOLVED_DURATION
        return Duration(date, date)

    def _convert_to_date(self, index: int) -> datetime.date | None:
        value = self._value
        if not isinstance(value, Sequence) or isinstance(value, str):
            return None
        if index >= len(value):
            return None
        return parse_filter_date(value[index], self._date_format)


def resolve_duration(
    operator: str | None,
    value: Any,
    *,
    date_format: DateFormatProvider | None = None,
    today: Clock | None = None,
) -> Duration:
    """Shortcut for ``FilteringDuration(...).get_duration()``."""
    return FilteringDuration(
        operator, value, date_format=date_format, today=today
    ).get_duration()
