"""
Statement builder: one filter row -> one backend predicate.

A filter row is the loosely-typed tuple ``(column, column_type, operator,
value)`` posted by the admin UI.  :class:`StatementBuilder` owns the
backend-independent part of the translation:

1. the ``_discard`` escape hatch (disabled filter rows),
2. unary shortcuts (``_blank``, ``_null``, ...) that win over everything,
3. type dispatch, delegating scalar types to the backend and resolving
   ``date``/``datetime``/``timestamp`` through :class:`FilteringDuration`.

Backends subclass it and supply ``build_statement_for_type``,
``unary_operators`` and ``range_filter``.  The predicate type is opaque
here: a SQLAlchemy ``ColumnElement`` for one backend, a MongoDB query
document for another.
"""

from __future__ import annotations

import datetime
import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping
from enum import Enum
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from .duration import Duration, FilteringDuration
from .exceptions import BackendContractError
from .operators import DISCARD, TIME_TYPES, ColumnType, FilterOperator
from .values import numeric_from_string

if TYPE_CHECKING:
    from .date_formats import DateFormatProvider
    from .duration import Clock

logger = logging.getLogger("admin_backends.filters")

P = TypeVar("P")


def _plain(value: Any) -> Any:
    """Unwrap str-enums so lookups and comparisons use the raw keyword."""
    return value.value if isinstance(value, Enum) else value


def _coerce_type(column_type: Any) -> Any:
    column_type = _plain(column_type)
    try:
        return ColumnType(column_type)
    except ValueError:
        return column_type


class StatementBuilder(ABC, Generic[P]):
    """Base class for backend statement builders."""

    def __init__(
        self,
        column: Any,
        column_type: str | ColumnType,
        operator: str | None,
        value: Any,
        *,
        date_format: DateFormatProvider | None = None,
        today: Clock | None = None,
    ) -> None:
        self._column = column
        self._type = _coerce_type(column_type)
        self._operator = _plain(operator)
        self._value = _plain(value)
        self._date_format = date_format
        self._today = today

    # -- public API ----------------------------------------------------------

    def to_statement(self) -> P | None:
        """Return the predicate for this filter row, or ``None`` to skip it."""
        if DISCARD in (self._operator, self._value):
            return None

        unary = self._unary_statement()
        if unary is not None:
            return unary
        return self.build_statement_for_type_generic()

    # -- required backend overrides ------------------------------------------

    @abstractmethod
    def build_statement_for_type(self) -> P | None:
        """Scalar types (boolean, numbers, strings, enums, ...); ``None`` declines."""
        raise BackendContractError("build_statement_for_type", type(self))

    @property
    @abstractmethod
    def unary_operators(self) -> Mapping[str, P]:
        """Operator-or-value keyword -> ready-made predicate."""
        raise BackendContractError("unary_operators", type(self))

    @abstractmethod
    def range_filter(self, min_value: Any, max_value: Any) -> P | None:
        """Inclusive range; a ``None`` bound leaves that side open."""
        raise BackendContractError("range_filter", type(self))

    # -- overridable hooks ---------------------------------------------------

    def column_for_value(self, value: Any) -> P | None:
        """Single-value comparison.  Backends refine this per operator."""
        return self.range_filter(value, value)

    # -- shared building blocks ----------------------------------------------

    def get_filtering_duration(self) -> Duration:
        return FilteringDuration(
            self._operator,
            self._value,
            date_format=self._date_format,
            today=self._today,
        ).get_duration()

    def build_statement_for_type_generic(self) -> P | None:
        statement = self.build_statement_for_type()
        if statement is not None:
            return statement
        if self._type == ColumnType.DATE:
            return self.build_statement_for_date()
        if self._type in TIME_TYPES:
            return self.build_statement_for_datetime_or_timestamp()
        return None

    def build_statement_for_integer_decimal_or_float(self) -> P | None:
        if isinstance(self._value, list | tuple):
            parsed = [numeric_from_string(v, self._type) for v in self._value]
            parsed += [None] * (3 - len(parsed))
            val, range_begin, range_end = parsed[:3]
            if self._operator == FilterOperator.BETWEEN:
                return self._range(range_begin, range_end)
            if val is not None:
                return self.column_for_value(val)
            logger.debug("Dropping numeric filter on %s: %r", self._column, self._value)
            return None

        val = numeric_from_string(self._value, self._type)
        if val is None:
            logger.debug("Dropping numeric filter on %s: %r", self._column, self._value)
            return None
        return self.column_for_value(val)

    def build_statement_for_date(self) -> P | None:
        return self._range(*self.get_filtering_duration())

    def build_statement_for_datetime_or_timestamp(self) -> P | None:
        start_date, end_date = self.get_filtering_duration()
        start = (
            datetime.datetime.combine(start_date, datetime.time.min)
            if start_date is not None
            else None
        )
        end = (
            datetime.datetime.combine(end_date, datetime.time.max)
            if end_date is not None
            else None
        )
        return self._range(start, end)

    # -- internals -----------------------------------------------------------

    def _unary_statement(self) -> P | None:
        operators = self.unary_operators
        for key in (self._operator, self._value):
            if isinstance(key, str) and key in operators:
                return operators[key]
        return None

    def _range(self, min_value: Any, max_value: Any) -> P | None:
        if min_value is None and max_value is None:
            return None
        return self.range_filter(min_value, max_value)


def compile_filter(
    builder_cls: type[StatementBuilder[P]],
    column: Any,
    column_type: str | ColumnType,
    operator: str | None,
    value: Any,
    **options: Any,
) -> P | None:
    """Build the predicate for one filter row with *builder_cls*."""
    return builder_cls(column, column_type, operator, value, **options).to_statement()
