"""
SQLAlchemy statement builder.

Compiles one admin filter row into a ``ColumnElement[bool]`` for the given
column expression (an ORM attribute such as ``User.name`` or a Core
``Column``).
"""

from __future__ import annotations

import operator as op_module
from collections.abc import Callable, Mapping
from typing import Any, cast

from sqlalchemy import ColumnElement, and_, false, func, or_, true

from admin_backends_filters.builder import StatementBuilder
from admin_backends_filters.operators import (
    NUMERIC_TYPES,
    TEXT_TYPES,
    ColumnType,
    FilterOperator,
    UnaryOperator,
)
from admin_backends_filters.values import (
    integer_from_string,
    is_blank,
    parse_boolean_keyword,
    wrap_list,
)

_COMPARISONS: dict[str, Callable[[Any, Any], Any]] = {
    FilterOperator.EQ.value: op_module.eq,
    FilterOperator.NE.value: op_module.ne,
    FilterOperator.GT.value: op_module.gt,
    FilterOperator.GE.value: op_module.ge,
    FilterOperator.LT.value: op_module.lt,
    FilterOperator.LE.value: op_module.le,
}


class SQLAlchemyStatementBuilder(StatementBuilder[ColumnElement[bool]]):
    @property
    def unary_operators(self) -> Mapping[str, ColumnElement[bool]]:
        column = self._column
        return {
            UnaryOperator.BLANK.value: or_(column.is_(None), column == ""),
            UnaryOperator.PRESENT.value: and_(column.is_not(None), column != ""),
            UnaryOperator.NULL.value: column.is_(None),
            UnaryOperator.NOT_NULL.value: column.is_not(None),
            UnaryOperator.EMPTY.value: column == "",
            UnaryOperator.NOT_EMPTY.value: column != "",
        }

    def build_statement_for_type(self) -> ColumnElement[bool] | None:
        if self._type == ColumnType.BOOLEAN:
            return self.build_statement_for_boolean()
        if self._type in NUMERIC_TYPES:
            return self.build_statement_for_integer_decimal_or_float()
        if self._type in TEXT_TYPES:
            return self.build_statement_for_string_or_text()
        if self._type == ColumnType.ENUM:
            return self.build_statement_for_enum()
        if self._type == ColumnType.BELONGS_TO_ASSOCIATION:
            return self.build_statement_for_belongs_to_association()
        return None

    def range_filter(
        self, min_value: Any, max_value: Any
    ) -> ColumnElement[bool] | None:
        column = self._column
        if min_value is not None and max_value is not None:
            return cast("ColumnElement[bool]", column.between(min_value, max_value))
        if min_value is not None:
            return cast("ColumnElement[bool]", column >= min_value)
        if max_value is not None:
            return cast("ColumnElement[bool]", column <= max_value)
        return None

    def column_for_value(self, value: Any) -> ColumnElement[bool]:
        compare = _COMPARISONS.get(self._operator or "", op_module.eq)
        return cast("ColumnElement[bool]", compare(self._column, value))

    # -- scalar types --------------------------------------------------------

    def build_statement_for_boolean(self) -> ColumnElement[bool] | None:
        flag = parse_boolean_keyword(self._value)
        if flag is False:
            return or_(self._column.is_(None), self._column == false())
        if flag is True:
            return cast("ColumnElement[bool]", self._column == true())
        return None

    def build_statement_for_string_or_text(self) -> ColumnElement[bool] | None:
        if not isinstance(self._value, str) or is_blank(self._value):
            return None
        value = self._value
        column = self._column
        operator = self._operator or FilterOperator.DEFAULT.value
        if operator in (FilterOperator.DEFAULT, FilterOperator.LIKE):
            return cast("ColumnElement[bool]", column.icontains(value, autoescape=True))
        if operator == FilterOperator.STARTS_WITH:
            return cast(
                "ColumnElement[bool]", column.istartswith(value, autoescape=True)
            )
        if operator == FilterOperator.ENDS_WITH:
            return cast("ColumnElement[bool]", column.iendswith(value, autoescape=True))
        if operator in (FilterOperator.IS, FilterOperator.EQ):
            return cast("ColumnElement[bool]", func.lower(column) == value.lower())
        return None

    def build_statement_for_enum(self) -> ColumnElement[bool] | None:
        if is_blank(self._value):
            return None
        return cast("ColumnElement[bool]", self._column.in_(wrap_list(self._value)))

    def build_statement_for_belongs_to_association(self) -> ColumnElement[bool] | None:
        if is_blank(self._value):
            return None
        key = integer_from_string(self._value)
        if key is None:
            return None
        return cast("ColumnElement[bool]", self._column == key)
