"""
MongoDB statement builder.

Compiles one admin filter row into a query document fragment for a field
name, e.g. ``{"title": {"$regex": "draft", "$options": "i"}}``.
"""

from __future__ import annotations

import datetime
import re
from collections.abc import Mapping
from typing import Any

from bson import ObjectId

from admin_backends_filters.builder import StatementBuilder
from admin_backends_filters.operators import (
    NUMERIC_TYPES,
    TEXT_TYPES,
    ColumnType,
    FilterOperator,
    UnaryOperator,
)
from admin_backends_filters.values import is_blank, parse_boolean_keyword, wrap_list

Query = dict[str, Any]

_MONGO_OP_MAP: dict[str, str] = {
    FilterOperator.EQ.value: "$eq",
    FilterOperator.NE.value: "$ne",
    FilterOperator.GT.value: "$gt",
    FilterOperator.GE.value: "$gte",
    FilterOperator.LT.value: "$lt",
    FilterOperator.LE.value: "$lte",
}

_REGEX_TEMPLATES: dict[str, str] = {
    FilterOperator.DEFAULT.value: "{}",
    FilterOperator.LIKE.value: "{}",
    FilterOperator.STARTS_WITH.value: "^{}",
    FilterOperator.ENDS_WITH.value: "{}$",
    FilterOperator.IS.value: "^{}$",
    FilterOperator.EQ.value: "^{}$",
}


class MongoStatementBuilder(StatementBuilder[Query]):
    @property
    def unary_operators(self) -> Mapping[str, Query]:
        field = self._column
        return {
            UnaryOperator.BLANK.value: {field: {"$in": [None, ""]}},
            UnaryOperator.PRESENT.value: {field: {"$nin": [None, ""]}},
            UnaryOperator.NULL.value: {field: None},
            UnaryOperator.NOT_NULL.value: {field: {"$ne": None}},
            UnaryOperator.EMPTY.value: {field: ""},
            UnaryOperator.NOT_EMPTY.value: {field: {"$ne": ""}},
        }

    def build_statement_for_type(self) -> Query | None:
        if self._type == ColumnType.BOOLEAN:
            return self.build_statement_for_boolean()
        if self._type in NUMERIC_TYPES:
            return self.build_statement_for_integer_decimal_or_float()
        if self._type in TEXT_TYPES:
            return self.build_statement_for_string_or_text()
        if self._type == ColumnType.ENUM:
            return self.build_statement_for_enum()
        if self._type in (ColumnType.BELONGS_TO_ASSOCIATION, ColumnType.OBJECT_ID):
            return self.build_statement_for_object_id()
        return None

    def range_filter(self, min_value: Any, max_value: Any) -> Query | None:
        bounds: dict[str, Any] = {}
        if min_value is not None:
            bounds["$gte"] = min_value
        if max_value is not None:
            bounds["$lte"] = max_value
        return {self._column: bounds} if bounds else None

    def column_for_value(self, value: Any) -> Query:
        mongo_op = _MONGO_OP_MAP.get(self._operator or "", "$eq")
        return {self._column: {mongo_op: value}}

    def build_statement_for_date(self) -> Query | None:
        # BSON has no date type; date fields are stored as midnight datetimes.
        start, end = self.get_filtering_duration()
        return self._range(_midnight(start), _midnight(end))

    # -- scalar types --------------------------------------------------------

    def build_statement_for_boolean(self) -> Query | None:
        flag = parse_boolean_keyword(self._value)
        if flag is False:
            return {self._column: {"$in": [False, None]}}
        if flag is True:
            return {self._column: True}
        return None

    def build_statement_for_string_or_text(self) -> Query | None:
        if not isinstance(self._value, str) or is_blank(self._value):
            return None
        template = _REGEX_TEMPLATES.get(
            self._operator or FilterOperator.DEFAULT.value
        )
        if template is None:
            return None
        pattern = template.format(re.escape(self._value))
        return {self._column: {"$regex": pattern, "$options": "i"}}

    def build_statement_for_enum(self) -> Query | None:
        if is_blank(self._value):
            return None
        return {self._column: {"$in": wrap_list(self._value)}}

    def build_statement_for_object_id(self) -> Query | None:
        if not isinstance(self._value, str) or not ObjectId.is_valid(self._value):
            return None
        return {self._column: ObjectId(self._value)}


def _midnight(day: datetime.date | None) -> datetime.datetime | None:
    if day is None:
        return None
    return datetime.datetime.combine(day, datetime.time.min)

