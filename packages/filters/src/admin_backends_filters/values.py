"""
Parsing helpers for raw filter values.

Filter inputs arrive as strings from HTML forms.  A numeric value is only
accepted when it survives a parse/format round trip, so ``"12abc"``,
``" 12"`` or ``"1e3"`` never silently turn into a number.
"""

from __future__ import annotations

import math
from typing import Any

from .operators import ColumnType

TRUE_KEYWORDS = ("true", "t", "1")
FALSE_KEYWORDS = ("false", "f", "0")


def _round_trips_as_int(value: str) -> bool:
    try:
        return str(int(value)) == value
    except ValueError:
        return False


def _round_trips_as_float(value: str) -> bool:
    try:
        number = float(value)
    except ValueError:
        return False
    return math.isfinite(number) and str(number) == value


def numeric_from_string(value: Any, column_type: str) -> int | float | None:
    """
    Parse *value* for an integer/decimal/float column.

    Returns ``None`` when the value does not round-trip.  Integer columns
    receive ``int`` (truncating an accepted float literal), the others
    ``float``.
    """
    if not isinstance(value, str):
        return None
    as_int = _round_trips_as_int(value)
    if not as_int and not _round_trips_as_float(value):
        return None
    if column_type == ColumnType.INTEGER:
        return int(value) if as_int else int(float(value))
    return float(value)


def integer_from_string(value: Any) -> int | None:
    """Parse a foreign-key style integer, round trip required."""
    if isinstance(value, str) and _round_trips_as_int(value):
        return int(value)
    return None


def parse_boolean_keyword(value: Any) -> bool | None:
    """Map ``true/t/1`` and ``false/f/0`` to booleans, anything else to ``None``."""
    if not isinstance(value, str):
        return None
    if value in TRUE_KEYWORDS:
        return True
    if value in FALSE_KEYWORDS:
        return False
    return None


def is_blank(value: Any) -> bool:
    """``None``, empty/whitespace strings and empty collections are blank."""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, list | tuple | set | dict):
        return len(value) == 0
    return False


def wrap_list(value: Any) -> list[Any]:
    """Wrap a scalar in a list; lists/tuples/sets are copied, ``None`` is empty."""
    if value is None:
        return []
    if isinstance(value, list | tuple | set):
        return list(value)
    return [value]
