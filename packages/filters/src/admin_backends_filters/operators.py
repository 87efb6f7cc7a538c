from enum import Enum

# Value or operator that disables a filter row entirely.
DISCARD = "_discard"


class FilterOperator(str, Enum):
    """Operator keywords sent by the admin filter widgets."""

    # Generic
    DEFAULT = "default"
    IS = "is"
    EQ = "="
    NE = "!="
    GT = ">"
    LT = "<"
    GE = ">="
    LE = "<="
    BETWEEN = "between"

    # String matching
    LIKE = "like"
    STARTS_WITH = "starts_with"
    ENDS_WITH = "ends_with"

    # Relative dates
    TODAY = "today"
    YESTERDAY = "yesterday"
    THIS_WEEK = "this_week"
    LAST_WEEK = "last_week"


class UnaryOperator(str, Enum):
    """Keywords that need no comparison value (accepted as operator or value)."""

    BLANK = "_blank"
    PRESENT = "_present"
    NULL = "_null"
    NOT_NULL = "_not_null"
    EMPTY = "_empty"
    NOT_EMPTY = "_not_empty"


class ColumnType(str, Enum):
    """Semantic column types understood by the statement builders."""

    INTEGER = "integer"
    DECIMAL = "decimal"
    FLOAT = "float"
    STRING = "string"
    TEXT = "text"
    BOOLEAN = "boolean"
    ENUM = "enum"
    DATE = "date"
    DATETIME = "datetime"
    TIMESTAMP = "timestamp"
    BELONGS_TO_ASSOCIATION = "belongs_to_association"
    OBJECT_ID = "object_id"


NUMERIC_TYPES = frozenset({ColumnType.INTEGER, ColumnType.DECIMAL, ColumnType.FLOAT})
TEXT_TYPES = frozenset({ColumnType.STRING, ColumnType.TEXT})
TIME_TYPES = frozenset({ColumnType.DATETIME, ColumnType.TIMESTAMP})
