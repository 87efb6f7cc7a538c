from .builder import StatementBuilder, compile_filter
from .date_formats import (
    DEFAULT_FILTER_DATE_FORMAT,
    DateFormatProvider,
    LocalizedDateFormat,
    StaticDateFormat,
    parse_filter_date,
    to_strptime_format,
)
from .duration import (
    UNRESOLVED_DURATION,
    Duration,
    FilteringDuration,
    beginning_of_week,
    end_of_week,
    resolve_duration,
)
from .exceptions import BackendContractError, FilterError
from .operators import DISCARD, ColumnType, FilterOperator, UnaryOperator
from .values import (
    integer_from_string,
    is_blank,
    numeric_from_string,
    parse_boolean_keyword,
    wrap_list,
)

__all__ = [
    # Statement builder
    "StatementBuilder",
    "compile_filter",
    # Keywords
    "DISCARD",
    "ColumnType",
    "FilterOperator",
    "UnaryOperator",
    # Durations
    "Duration",
    "FilteringDuration",
    "UNRESOLVED_DURATION",
    "beginning_of_week",
    "end_of_week",
    "resolve_duration",
    # Date formats
    "DEFAULT_FILTER_DATE_FORMAT",
    "DateFormatProvider",
    "LocalizedDateFormat",
    "StaticDateFormat",
    "parse_filter_date",
    "to_strptime_format",
    # Exceptions
    "FilterError",
    "BackendContractError",
    # Value helpers
    "integer_from_string",
    "is_blank",
    "numeric_from_string",
    "parse_boolean_keyword",
    "wrap_list",
]
