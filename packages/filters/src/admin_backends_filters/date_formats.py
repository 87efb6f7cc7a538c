"""
Filter date format providers.

The admin UI describes its date inputs with a pattern made of ``dd``, ``mm``
and ``yy`` (or ``yyyy``) separated by any delimiter, e.g. ``"mm/dd/yy"``.
Which pattern applies depends on the user's locale, which is outside the
filter compiler; a :class:`DateFormatProvider` is injected instead.
"""

from __future__ import annotations

import datetime
import logging
from collections.abc import Callable, Mapping
from typing import Protocol, runtime_checkable

logger = logging.getLogger("admin_backends.filters")

DEFAULT_FILTER_DATE_FORMAT = "mm/dd/yy"


@runtime_checkable
class DateFormatProvider(Protocol):
    """Supplies the date pattern expected in filter inputs right now."""

    def filter_date_format(self) -> str: ...


class StaticDateFormat:
    """Always returns the same pattern."""

    def __init__(self, pattern: str = DEFAULT_FILTER_DATE_FORMAT) -> None:
        self._pattern = pattern

    def filter_date_format(self) -> str:
        return self._pattern

    def __repr__(self) -> str:
        return f"StaticDateFormat({self._pattern!r})"


class LocalizedDateFormat:
    """
    Looks the pattern up by the current locale.

    Falls back to the default locale's pattern, then to
    ``DEFAULT_FILTER_DATE_FORMAT`` when neither is configured.

    Usage::

        formats = LocalizedDateFormat(
            {"en": "mm/dd/yy", "fr": "dd/mm/yy"},
            locale_getter=lambda: request_locale.get(),
        )
    """

    def __init__(
        self,
        formats: Mapping[str, str],
        locale_getter: Callable[[], str | None],
        *,
        default_locale: str = "en",
    ) -> None:
        self._formats = dict(formats)
        self._locale_getter = locale_getter
        self._default_locale = default_locale

    def filter_date_format(self) -> str:
        locale = self._locale_getter()
        if locale and locale in self._formats:
            return self._formats[locale]
        return self._formats.get(self._default_locale, DEFAULT_FILTER_DATE_FORMAT)


def to_strptime_format(pattern: str) -> str:
    """Translate a ``dd``/``mm``/``yy`` pattern into a ``strptime`` format."""
    return (
        pattern.replace("dd", "%d")
        .replace("mm", "%m")
        .replace("yyyy", "%Y")
        .replace("yy", "%Y")
    )


def parse_filter_date(
    value: object,
    provider: DateFormatProvider | None = None,
) -> datetime.date | None:
    """
    Parse a filter input into a date.

    Returns ``None`` for blank or unparsable input; malformed dates are
    ordinary user input and never raise.
    """
    if isinstance(value, datetime.datetime):
        return value.date()
    if isinstance(value, datetime.date):
        return value
    if not isinstance(value, str) or not value.strip():
        return None
    pattern = (provider or StaticDateFormat()).filter_date_format()
    try:
        return datetime.datetime.strptime(
            value.strip(), to_strptime_format(pattern)
        ).date()
    except ValueError:
        logger.debug("Ignoring unparsable filter date %r (format %r)", value, pattern)
        return None
