"""Registry configuration."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from admin_backends_filters.date_formats import DateFormatProvider, StaticDateFormat

from .naming import class_path


@dataclass(frozen=True)
class AdminBackendsConfig:
    """
    Which models the admin manages, and how filter dates are written.

    Attributes:
        included_models: Model classes or fully-qualified class names, in
            display order.
        excluded_models: Names (or classes) removed from ``included_models``.
        date_format: Pattern provider for date filter inputs.
        quiet: Suppress diagnostics about models that fail to load
            (set in test suites).
    """

    included_models: tuple[str | type[Any], ...] = ()
    excluded_models: tuple[str | type[Any], ...] = ()
    date_format: DateFormatProvider = field(default_factory=StaticDateFormat)
    quiet: bool = False

    def models_pool(self) -> list[str | type[Any]]:
        """Included models minus excluded ones, order preserved."""
        excluded = {_name_of(m) for m in self.excluded_models}
        return [m for m in self.included_models if _name_of(m) not in excluded]


def _name_of(model: str | type[Any]) -> str:
    return model if isinstance(model, str) else class_path(model)
