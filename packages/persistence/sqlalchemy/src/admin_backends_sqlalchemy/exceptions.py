"""Exceptions for the SQLAlchemy adapter."""

from __future__ import annotations

from admin_backends_core.primitives.exceptions import PersistenceError


class SQLAlchemyAdapterError(PersistenceError):
    """Base exception for all SQLAlchemy adapter errors."""


class DetachedInstanceError(SQLAlchemyAdapterError):
    """Raised when children are requested for an instance with no session."""

    def __init__(self, instance: object) -> None:
        super().__init__(
            f"{type(instance).__name__} instance is not bound to a Session and "
            "the adapter has no session_factory"
        )


__all__: list[str] = [
    "DetachedInstanceError",
    "SQLAlchemyAdapterError",
]
