"""MongoDB adapter exceptions."""

from __future__ import annotations

from admin_backends_core.primitives.exceptions import PersistenceError


class MongoAdapterError(PersistenceError):
    """Base for MongoDB adapter errors."""


class MongoConnectionError(MongoAdapterError):
    """Raised when no database is available or connecting fails."""


class MongoMappingError(MongoAdapterError):
    """Raised when a stored document cannot be turned back into a document class."""
