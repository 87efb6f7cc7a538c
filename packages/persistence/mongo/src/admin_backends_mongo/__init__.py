"""MongoDB (document) backend for admin-backends.

Provides the ``Document`` base class and its relation declarations, the
``BackendAdapter`` for document classes, and the statement builder that
compiles filter rows into MongoDB query documents.
"""

from __future__ import annotations

from .adapter import MongoAdapter
from .connection import MongoConnectionManager
from .document import BelongsTo, Document, HasMany, HasOne, Relation
from .exceptions import MongoAdapterError, MongoConnectionError, MongoMappingError
from .model_mapper import MongoDocumentMapper
from .statement_builder import MongoStatementBuilder

__all__ = [
    "MongoAdapter",
    "MongoConnectionManager",
    "MongoStatementBuilder",
    "MongoDocumentMapper",
    # Documents
    "Document",
    "Relation",
    "HasOne",
    "HasMany",
    "BelongsTo",
    # Exceptions
    "MongoAdapterError",
    "MongoConnectionError",
    "MongoMappingError",
]
