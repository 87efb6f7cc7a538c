"""SQLAlchemy (relational) backend for admin-backends.

Provides the ``BackendAdapter`` for mapped ORM classes, the statement
builder compiling filter rows into ``ColumnElement`` predicates, and the
archive default scope bypassed by unscoped child traversal.
"""

from __future__ import annotations

from .adapter import SQLAlchemyAdapter
from .exceptions import DetachedInstanceError, SQLAlchemyAdapterError
from .mixins import ArchivableModelMixin
from .scopes import INCLUDE_ARCHIVED, install_archive_scope, uninstall_archive_scope
from .statement_builder import SQLAlchemyStatementBuilder

__all__ = [
    "SQLAlchemyAdapter",
    "SQLAlchemyStatementBuilder",
    # Default scope
    "ArchivableModelMixin",
    "INCLUDE_ARCHIVED",
    "install_archive_scope",
    "uninstall_archive_scope",
    # Exceptions
    "SQLAlchemyAdapterError",
    "DetachedInstanceError",
]
