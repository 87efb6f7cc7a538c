"""Document backend adapter for :class:`Document` subclasses."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from typing import TYPE_CHECKING, Any

from admin_backends_core.associations import Association, AssociationKind
from admin_backends_core.naming import class_path, import_string, underscore
from admin_backends_core.ports.adapter import AdapterKind, BackendAdapter
from admin_backends_filters.builder import compile_filter

from .document import BelongsTo, Document, Relation
from .exceptions import MongoConnectionError
from .model_mapper import MongoDocumentMapper
from .statement_builder import MongoStatementBuilder

if TYPE_CHECKING:
    from pymongo.collection import Collection
    from pymongo.cursor import Cursor
    from pymongo.database import Database

    from admin_backends_filters.date_formats import DateFormatProvider
    from admin_backends_filters.duration import Clock

logger = logging.getLogger("admin_backends.mongo")


class MongoAdapter(BackendAdapter):
    """
    Args:
        database: PyMongo database used for queries and child traversal.
        database_factory: Alternative to *database*, called on each access
            (e.g. ``MongoConnectionManager(...).database``).
        statement_builder: Builder class for filter rows.
        date_format: Date pattern provider for date filters.
        today: Clock for relative date filters.
    """

    def __init__(
        self,
        database: Database[Any] | None = None,
        *,
        database_factory: Callable[[], Database[Any]] | None = None,
        statement_builder: type[MongoStatementBuilder] = MongoStatementBuilder,
        date_format: DateFormatProvider | None = None,
        today: Clock | None = None,
    ) -> None:
        self._database = database
        self._database_factory = database_factory
        self._statement_builder = statement_builder
        self._date_format = date_format
        self._today = today

    @property
    def kind(self) -> AdapterKind:
        return AdapterKind.DOCUMENT

    def supports(self, cls: type[Any]) -> bool:
        return (
            issubclass(cls, Document) and cls is not Document and not cls.is_abstract()
        )

    # -- associations --------------------------------------------------------

    def associations(self, cls: type[Any]) -> list[Association]:
        owner = class_path(cls)
        result = []
        for relation in cls.__relations__:
            kind = relation.kind
            if isinstance(relation, BelongsTo) and relation.polymorphic:
                kind = AssociationKind.POLYMORPHIC_BELONGS_TO
            result.append(
                Association(
                    name=relation.name,
                    kind=kind,
                    owner_name=owner,
                    target_class_name=relation.target_name(cls),
                    as_=relation.as_,
                    foreign_key=self._foreign_key(cls, relation),
                )
            )
        return result

    @staticmethod
    def _foreign_key(cls: type[Any], relation: Relation) -> str:
        if relation.foreign_key:
            return str(relation.foreign_key)
        if isinstance(relation, BelongsTo):
            return f"{relation.name}_id"
        if relation.as_:
            return f"{relation.as_}_id"
        return f"{underscore(cls.__name__)}_id"

    # -- queries -------------------------------------------------------------

    def where(self, cls: type[Any], conditions: Mapping[str, Any]) -> Cursor[Any]:
        criteria = {**cls.__default_scope__, **conditions}
        return self._collection(cls).find(criteria)

    def fetch_one_unscoped(self, instance: Any, association: Association) -> Any | None:
        target = self._target(association)
        criteria = self._child_criteria(instance, association)
        doc = self._collection(target).find_one(criteria)
        if doc is None:
            return None
        return MongoDocumentMapper(target).from_doc(doc)

    def fetch_many_unscoped(
        self, instance: Any, association: Association
    ) -> Iterable[Any]:
        target = self._target(association)
        criteria = self._child_criteria(instance, association)
        cursor = self._collection(target).find(criteria)
        return MongoDocumentMapper(target).from_docs(cursor)

    @staticmethod
    def _child_criteria(instance: Any, association: Association) -> dict[str, Any]:
        criteria: dict[str, Any] = {str(association.foreign_key): instance.id}
        if association.as_:
            criteria[f"{association.as_}_type"] = class_path(type(instance))
        return criteria

    @staticmethod
    def _target(association: Association) -> type[Any]:
        target: type[Any] = import_string(str(association.target_class_name))
        return target

    def _collection(self, cls: type[Any]) -> Collection[Any]:
        return self._db()[cls.collection_name()]

    def _db(self) -> Database[Any]:
        if self._database is not None:
            return self._database
        if self._database_factory is not None:
            return self._database_factory()
        raise MongoConnectionError(
            "MongoAdapter has no database; pass database= or database_factory="
        )

    # -- filters -------------------------------------------------------------

    def build_statement(
        self,
        column: Any,
        column_type: str,
        operator: str | None,
        value: Any,
    ) -> Any | None:
        return compile_filter(
            self._statement_builder,
            column,
            column_type,
            operator,
            value,
            date_format=self._date_format,
            today=self._today,
        )
