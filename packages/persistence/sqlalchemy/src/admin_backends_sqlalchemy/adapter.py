"""
Relational backend adapter built on the SQLAlchemy ORM.

Association metadata comes from the mapper's relationships.  SQLAlchemy has
no native polymorphic association, so the two halves are declared by
convention:

* the owner side passes ``info={"as": "commentable"}`` to ``relationship()``
  (e.g. ``Post.comments``), and
* the polymorphic side lists ``__polymorphic_belongs_to__ = ("commentable",)``
  and carries ``commentable_id`` / ``commentable_type`` columns.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator, Mapping
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any

from sqlalchemy import Select, inspect, select
from sqlalchemy.orm import (
    MANYTOONE,
    Mapper,
    RelationshipProperty,
    Session,
    object_session,
    with_parent,
)

from admin_backends_core.associations import Association, AssociationKind
from admin_backends_core.naming import class_path
from admin_backends_core.ports.adapter import AdapterKind, BackendAdapter
from admin_backends_filters.builder import compile_filter

from .exceptions import DetachedInstanceError
from .scopes import INCLUDE_ARCHIVED
from .statement_builder import SQLAlchemyStatementBuilder

if TYPE_CHECKING:
    from admin_backends_filters.date_formats import DateFormatProvider
    from admin_backends_filters.duration import Clock

logger = logging.getLogger("admin_backends.sqlalchemy")


class SQLAlchemyAdapter(BackendAdapter):
    """
    Args:
        session_factory: Used to fetch children of instances that are not
            attached to a session.
        statement_builder: Builder class for filter rows.
        date_format: Date pattern provider for date filters.
        today: Clock for relative date filters (``today``, ``this_week``...).
    """

    def __init__(
        self,
        *,
        session_factory: Callable[[], Session] | None = None,
        statement_builder: type[
            SQLAlchemyStatementBuilder
        ] = SQLAlchemyStatementBuilder,
        date_format: DateFormatProvider | None = None,
        today: Clock | None = None,
    ) -> None:
        self._session_factory = session_factory
        self._statement_builder = statement_builder
        self._date_format = date_format
        self._today = today

    @property
    def kind(self) -> AdapterKind:
        return AdapterKind.RELATIONAL

    def supports(self, cls: type[Any]) -> bool:
        if cls.__dict__.get("__abstract__", False):
            return False
        return isinstance(inspect(cls, raiseerr=False), Mapper)

    # -- associations --------------------------------------------------------

    def associations(self, cls: type[Any]) -> list[Association]:
        mapper: Mapper[Any] = inspect(cls)
        owner = class_path(cls)
        result = [
            self._association_for(owner, rel) for rel in mapper.relationships
        ]
        for name in getattr(cls, "__polymorphic_belongs_to__", ()):
            result.append(
                Association(
                    name=name,
                    kind=AssociationKind.POLYMORPHIC_BELONGS_TO,
                    owner_name=owner,
                    foreign_key=f"{name}_id",
                )
            )
        return result

    @staticmethod
    def _association_for(owner: str, rel: RelationshipProperty[Any]) -> Association:
        if rel.direction is MANYTOONE:
            kind = AssociationKind.BELONGS_TO
        elif rel.uselist:
            kind = AssociationKind.HAS_MANY
        else:
            kind = AssociationKind.HAS_ONE
        if rel.secondary is not None:
            foreign_keys = []
        elif rel.direction is MANYTOONE:
            foreign_keys = [local.key for local, _ in rel.local_remote_pairs]
        else:
            foreign_keys = [remote.key for _, remote in rel.local_remote_pairs]
        return Association(
            name=rel.key,
            kind=kind,
            owner_name=owner,
            target_class_name=class_path(rel.mapper.class_),
            as_=rel.info.get("as"),
            foreign_key=foreign_keys[0] if len(foreign_keys) == 1 else None,
        )

    # -- queries -------------------------------------------------------------

    def where(self, cls: type[Any], conditions: Mapping[str, Any]) -> Select[Any]:
        return select(cls).filter_by(**conditions)

    def fetch_one_unscoped(self, instance: Any, association: Association) -> Any | None:
        query = self._children_query(instance, association).limit(1)
        with self._session_for(instance) as session:
            return session.scalars(query).first()

    def fetch_many_unscoped(
        self, instance: Any, association: Association
    ) -> Iterable[Any]:
        query = self._children_query(instance, association)
        with self._session_for(instance) as session:
            return session.scalars(query).all()

    def _children_query(self, instance: Any, association: Association) -> Select[Any]:
        relationship = getattr(type(instance), association.name)
        target = relationship.property.mapper.class_
        return (
            select(target)
            .where(with_parent(instance, relationship))
            .execution_options(**{INCLUDE_ARCHIVED: True})
        )

    @contextmanager
    def _session_for(self, instance: Any) -> Iterator[Session]:
        session = object_session(instance)
        if session is not None:
            yield session
            return
        if self._session_factory is None:
            raise DetachedInstanceError(instance)
        logger.debug("Using session_factory for detached %s", type(instance).__name__)
        with self._session_factory() as session:
            yield session

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
