"""
In-memory backend used by the core test suite.

``Row`` subclasses play the relational models, ``Doc`` subclasses the
document models.  Children are stored per ``(parent id, association)``.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, ClassVar

from admin_backends_core import (
    AdapterKind,
    Association,
    AssociationKind,
    BackendAdapter,
    class_path,
)

HAS_ONE = AssociationKind.HAS_ONE
HAS_MANY = AssociationKind.HAS_MANY
BELONGS_TO = AssociationKind.BELONGS_TO
POLYMORPHIC_BELONGS_TO = AssociationKind.POLYMORPHIC_BELONGS_TO

AssociationSpec = tuple[str, AssociationKind, "str | None", "str | None"]

NOT_A_MODEL = "post"


class Entity:
    __abstract__ = True
    __associations__: ClassVar[tuple[AssociationSpec, ...]] = ()

    def __init__(self, id: int, **attrs: Any) -> None:
        self.id = id
        self.__dict__.update(attrs)


class Row(Entity):
    __abstract__ = True


class Doc(Entity):
    __abstract__ = True


class Author(Row):
    pass


class Post(Row):
    __associations__ = (
        ("author", BELONGS_TO, "memory_backend.Author", None),
        ("comments", HAS_MANY, "memory_backend.Comment", "commentable"),
        ("cover", HAS_ONE, "memory_backend.Photo", None),
    )


class Photo(Row):
    __associations__ = (
        ("comments", HAS_MANY, "memory_backend.Comment", "commentable"),
    )


class Comment(Row):
    __associations__ = (("commentable", POLYMORPHIC_BELONGS_TO, None, None),)


class BlogPost(Row):
    pass


class Note(Doc):
    __associations__ = (
        ("attachments", HAS_MANY, "memory_backend.Attachment", "attachable"),
    )


class Attachment(Doc):
    __associations__ = (("attachable", POLYMORPHIC_BELONGS_TO, None, None),)


class Plain:
    pass


class InMemoryAdapter(BackendAdapter):
    def __init__(self, kind: AdapterKind, base: type[Entity]) -> None:
        self._kind = kind
        self._base = base
        self.children: dict[tuple[int, str], Any] = {}
        self.supports_calls = 0

    @property
    def kind(self) -> AdapterKind:
        return self._kind

    def supports(self, cls: type[Any]) -> bool:
        self.supports_calls += 1
        return issubclass(cls, self._base) and not cls.__dict__.get(
            "__abstract__", False
        )

    def associations(self, cls: type[Any]) -> list[Association]:
        return [
            Association(
                name=name,
                kind=kind,
                owner_name=class_path(cls),
                target_class_name=target,
                as_=as_,
            )
            for name, kind, target, as_ in cls.__associations__
        ]

    def where(self, cls: type[Any], conditions: Mapping[str, Any]) -> Any:
        return ("where", cls, dict(conditions))

    def fetch_one_unscoped(self, instance: Any, association: Association) -> Any | None:
        return self.children.get((instance.id, association.name))

    def fetch_many_unscoped(
        self, instance: Any, association: Association
    ) -> Iterable[Any]:
        return list(self.children.get((instance.id, association.name), []))

    def build_statement(
        self,
        column: Any,
        column_type: str,
        operator: str | None,
        value: Any,
    ) -> Any | None:
        return ("filter", column, column_type, operator, value)


def relational_adapter() -> InMemoryAdapter:
    return InMemoryAdapter(AdapterKind.RELATIONAL, Row)


def document_adapter() -> InMemoryAdapter:
    return InMemoryAdapter(AdapterKind.DOCUMENT, Doc)
