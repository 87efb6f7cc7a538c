"""
Document base class and relation declarations.

Documents are pydantic models persisted one per MongoDB document::

    class Post(Document):
        __relations__ = (
            HasMany("comments", target="Comment", as_="commentable"),
            BelongsTo("author", target="blog.models.User"),
        )
        title: str


    class Comment(Document):
        __relations__ = (BelongsTo("commentable", polymorphic=True),)
        __default_scope__ = {"archived_at": None}
        body: str
        commentable_id: ObjectId | None = None
        commentable_type: str | None = None
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar

from bson import ObjectId
from pydantic import BaseModel, ConfigDict, Field

from admin_backends_core.associations import AssociationKind
from admin_backends_core.naming import class_path, underscore


@dataclass(frozen=True)
class Relation:
    """
    Declared association of a document class.

    Attributes:
        name: Attribute name of the association.
        target: Target document class, or its name.  A bare class name is
            looked up in the declaring class's module.
        as_: Polymorphic interface implemented by a has-one/has-many.
        foreign_key: Field holding the reference; defaults to
            ``<owner>_id`` on the child (``<as_>_id`` when polymorphic).
    """

    name: str
    target: type[Any] | str | None = None
    as_: str | None = None
    foreign_key: str | None = None

    kind: ClassVar[AssociationKind]

    def target_name(self, owner: type[Any]) -> str | None:
        if self.target is None:
            return None
        if isinstance(self.target, type):
            return class_path(self.target)
        if "." in self.target:
            return self.target
        return f"{owner.__module__}.{self.target}"


@dataclass(frozen=True)
class HasOne(Relation):
    kind: ClassVar[AssociationKind] = AssociationKind.HAS_ONE


@dataclass(frozen=True)
class HasMany(Relation):
    kind: ClassVar[AssociationKind] = AssociationKind.HAS_MANY


@dataclass(frozen=True)
class BelongsTo(Relation):
    polymorphic: bool = False

    kind: ClassVar[AssociationKind] = AssociationKind.BELONGS_TO


class Document(BaseModel):
    """Base class for documents managed by the Mongo adapter."""

    model_config = ConfigDict(arbitrary_types_allowed=True, populate_by_name=True)

    __collection__: ClassVar[str | None] = None
    __relations__: ClassVar[tuple[Relation, ...]] = ()
    __default_scope__: ClassVar[dict[str, Any]] = {}
    __abstract__: ClassVar[bool] = True

    id: ObjectId = Field(default_factory=ObjectId)

    @classmethod
    def collection_name(cls) -> str:
        return cls.__collection__ or f"{underscore(cls.__name__)}s"

    @classmethod
    def is_abstract(cls) -> bool:
        return bool(cls.__dict__.get("__abstract__", False))
