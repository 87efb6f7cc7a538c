"""Backend-neutral association metadata."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class AssociationKind(str, Enum):
    HAS_ONE = "has_one"
    HAS_MANY = "has_many"
    BELONGS_TO = "belongs_to"
    POLYMORPHIC_BELONGS_TO = "polymorphic_belongs_to"


@dataclass(frozen=True)
class Association:
    """
    One association declared by a model.

    Attributes:
        name: Attribute name on the owning model (e.g. ``"comments"``).
        kind: Cardinality / direction of the association.
        owner_name: Fully-qualified name of the declaring model.
        target_class_name: Fully-qualified name of the associated model;
            ``None`` for a polymorphic belongs-to, whose target varies.
        as_: Polymorphic interface this association implements
            (``has_many comments, as: commentable``), if any.
        foreign_key: Column/field holding the reference, when known.
    """

    name: str
    kind: AssociationKind
    owner_name: str
    target_class_name: str | None = None
    as_: str | None = None
    foreign_key: str | None = None

    @property
    def is_polymorphic(self) -> bool:
        return self.kind == AssociationKind.POLYMORPHIC_BELONGS_TO or bool(self.as_)

    @property
    def is_collection(self) -> bool:
        return self.kind == AssociationKind.HAS_MANY
