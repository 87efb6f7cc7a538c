"""
Model: a backend-neutral handle on one persistence class.

A ``Model`` stores only the class *name* and re-imports the class on every
access, so reloaded modules are always picked up.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import TYPE_CHECKING, Any

from .associations import Association, AssociationKind
from .naming import humanize, import_string, underscore

if TYPE_CHECKING:
    from .ports.adapter import AdapterKind, BackendAdapter

ChildVisitor = Callable[[Association, Any], None]


class Model:
    def __init__(self, model_name: str, adapter: BackendAdapter) -> None:
        self._model_name = model_name
        self._adapter = adapter

    @property
    def model_name(self) -> str:
        return self._model_name

    @property
    def adapter(self) -> BackendAdapter:
        return self._adapter

    @property
    def adapter_kind(self) -> AdapterKind:
        return self._adapter.kind

    @property
    def model(self) -> type[Any]:
        """The persistence class, re-imported by name."""
        return import_string(self._model_name)  # type: ignore[no-any-return]

    def __str__(self) -> str:
        return self._model_name

    def __repr__(self) -> str:
        return f"<Model {self._model_name} ({self.adapter_kind.value})>"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Model):
            return NotImplemented
        return (
            self._model_name == other._model_name
            and self.adapter_kind == other.adapter_kind
        )

    def __hash__(self) -> int:
        return hash((self._model_name, self.adapter_kind))

    # -- naming --------------------------------------------------------------

    def to_param(self) -> str:
        """URL-safe identifier, e.g. ``shop~models~blog_post``."""
        return "~".join(underscore(part) for part in self._model_name.split("."))

    def param_key(self) -> str:
        """Form parameter key, e.g. ``shop_models_blog_post``."""
        return "_".join(underscore(part) for part in self._model_name.split("."))

    def pretty_name(self) -> str:
        return humanize(self.model.__name__)

    # -- backend passthroughs ------------------------------------------------

    @property
    def associations(self) -> list[Association]:
        return self._adapter.associations(self.model)

    def where(self, **conditions: Any) -> Any:
        return self._adapter.where(self.model, conditions)

    def compile_filter(
        self,
        column: Any,
        column_type: str,
        operator: str | None,
        value: Any,
    ) -> Any | None:
        """Predicate for one filter row on this model's backend, or ``None``."""
        return self._adapter.build_statement(column, column_type, operator, value)

    # -- traversal -----------------------------------------------------------

    def each_associated_children(
        self, instance: Any
    ) -> Iterator[tuple[Association, Any]]:
        """
        Yield ``(association, child)`` for every has-one / has-many child.

        Children are fetched unscoped (archived or otherwise hidden rows are
        included) because this traversal backs cascading deletes.
        """
        for association in self.associations:
            if association.kind == AssociationKind.HAS_ONE:
                child = self._adapter.fetch_one_unscoped(instance, association)
                if child is not None:
                    yield association, child
            elif association.kind == AssociationKind.HAS_MANY:
                for child in self._adapter.fetch_many_unscoped(instance, association):
                    yield association, child

    def for_each_child(self, instance: Any, visit: ChildVisitor) -> None:
        for association, child in self.each_associated_children(instance):
            visit(association, child)
