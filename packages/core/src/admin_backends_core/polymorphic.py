"""Reverse lookup of polymorphic parents."""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING

from .naming import underscore
from .ports.adapter import AdapterKind

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from .model import Model

logger = logging.getLogger("admin_backends.registry")

PolymorphicKey = tuple[str, str]


class PolymorphicIndex:
    """
    ``(underscored target, as-name)`` -> names of the models that own it.

    For ``Post.comments`` declared as ``has_many(Comment, as="commentable")``
    the index maps ``("comment", "commentable")`` to ``["Post"]`` (fully
    qualified), so the owners of a ``commentable`` can be listed from the
    ``Comment`` side.

    Built lazily once per adapter kind from the model set supplied by
    *models_for*; owners are appended in model order and are not
    de-duplicated (one entry per declaring association).
    """

    def __init__(self, models_for: Callable[[AdapterKind], Iterable[Model]]) -> None:
        self._models_for = models_for
        self._buckets: dict[AdapterKind, dict[PolymorphicKey, list[str]]] = {}
        self._lock = threading.RLock()

    def parents_of(
        self,
        adapter_kind: AdapterKind | str,
        model_name: str,
        as_name: str,
    ) -> list[str]:
        """Owner model names for ``(model_name, as_name)``; empty when unknown."""
        buckets = self.buckets(AdapterKind(adapter_kind))
        return list(buckets.get((underscore(model_name), as_name), ()))

    def buckets(self, adapter_kind: AdapterKind) -> dict[PolymorphicKey, list[str]]:
        with self._lock:
            if adapter_kind not in self._buckets:
                self._buckets[adapter_kind] = self.build(adapter_kind)
            return self._buckets[adapter_kind]

    def build(self, adapter_kind: AdapterKind) -> dict[PolymorphicKey, list[str]]:
        """Compute the buckets for *adapter_kind* from the current model set."""
        buckets: dict[PolymorphicKey, list[str]] = {}
        for model in self._models_for(adapter_kind):
            for association in model.associations:
                if not association.as_ or association.target_class_name is None:
                    continue
                key = (underscore(association.target_class_name), association.as_)
                buckets.setdefault(key, []).append(model.model_name)
        logger.debug(
            "Built polymorphic index for %s: %d key(s)",
            adapter_kind.value,
            len(buckets),
        )
        return buckets

    def reset(self) -> None:
        with self._lock:
            self._buckets = {}
