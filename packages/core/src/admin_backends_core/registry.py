"""
ModelRegistry: resolves configured model names into :class:`Model` objects.

The registry is an explicit object owned by the application (one per admin
instance) rather than module-level state.  Its caches are populated lazily
and read thereafter; rebuilding is a pure function of the configured
models, so ``reset()`` is the only invalidation needed.
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING, Any

from .model import Model
from .naming import class_path, import_string
from .polymorphic import PolymorphicIndex
from .ports.adapter import AdapterKind
from .primitives.exceptions import ConfigurationError, ModelNotFoundError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from .config import AdminBackendsConfig
    from .ports.adapter import BackendAdapter

logger = logging.getLogger("admin_backends.registry")


class ModelRegistry:
    """
    Usage::

        registry = ModelRegistry(
            AdminBackendsConfig(included_models=("shop.models.Order",)),
            adapters=[SQLAlchemyAdapter(), MongoAdapter(database=db)],
        )
        for model in registry.all(AdapterKind.RELATIONAL):
            ...
    """

    def __init__(
        self,
        config: AdminBackendsConfig,
        adapters: Sequence[BackendAdapter],
    ) -> None:
        if not adapters:
            raise ConfigurationError("ModelRegistry needs at least one adapter")
        self._config = config
        self._adapters = list(adapters)
        self._all: list[Model] | None = None
        self._lock = threading.RLock()
        self._polymorphic = PolymorphicIndex(self.all)

    @property
    def config(self) -> AdminBackendsConfig:
        return self._config

    @property
    def adapters(self) -> list[BackendAdapter]:
        return list(self._adapters)

    def adapter_for(self, adapter_kind: AdapterKind | str) -> BackendAdapter:
        kind = AdapterKind(adapter_kind)
        for adapter in self._adapters:
            if adapter.kind == kind:
                return adapter
        raise ConfigurationError(f"No adapter registered for {kind.value!r}")

    # -- model set -----------------------------------------------------------

    def init(self) -> list[Model]:
        """Eagerly build the model set (otherwise built on first use)."""
        return self.all()

    def all(self, adapter_kind: AdapterKind | str | None = None) -> list[Model]:
        """
        Every resolvable configured model, de-duplicated, in config order.

        Models that fail to resolve are left out; one bad entry never
        fails the whole set.
        """
        with self._lock:
            if self._all is None:
                self._all = self._build()
            models = self._all
        if adapter_kind is None:
            return list(models)
        kind = AdapterKind(adapter_kind)
        return [m for m in models if m.adapter_kind == kind]

    def reset(self) -> None:
        """Drop the cached model set; ``Model`` objects already held stay usable."""
        with self._lock:
            self._all = None

    invalidate = reset

    def _build(self) -> list[Model]:
        models: list[Model] = []
        seen: set[str] = set()
        for entry in self._config.models_pool():
            model = self.resolve(entry)
            if model is None or model.model_name in seen:
                continue
            seen.add(model.model_name)
            models.append(model)
        logger.debug("Resolved %d model(s)", len(models))
        return models

    # -- single lookups ------------------------------------------------------

    def resolve(self, model: str | type[Any]) -> Model | None:
        """
        Resolve a class or fully-qualified class name into a :class:`Model`.

        Returns ``None`` when the class fails to load or no adapter
        manages it (abstract bases, plain classes).
        """
        if isinstance(model, str):
            name = model
            try:
                cls = import_string(name)
            except Exception as exc:
                # Includes errors raised while executing the module body.
                if not self._config.quiet:
                    logger.warning(
                        "Could not load model %s, assuming model is non existing. (%s)",
                        name,
                        exc,
                    )
                return None
        else:
            cls = model
            name = class_path(cls)

        if not isinstance(cls, type):
            return None
        for adapter in self._adapters:
            if adapter.supports(cls):
                return Model(name, adapter)
        return None

    def get(self, model: str | type[Any]) -> Model:
        """Like :meth:`resolve` but raises ``ModelNotFoundError``."""
        resolved = self.resolve(model)
        if resolved is None:
            name = model if isinstance(model, str) else class_path(model)
            raise ModelNotFoundError(name)
        return resolved

    # -- polymorphic parents -------------------------------------------------

    def polymorphic_parents(
        self,
        adapter_kind: AdapterKind | str,
        model_name: str,
        as_name: str,
    ) -> list[str]:
        """Names of models that can own the polymorphic ``as_name`` of *model_name*."""
        return self._polymorphic.parents_of(adapter_kind, model_name, as_name)

    def reset_polymorphic_parents(self) -> None:
        self._polymorphic.reset()
