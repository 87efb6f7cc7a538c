"""
BackendAdapter port.

Every persistence backend the admin can manage (relational, document)
implements this interface once.  A :class:`~admin_backends_core.model.Model`
holds a reference to the adapter that claimed its class instead of
acquiring backend-specific methods itself.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping
from enum import Enum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from ..associations import Association


class AdapterKind(str, Enum):
    """Persistence technology behind a model."""

    RELATIONAL = "relational"
    DOCUMENT = "document"


class BackendAdapter(ABC):
    """Capabilities the model facade consumes from a backend."""

    @property
    @abstractmethod
    def kind(self) -> AdapterKind:
        """Adapter kind reported by models of this backend."""
        ...

    @abstractmethod
    def supports(self, cls: type[Any]) -> bool:
        """
        Return ``True`` if *cls* is a concrete entity of this backend.

        Abstract bases and unrelated classes return ``False``.
        """
        ...

    @abstractmethod
    def associations(self, cls: type[Any]) -> list[Association]:
        """Associations declared by *cls*, in declaration order."""
        ...

    @abstractmethod
    def where(self, cls: type[Any], conditions: Mapping[str, Any]) -> Any:
        """Lazy, default-scoped query for records matching *conditions*."""
        ...

    @abstractmethod
    def fetch_one_unscoped(self, instance: Any, association: Association) -> Any | None:
        """Fetch the has-one child of *instance*, bypassing default scopes."""
        ...

    @abstractmethod
    def fetch_many_unscoped(
        self, instance: Any, association: Association
    ) -> Iterable[Any]:
        """Fetch all has-many children of *instance*, bypassing default scopes."""
        ...

    @abstractmethod
    def build_statement(
        self,
        column: Any,
        column_type: str,
        operator: str | None,
        value: Any,
    ) -> Any | None:
        """Compile one filter row into a backend predicate (``None`` to skip)."""
        ...
