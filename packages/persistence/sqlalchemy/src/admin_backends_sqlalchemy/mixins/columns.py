"""
SQLAlchemy column mixins.

``ArchivableModelMixin`` marks a model as soft-deletable.  Combined with
:func:`~admin_backends_sqlalchemy.scopes.install_archive_scope`, archived rows
are hidden from ordinary queries and only reachable through unscoped ones.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from sqlalchemy import DateTime, Index, String
from sqlalchemy.orm import Mapped, declared_attr, mapped_column


class ArchivableModelMixin:
    """
    Adds ``archived_at`` / ``archived_by`` columns.

    Defines partial indexes for both halves of the archive scope
    (``archived_at IS NULL`` and ``IS NOT NULL``).  If your subclass defines
    ``__table_args__``, include ``ArchivableModelMixin.__table_args__(cls)``
    or the indexes are omitted.
    """

    archived_at: Mapped[datetime | None] = mapped_column(
        DateTime, nullable=True, index=True
    )
    archived_by: Mapped[str | None] = mapped_column(String, nullable=True)

    @declared_attr.directive
    def __table_args__(cls: Any) -> tuple[Any, ...]:  # noqa: N805
        active_where = cls.archived_at.is_(None)
        archived_where = cls.archived_at.is_not(None)
        return (
            Index(
                f"ix_{cls.__tablename__}_archivable_active",
                cls.archived_at,
                postgresql_where=active_where,
                sqlite_where=active_where,
            ),
            Index(
                f"ix_{cls.__tablename__}_archivable_archived",
                cls.archived_at,
                postgresql_where=archived_where,
                sqlite_where=archived_where,
            ),
        )

    @property
    def is_archived(self) -> bool:
        return self.archived_at is not None

    def archive(self, by: str | None = None) -> None:
        self.archived_at = datetime.now(timezone.utc)
        self.archived_by = by

    def restore(self) -> None:
        self.archived_at = None
        self.archived_by = None
