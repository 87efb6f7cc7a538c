"""
Archive default scope.

Ordinary ORM queries skip archived rows of every ``ArchivableModelMixin``
model.  A statement opts out ("unscoped") with::

    select(Comment).execution_options(include_archived=True)
"""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy import event
from sqlalchemy.orm import ORMExecuteState, with_loader_criteria

from .mixins.columns import ArchivableModelMixin

logger = logging.getLogger("admin_backends.sqlalchemy")

INCLUDE_ARCHIVED = "include_archived"


def _apply_archive_scope(state: ORMExecuteState) -> None:
    if not state.is_select or state.is_column_load or state.is_relationship_load:
        return
    if state.execution_options.get(INCLUDE_ARCHIVED, False):
        return
    state.statement = state.statement.options(
        with_loader_criteria(
            ArchivableModelMixin,
            lambda cls: cls.archived_at.is_(None),
            include_aliases=True,
        )
    )


def install_archive_scope(target: Any) -> None:
    """
    Hide archived rows for sessions created from *target*.

    *target* is anything ``do_orm_execute`` listens on: the ``Session``
    class, a ``sessionmaker`` or a single session.
    """
    if not event.contains(target, "do_orm_execute", _apply_archive_scope):
        event.listen(target, "do_orm_execute", _apply_archive_scope)
        logger.debug("Installed archive scope on %r", target)


def uninstall_archive_scope(target: Any) -> None:
    if event.contains(target, "do_orm_execute", _apply_archive_scope):
        event.remove(target, "do_orm_execute", _apply_archive_scope)
        logger.debug("Removed archive scope from %r", target)
