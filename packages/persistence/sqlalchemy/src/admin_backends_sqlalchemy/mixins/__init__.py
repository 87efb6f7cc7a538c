from .columns import ArchivableModelMixin

__all__ = ["ArchivableModelMixin"]
