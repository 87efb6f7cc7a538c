from .adapter import AdapterKind, BackendAdapter

__all__ = ["AdapterKind", "BackendAdapter"]
