from .associations import Association, AssociationKind
from .config import AdminBackendsConfig
from .model import ChildVisitor, Model
from .naming import class_path, humanize, import_string, underscore
from .polymorphic import PolymorphicIndex
from .ports.adapter import AdapterKind, BackendAdapter
from .primitives.exceptions import (
    AdminBackendsError,
    BackendContractError,
    ConfigurationError,
    ModelNotFoundError,
    PersistenceError,
)
from .registry import ModelRegistry

__all__ = [
    # Model facade
    "Model",
    "ModelRegistry",
    "PolymorphicIndex",
    "ChildVisitor",
    # Associations
    "Association",
    "AssociationKind",
    # Ports
    "AdapterKind",
    "BackendAdapter",
    # Config
    "AdminBackendsConfig",
    # Exceptions
    "AdminBackendsError",
    "BackendContractError",
    "ConfigurationError",
    "ModelNotFoundError",
    "PersistenceError",
    # Naming
    "class_path",
    "humanize",
    "import_string",
    "underscore",
]
