"""Exceptions for admin-backends-core."""

from __future__ import annotations

from typing import Any

from admin_backends_filters.exceptions import BackendContractError


class AdminBackendsError(Exception):
    """Root exception for the admin backends toolkit."""

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "message": str(self),
        }


class ConfigurationError(AdminBackendsError):
    """Raised when the registry or an adapter is misconfigured."""


class ModelNotFoundError(AdminBackendsError):
    """Raised by explicit lookups when a model name does not resolve."""

    def __init__(self, model_name: str) -> None:
        self.model_name = model_name
        super().__init__(f"Model {model_name!r} does not exist or is not managed")

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "MODEL_NOT_FOUND",
            "model": self.model_name,
        }


class PersistenceError(AdminBackendsError):
    """Base class for all backend I/O errors."""


__all__ = [
    "AdminBackendsError",
    "BackendContractError",
    "ConfigurationError",
    "ModelNotFoundError",
    "PersistenceError",
]
