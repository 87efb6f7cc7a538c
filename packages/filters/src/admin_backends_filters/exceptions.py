"""Exceptions raised by the filter compiler."""

from __future__ import annotations

from typing import Any


class FilterError(Exception):
    """Base exception for all filter compiler errors."""

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "message": str(self),
        }


class BackendContractError(FilterError, NotImplementedError):
    """
    A backend statement builder did not supply a required override.

    This is a programming error in the backend package, never a data error,
    and is not caught anywhere in the filter compiler.
    """

    def __init__(self, method: str, builder: type[Any]) -> None:
        self.method = method
        self.builder = builder.__name__
        super().__init__(
            f"You must override {method} in your StatementBuilder "
            f"({self.builder} does not)"
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "BACKEND_CONTRACT_ERROR",
            "method": self.method,
            "builder": self.builder,
        }
