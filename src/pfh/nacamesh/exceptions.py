"""Exceptions raised while building and exporting airfoil meshes."""

from __future__ import annotations

from typing import Any


__all__ = [
    "NacaMeshError",
    "UsageError",
    "ValidationError",
    "OutputError",
]


def __dir__():
    return __all__


class NacaMeshError(Exception):
    """Base exception for all errors raised by `pfh.nacamesh`."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            details_str = ", ".join(f"{k}={v!r}" for k, v in self.details.items())
            return f"{self.message} ({details_str})"
        return self.message


class UsageError(NacaMeshError):
    """The command line was missing arguments or had unknown ones."""


class ValidationError(NacaMeshError, ValueError):
    """An input value (NACA code, resolution, mode) was rejected."""


class OutputError(NacaMeshError):
    """The output mesh could not be written."""
