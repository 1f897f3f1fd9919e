"""Error taxonomy shared by the singleton, prototype and factory layers."""

from __future__ import annotations


class CatalogueError(RuntimeError):
    """Base class for creational component failures."""


class PreconditionNotMetError(CatalogueError):
    """Raised when an operation is attempted before its required setup."""


class InvalidArgumentError(CatalogueError, ValueError):
    """Raised for malformed input such as an unknown type discriminator."""


class NotFoundError(CatalogueError, LookupError):
    """Raised when a keyed lookup misses."""


__all__ = [
    "CatalogueError",
    "InvalidArgumentError",
    "NotFoundError",
    "PreconditionNotMetError",
]
