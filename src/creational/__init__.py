"""Creational pattern building blocks: guarded singletons, prototypes and factories."""

from .exceptions import (
    CatalogueError,
    InvalidArgumentError,
    NotFoundError,
    PreconditionNotMetError,
)

__all__ = [
    "CatalogueError",
    "InvalidArgumentError",
    "NotFoundError",
    "PreconditionNotMetError",
]
