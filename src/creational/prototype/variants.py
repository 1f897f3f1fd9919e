"""Closed union over every prototype variant and helpers dispatching on it."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Annotated, Any, TypeVar

from pydantic import Field, TypeAdapter, ValidationError

from creational.exceptions import InvalidArgumentError

from .base import Prototype
from .characters import Character
from .documents import Document
from .shapes import AnyShape

P = TypeVar("P", bound=Prototype)

AnyPrototype = Annotated[Document | Character | AnyShape, Field(discriminator="kind")]

_ADAPTER: TypeAdapter[Document | Character | AnyShape] = TypeAdapter(AnyPrototype)


def clone_prototype(prototype: P) -> P:
    """Return an independent copy of ``prototype`` of the same variant."""

    return prototype.clone()


def load_prototype(data: Mapping[str, Any]) -> Prototype:
    """Build a prototype from its serialized form, selecting the variant by ``kind``."""

    try:
        return _ADAPTER.validate_python(dict(data))
    except ValidationError as exc:
        msg = f"Invalid prototype payload: {exc.error_count()} validation error(s)"
        raise InvalidArgumentError(msg) from exc


def dump_prototype(prototype: Prototype) -> dict[str, Any]:
    return prototype.model_dump(mode="json")


__all__ = ["AnyPrototype", "clone_prototype", "dump_prototype", "load_prototype"]
