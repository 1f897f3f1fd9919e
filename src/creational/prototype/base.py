"""Prototype contract shared by every cloneable template."""

from __future__ import annotations

from typing import Annotated, Self

from pydantic import Field

from creational.domain import TemplateModel


class Prototype(TemplateModel):
    """Mutable template whose ``clone`` yields a fully independent copy."""

    name: Annotated[str, Field(min_length=1)]

    def clone(self) -> Self:
        """Return a deep copy of the same concrete variant."""

        return self.model_copy(deep=True)

    def set_name(self, name: str) -> None:
        self.name = name


__all__ = ["Prototype"]
