"""Pydantic bases for value objects and editable templates."""

from __future__ import annotations

from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict


def utc_now() -> datetime:
    return datetime.now(UTC)


class ValueModel(BaseModel):
    """Frozen value object; change it by building a replacement."""

    model_config = ConfigDict(frozen=True, extra="forbid")


class TemplateModel(BaseModel):
    """Editable model whose assignments are re-validated.

    A setter that would break a field constraint raises and leaves the
    previous value in place.
    """

    model_config = ConfigDict(extra="forbid", validate_assignment=True)
