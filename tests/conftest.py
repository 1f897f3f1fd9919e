from __future__ import annotations

import sys
from collections.abc import Iterator
from pathlib import Path

import pytest

# Ensure the src/ directory is importable when tests run via `uv run pytest`.
sys.path.append(str(Path(__file__).resolve().parents[1] / "src"))

from creational.cli.deps import reset_container  # noqa: E402


@pytest.fixture(autouse=True)
def _fresh_singletons() -> Iterator[None]:
    """Every test starts and ends with no shared services constructed."""

    reset_container(singletons=True)
    yield
    reset_container(singletons=True)
