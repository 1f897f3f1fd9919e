"""Logging bootstrap for command-line entry points."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str | int = logging.INFO) -> None:
    """Apply a basic console handler to the root logger."""

    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            resolved = logging.INFO
    else:
        resolved = level
    logging.basicConfig(level=resolved, format=LOG_FORMAT)
    logging.getLogger("creational").setLevel(resolved)


__all__ = ["LOG_FORMAT", "configure_logging"]
