"""Executable entry point for `python -m creational.cli` and the `creational` script."""

from __future__ import annotations

from .app import app


def main() -> None:  # pragma: no cover - thin wrapper
    app(prog_name="creational")


if __name__ == "__main__":  # pragma: no cover - CLI entry
    main()
