"""Typer CLI over the shared prototype registry and configuration."""

from __future__ import annotations

import json

import typer

from creational.exceptions import NotFoundError
from creational.logging_setup import configure_logging
from creational.prototype import dump_prototype

from .deps import get_container

app = typer.Typer(help="Creational pattern toolkit command-line interface")
config_app = typer.Typer(help="Shared configuration store")
app.add_typer(config_app, name="config")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Configure logging before any command runs."""

    configure_logging("DEBUG" if verbose else get_container().settings.log_level)


@app.command("show-settings")
def show_settings() -> None:
    """Print the resolved application settings."""

    settings = get_container().settings
    typer.echo("Environment:\t" + settings.environment)
    typer.echo("Log Level:\t" + settings.log_level)
    typer.echo("Database URL:\t" + settings.database_url)
    typer.echo("Seed Prototypes:\t" + str(settings.seed_prototypes).lower())


@app.command("list-prototypes")
def list_prototypes() -> None:
    """List registered prototype keys in sorted order."""

    keys = get_container().prototype_registry.list_keys()
    if not keys:
        typer.echo("No prototypes registered")
        return
    for key in keys:
        typer.echo(key)


@app.command("clone")
def clone(
    key: str,
    name: str | None = typer.Option(None, help="Rename the clone before printing it"),
) -> None:
    """Clone a registered template and print it as JSON."""

    registry = get_container().prototype_registry
    try:
        prototype = registry.create_clone(key)
    except NotFoundError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1) from exc
    if name:
        prototype.set_name(name)
    typer.echo(json.dumps(dump_prototype(prototype), indent=2, sort_keys=True))


@config_app.command("get")
def config_get(key: str) -> None:
    """Print a configuration value."""

    try:
        value = get_container().config_manager.require(key)
    except NotFoundError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1) from exc
    typer.echo(value)


@config_app.command("set")
def config_set(key: str, value: str) -> None:
    """Set a configuration value for the current process."""

    get_container().config_manager.set(key, value)
    typer.echo(f"{key}={value}")


@config_app.command("list")
def config_list() -> None:
    """Print every configuration entry."""

    for key, value in sorted(get_container().config_manager.all().items()):
        typer.echo(f"{key}={value}")
