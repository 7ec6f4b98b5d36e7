# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Typer CLI application root."""

from __future__ import annotations

from typing import Annotated

import typer

from cacheadapter.core.exceptions import InvalidArgumentError

app = typer.Typer(
    name="cacheadapter",
    help="Inspect and modify a Redis-backed cache",
    no_args_is_help=True,
)

_MISSING = object()


@app.callback()
def main(
    log_level: Annotated[
        str | None, typer.Option("--log-level", help="Override the configured log level")
    ] = None,
) -> None:
    from cacheadapter.core.config import get_settings
    from cacheadapter.core.logging import setup_logging

    settings = get_settings()
    setup_logging(level=log_level or settings.log_level, fmt=settings.log_format)


def _fail(exc: InvalidArgumentError) -> typer.Exit:
    typer.echo(f"Error: {exc}", err=True)
    return typer.Exit(2)


@app.command()
def get(
    key: Annotated[str, typer.Argument(help="Cache key")],
    default: Annotated[
        str | None, typer.Option("--default", "-d", help="Printed when the key is missing")
    ] = None,
) -> None:
    """Print the value stored under KEY."""
    from cacheadapter.cache.factory import get_cache

    value = get_cache().get(key, _MISSING)
    if value is _MISSING:
        if default is None:
            typer.echo(f"Key not found: {key}", err=True)
            raise typer.Exit(1)
        value = default
    typer.echo(value)


@app.command("set")
def set_(
    key: Annotated[str, typer.Argument(help="Cache key")],
    value: Annotated[str, typer.Argument(help="Value to store")],
    ttl: Annotated[
        int | None, typer.Option("--ttl", "-t", help="Time-to-live in seconds")
    ] = None,
) -> None:
    """Store VALUE under KEY."""
    from cacheadapter.cache.factory import get_cache

    try:
        ok = get_cache().set(key, value, ttl=ttl)
    except InvalidArgumentError as exc:
        raise _fail(exc) from exc
    if not ok:
        typer.echo(f"Failed to store {key}", err=True)
        raise typer.Exit(1)
    typer.echo(f"Stored {key}.")


@app.command()
def delete(
    keys: Annotated[list[str], typer.Argument(help="One or more cache keys")],
) -> None:
    """Delete one key, or several keys as a single transaction."""
    from cacheadapter.cache.factory import get_cache

    cache = get_cache()
    ok = cache.delete(keys[0]) if len(keys) == 1 else cache.delete_multiple(keys)
    if not ok:
        typer.echo("Nothing deleted: at least one key was missing.", err=True)
        raise typer.Exit(1)
    typer.echo(f"Deleted {len(keys)} key(s).")


@app.command()
def has(key: Annotated[str, typer.Argument(help="Cache key")]) -> None:
    """Exit 0 if KEY exists, 1 otherwise."""
    from cacheadapter.cache.factory import get_cache

    if get_cache().has(key):
        typer.echo("yes")
        return
    typer.echo("no")
    raise typer.Exit(1)


@app.command()
def clear(
    yes: Annotated[bool, typer.Option("--yes", "-y", help="Skip confirmation")] = False,
) -> None:
    """Flush every key of the configured database."""
    from cacheadapter.cache.factory import get_cache

    if not yes:
        typer.confirm("Flush the entire database?", abort=True)
    if not get_cache().clear():
        typer.echo("Flush failed.", err=True)
        raise typer.Exit(1)
    typer.echo("Cache cleared.")


@app.command()
def info() -> None:
    """Show the effective cache configuration."""
    from rich.console import Console
    from rich.table import Table

    from cacheadapter.core.config import get_settings
    from cacheadapter.core.logging import redact_sensitive

    settings = get_settings()

    console = Console()
    table = Table(title="Cache Configuration")
    table.add_column("Setting", style="bold")
    table.add_column("Value")

    table.add_row("Redis URL", redact_sensitive(settings.redis_url))
    table.add_row("Socket Timeout", str(settings.socket_timeout))
    table.add_row("Serializer", settings.serializer)
    table.add_row("Bulk Pre-check", str(settings.bulk_precheck))

    console.print(table)
