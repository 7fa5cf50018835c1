"""Config command - read values from properties config resources."""

from __future__ import annotations

import click
from rich.console import Console
from rich.table import Table

from bundled_assets.cli.common import asset_context
from bundled_assets.configstore import DEFAULT_CONFIG_RESOURCE, ConfigStore
from bundled_assets.exceptions import (
    AssetDecodeError,
    InvalidScopeError,
    ResourceNotFoundError,
    UnknownConfigKeyError,
)

console = Console()


def _load(store: ConfigStore, ctx: click.Context, filename: str) -> None:
    assets = asset_context(ctx)
    try:
        store.load(assets.root, filename)
    except (ResourceNotFoundError, InvalidScopeError, AssetDecodeError) as e:
        console.print(f"[red]Error:[/red] {e}")
        raise SystemExit(1) from None


@click.group("config")
def config_cmd() -> None:
    """Configuration value commands."""
    pass


@config_cmd.command("list")
@click.argument("filename", default=DEFAULT_CONFIG_RESOURCE)
@click.pass_context
def list_values(ctx: click.Context, filename: str) -> None:
    """List every value in FILENAME (default: config.properties)."""
    store = ConfigStore()
    _load(store, ctx, filename)

    table = Table(title=filename)
    table.add_column("Key", style="cyan")
    table.add_column("Value")
    for key in sorted(store.keys()):
        table.add_row(key, store.get(key))

    console.print(table)
    console.print(f"\n[bold]Total:[/bold] {len(store)} values")


@config_cmd.command("get")
@click.argument("key")
@click.option("--file", "filename", default=DEFAULT_CONFIG_RESOURCE, help="Properties resource to read")
@click.option("--strict", is_flag=True, help="Exit with status 1 if the key is missing")
@click.pass_context
def get_value(ctx: click.Context, key: str, filename: str, strict: bool) -> None:
    """Print the value of KEY."""
    store = ConfigStore()
    _load(store, ctx, filename)

    if strict:
        try:
            value = store.require(key)
        except UnknownConfigKeyError as e:
            console.print(f"[red]Error:[/red] {e}")
            raise SystemExit(1) from None
    else:
        value = store.get(key)
        if value is None:
            console.print(f"[yellow]Warning:[/yellow] {key} is not set")
            return
    console.print(value, markup=False, highlight=False)
