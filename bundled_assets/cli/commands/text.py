"""Text command - read localized labels, messages and errors."""

from __future__ import annotations

import click
from rich.console import Console
from rich.table import Table

from bundled_assets.cli.common import asset_context
from bundled_assets.exceptions import AssetDecodeError, BundleNotFoundError, InvalidScopeError
from bundled_assets.i18n import Category, LocaleBundleIndex, StringTable

console = Console()

_CATEGORIES = [c.value for c in Category]


def _load(texts: LocaleBundleIndex, category: str, base_name: str, locale: str | None) -> StringTable:
    try:
        return texts.load(category, base_name, locale)
    except (BundleNotFoundError, InvalidScopeError, AssetDecodeError) as e:
        console.print(f"[red]Error:[/red] {e}")
        raise SystemExit(1) from None


@click.group()
def text() -> None:
    """Localized text commands."""
    pass


@text.command("keys")
@click.argument("category", type=click.Choice(_CATEGORIES, case_sensitive=False))
@click.argument("base_name")
@click.option("--locale", help="Locale to load (default: configured locale)")
@click.pass_context
def list_keys(ctx: click.Context, category: str, base_name: str, locale: str | None) -> None:
    """List the entries of bundle BASE_NAME, e.g. language/labels."""
    assets = asset_context(ctx)
    table_data = _load(assets.texts, category, base_name, locale)

    table = Table(title=f"{base_name} ({str(table_data.locale) or 'root'})")
    table.add_column("Key", style="cyan")
    table.add_column("Value")
    for key in sorted(table_data):
        table.add_row(key, table_data[key])

    console.print(table)
    console.print(f"[dim]Sources: {', '.join(table_data.sources)}[/dim]")


@text.command("lookup")
@click.argument("category", type=click.Choice(_CATEGORIES, case_sensitive=False))
@click.argument("base_name")
@click.argument("key")
@click.argument("args", nargs=-1)
@click.option("--locale", help="Locale to load (default: configured locale)")
@click.option("--suffix", help="Append this suffix to the value, e.g. ':'")
@click.pass_context
def lookup(
    ctx: click.Context,
    category: str,
    base_name: str,
    key: str,
    args: tuple[str, ...],
    locale: str | None,
    suffix: str | None,
) -> None:
    """Print the value of KEY, filling {} placeholders with ARGS."""
    assets = asset_context(ctx)
    loaded = _load(assets.texts, category, base_name, locale)

    if assets.texts.find(category, key, loaded.locale) is None:
        console.print(f"[red]Error:[/red] Key not found: {key}")
        raise SystemExit(1)

    value = assets.texts.lookup_formatted(category, key, *args, locale=loaded.locale)
    if suffix is not None and value:
        value += suffix
    console.print(value, markup=False, highlight=False)
