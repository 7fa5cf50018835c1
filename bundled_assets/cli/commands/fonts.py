"""Fonts command - inspect the fonts of a resource tree."""

from __future__ import annotations

import math

import click
from fontTools.misc.transform import Transform
from rich.console import Console
from rich.table import Table

from bundled_assets.cli.common import asset_context
from bundled_assets.fonts import FontStyle, design_style

console = Console()

_STYLES = {
    "plain": FontStyle.PLAIN,
    "bold": FontStyle.BOLD,
    "italic": FontStyle.ITALIC,
    "bold-italic": FontStyle.BOLD | FontStyle.ITALIC,
}


def _style_label(style: FontStyle) -> str:
    if style == FontStyle.PLAIN:
        return "plain"
    parts = []
    if style & FontStyle.BOLD:
        parts.append("bold")
    if style & FontStyle.ITALIC:
        parts.append("italic")
    return "-".join(parts)


@click.group()
def fonts() -> None:
    """Font commands."""
    pass


@fonts.command("list")
@click.argument("scope", default="")
@click.option("--suffix", "suffixes", multiple=True, help="File suffix to include (repeatable)")
@click.pass_context
def list_fonts(ctx: click.Context, scope: str, suffixes: tuple[str, ...]) -> None:
    """List the fonts found under SCOPE."""
    assets = asset_context(ctx)

    with console.status("[bold green]Loading fonts..."):
        count = assets.fonts.load_all_fonts(assets.root, scope, suffixes or None)

    table = Table(title="Fonts")
    table.add_column("Key", style="cyan")
    table.add_column("Family", style="green")
    table.add_column("PostScript name")
    table.add_column("Design style", style="yellow")

    for key in sorted(assets.fonts.font_keys()):
        font = assets.fonts.get_font(key)
        if font is None:
            continue
        table.add_row(key, font.family, font.font_name, _style_label(design_style(font)))

    console.print(table)
    console.print(f"\n[bold]Total:[/bold] {count} fonts")


@fonts.command("show")
@click.argument("key")
@click.option("--scope", default="", help="Scope to load fonts from")
@click.option("--size", type=float, help="Point size")
@click.option("--style", type=click.Choice(list(_STYLES)), help="Style flags")
@click.option("--rotate", type=float, help="Rotation in degrees")
@click.option("--glyph", help="Print the SVG path of this character")
@click.pass_context
def show_font(
    ctx: click.Context,
    key: str,
    scope: str,
    size: float | None,
    style: str | None,
    rotate: float | None,
    glyph: str | None,
) -> None:
    """Show one font, optionally as a derived variant."""
    assets = asset_context(ctx)
    assets.load_fonts(scope)

    transform = Transform().rotate(math.radians(rotate)) if rotate is not None else None
    font = assets.fonts.get_font(
        key,
        size=size,
        style=_STYLES[style] if style else None,
        transform=transform,
    )
    if font is None:
        console.print(f"[red]Error:[/red] Font not found: {key}")
        raise SystemExit(1)

    console.print(f"[bold]Key:[/bold] {key}")
    console.print(f"[bold]Family:[/bold] {font.family}")
    console.print(f"[bold]Full name:[/bold] {font.full_name}")
    console.print(f"[bold]PostScript name:[/bold] {font.font_name}")
    console.print(f"[bold]Size:[/bold] {font.size:g}")
    console.print(f"[bold]Style:[/bold] {_style_label(font.style)}")
    console.print(f"[bold]Units per em:[/bold] {font.units_per_em}")
    if font.is_transformed:
        console.print(f"[bold]Transform:[/bold] {tuple(round(v, 6) for v in font.transform)}")

    if glyph:
        path = font.glyph_path(glyph[0])
        if path is None:
            console.print(f"[yellow]No glyph for {glyph[0]!r}[/yellow]")
        else:
            console.print(path, soft_wrap=True, markup=False)
