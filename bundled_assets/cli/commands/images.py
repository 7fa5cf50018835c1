"""Images command - inspect the images of a resource tree."""

from __future__ import annotations

from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from bundled_assets.cli.common import asset_context

console = Console()


@click.group()
def images() -> None:
    """Image commands."""
    pass


@images.command("list")
@click.argument("scope", default="")
@click.option("--suffix", "suffixes", multiple=True, help="File suffix to include (repeatable)")
@click.pass_context
def list_images(ctx: click.Context, scope: str, suffixes: tuple[str, ...]) -> None:
    """List the images found under SCOPE."""
    assets = asset_context(ctx)

    with console.status("[bold green]Loading images..."):
        count = assets.images.load_all_images(assets.root, scope, suffixes or None)

    table = Table(title="Images")
    table.add_column("Key", style="cyan")
    table.add_column("Format", style="green")
    table.add_column("Size", style="yellow")
    table.add_column("Mode", style="dim")

    for key in sorted(assets.images.image_keys()):
        image = assets.images.get(key)
        if image is None:
            continue
        width, height = image.size
        table.add_row(key, image.format or "-", f"{width}x{height}", image.mode)

    console.print(table)
    console.print(f"\n[bold]Total:[/bold] {count} images")


@images.command("show")
@click.argument("key")
@click.option("--scope", default="", help="Scope to load images from")
@click.option("--width", type=int, help="Target width (needs --height)")
@click.option("--height", type=int, help="Target height (needs --width)")
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write the (scaled) image to this file",
)
@click.pass_context
def show_image(
    ctx: click.Context,
    key: str,
    scope: str,
    width: int | None,
    height: int | None,
    output: Path | None,
) -> None:
    """Show one image, optionally scaled to WIDTH x HEIGHT."""
    assets = asset_context(ctx)
    assets.load_images(scope)

    image = assets.images.get_image(key, width=width, height=height)
    if image is None:
        console.print(f"[red]Error:[/red] Image not found: {key}")
        raise SystemExit(1)

    console.print(f"[bold]Key:[/bold] {key}")
    console.print(f"[bold]Size:[/bold] {image.width}x{image.height}")
    console.print(f"[bold]Mode:[/bold] {image.mode}")

    if output:
        try:
            image.save(output)
        except (OSError, ValueError) as e:
            console.print(f"[red]Error:[/red] Could not write {output}: {e}")
            raise SystemExit(1) from None
        console.print(f"[green]Saved:[/green] {output}")
