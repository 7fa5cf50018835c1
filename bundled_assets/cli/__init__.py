"""Command line interface for bundled-assets."""

from bundled_assets.cli.main import cli, main

__all__ = ["cli", "main"]
