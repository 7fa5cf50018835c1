"""CLI commands for bundled-assets."""

from bundled_assets.cli.commands.fonts import fonts
from bundled_assets.cli.commands.images import images
from bundled_assets.cli.commands.text import text
from bundled_assets.cli.commands.config import config_cmd

__all__ = ["fonts", "images", "text", "config_cmd"]
