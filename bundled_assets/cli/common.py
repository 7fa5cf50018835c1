"""Helpers shared by the CLI commands."""

from __future__ import annotations

import click

from bundled_assets.config import Config
from bundled_assets.context import AssetContext
from bundled_assets.exceptions import ConfigError


def asset_context(ctx: click.Context) -> AssetContext:
    """Build an empty AssetContext from the group's config.

    Raises:
        click.UsageError: If no resource root is configured.
    """
    obj = ctx.find_root().obj or {}
    config = obj.get("config") or Config()
    try:
        return AssetContext.from_config(config)
    except ConfigError as e:
        raise click.UsageError(f"{e}; pass --root or set BUNDLED_ASSETS_ROOT") from e
