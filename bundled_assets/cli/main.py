"""Command line entry point for bundled-assets."""

from __future__ import annotations

from pathlib import Path

import click

from bundled_assets import __version__
from bundled_assets.cli.commands import config_cmd, fonts, images, text
from bundled_assets.config import Config
from bundled_assets.exceptions import ConfigError
from bundled_assets.log import setup_logging


@click.group()
@click.version_option(__version__, prog_name="bundled-assets")
@click.option(
    "--root",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Resource root directory (overrides the config file)",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path),
    help="YAML config file",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging verbosity",
)
@click.option("--locale", "default_locale", help="Default locale, e.g. de_DE")
@click.pass_context
def cli(
    ctx: click.Context,
    root: Path | None,
    config_path: Path | None,
    log_level: str | None,
    default_locale: str | None,
) -> None:
    """Inspect fonts, images, localized text and config values of a resource tree."""
    try:
        config = Config.load(config_path)
    except ConfigError as e:
        raise click.UsageError(str(e)) from e

    if root is not None:
        config.resource_root = root
    if log_level:
        config.log_level = log_level.upper()
    if default_locale:
        config.default_locale = default_locale

    setup_logging(config.log_level)

    ctx.ensure_object(dict)
    ctx.obj["config"] = config
    ctx.obj["log_level"] = config.log_level


cli.add_command(fonts)
cli.add_command(images)
cli.add_command(text)
cli.add_command(config_cmd)


def main() -> None:
    cli(obj={})


if __name__ == "__main__":
    main()
