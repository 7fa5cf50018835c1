"""Logging setup for bundled-assets.

Modules log through ``logging.getLogger(__name__)``; nothing is printed until
an application (or the CLI) calls :func:`setup_logging`.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER = "bundled_assets"


def setup_logging(level: str | int = "WARNING", console: Console | None = None) -> logging.Logger:
    """Route package log records to a rich console handler.

    Calling it again replaces the handler installed by the previous call.

    Args:
        level: Level name or number.
        console: Console to write to; stderr by default.

    Returns:
        The package logger.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        if getattr(handler, "_bundled_assets", False):
            logger.removeHandler(handler)

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    handler._bundled_assets = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    logger.setLevel(level.upper() if isinstance(level, str) else level)
    return logger
