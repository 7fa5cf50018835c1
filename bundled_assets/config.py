"""Application configuration for bundled-assets.

Settings come from a YAML file and environment variables, environment
winning::

    resource_root: ./resources
    default_locale: de_DE
    log_level: INFO
    font_suffixes: [.ttf, .otf]
    image_suffixes: [.png, .PNG]
    url_timeout: 10

The file is looked up at the explicit path, else ``$BUNDLED_ASSETS_CONFIG``,
else ``~/.config/bundled-assets/config.yaml``. A missing default file is not
an error; a missing explicit file is.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from bundled_assets.exceptions import ConfigError
from bundled_assets.fonts.cache import FONT_SUFFIXES
from bundled_assets.images.cache import IMAGE_SUFFIXES

ENV_CONFIG = "BUNDLED_ASSETS_CONFIG"
ENV_ROOT = "BUNDLED_ASSETS_ROOT"
ENV_LOCALE = "BUNDLED_ASSETS_LOCALE"
ENV_LOG_LEVEL = "BUNDLED_ASSETS_LOG_LEVEL"

DEFAULT_CONFIG_PATH = Path("~/.config/bundled-assets/config.yaml")

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _suffix_list(value: Any, name: str) -> tuple[str, ...]:
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ConfigError(f"'{name}' must be a list of strings", details={"value": value})
    if not value or not all(v.strip() for v in value):
        raise ConfigError(f"'{name}' must list at least one non-empty suffix", details={"value": value})
    return tuple(value)


@dataclass
class Config:
    """Runtime settings shared by the CLI and the composition root."""

    resource_root: Path | None = None
    default_locale: str | None = None
    log_level: str = "WARNING"
    font_suffixes: tuple[str, ...] = FONT_SUFFIXES
    image_suffixes: tuple[str, ...] = IMAGE_SUFFIXES
    url_timeout: float = 30.0
    source: Path | None = field(default=None, compare=False)

    @classmethod
    def from_mapping(cls, data: dict[str, Any], source: Path | None = None) -> Config:
        """Build a Config from parsed YAML, validating types.

        Raises:
            ConfigError: On unknown keys or invalid values.
        """
        known = {"resource_root", "default_locale", "log_level", "font_suffixes", "image_suffixes", "url_timeout"}
        unknown = set(data) - known
        if unknown:
            raise ConfigError(f"Unknown config keys: {', '.join(sorted(unknown))}", details={"source": str(source)})

        config = cls(source=source)
        if data.get("resource_root") is not None:
            root = Path(str(data["resource_root"])).expanduser()
            if source is not None and not root.is_absolute():
                root = source.parent / root
            config.resource_root = root
        if data.get("default_locale") is not None:
            config.default_locale = str(data["default_locale"])
        if data.get("log_level") is not None:
            config.log_level = str(data["log_level"])
        if "font_suffixes" in data:
            config.font_suffixes = _suffix_list(data["font_suffixes"], "font_suffixes")
        if "image_suffixes" in data:
            config.image_suffixes = _suffix_list(data["image_suffixes"], "image_suffixes")
        if data.get("url_timeout") is not None:
            try:
                config.url_timeout = float(data["url_timeout"])
            except (TypeError, ValueError) as e:
                raise ConfigError("'url_timeout' must be a number", details={"value": data["url_timeout"]}) from e
        config.validate()
        return config

    @classmethod
    def load(cls, path: Path | str | None = None) -> Config:
        """Load settings from YAML and apply environment overrides.

        Args:
            path: Explicit config file; must exist when given.

        Raises:
            ConfigError: If the file is unreadable, not a mapping, or invalid.
        """
        explicit = path is not None or bool(os.environ.get(ENV_CONFIG))
        target = Path(path or os.environ.get(ENV_CONFIG) or DEFAULT_CONFIG_PATH).expanduser()

        data: dict[str, Any] = {}
        if target.is_file():
            try:
                with open(target, encoding="utf-8") as f:
                    loaded = yaml.safe_load(f)
            except (OSError, yaml.YAMLError) as e:
                raise ConfigError(f"Failed to read config file: {e}", details={"path": str(target)}) from e
            if loaded is None:
                loaded = {}
            if not isinstance(loaded, dict):
                raise ConfigError("Config file must contain a mapping", details={"path": str(target)})
            data = loaded
        elif explicit:
            raise ConfigError(f"Config file not found: {target}")

        config = cls.from_mapping(data, source=target if data else None)
        config.apply_env()
        return config

    def apply_env(self) -> None:
        """Override fields from ``BUNDLED_ASSETS_*`` environment variables."""
        if os.environ.get(ENV_ROOT):
            self.resource_root = Path(os.environ[ENV_ROOT]).expanduser()
        if os.environ.get(ENV_LOCALE):
            self.default_locale = os.environ[ENV_LOCALE]
        if os.environ.get(ENV_LOG_LEVEL):
            self.log_level = os.environ[ENV_LOG_LEVEL]
        self.validate()

    def validate(self) -> None:
        """Raise ConfigError if a field holds an unusable value."""
        self.log_level = self.log_level.upper()
        if self.log_level not in _LOG_LEVELS:
            raise ConfigError(f"Invalid log level: {self.log_level}", details={"choices": list(_LOG_LEVELS)})
        if self.url_timeout <= 0:
            raise ConfigError("'url_timeout' must be positive", details={"value": self.url_timeout})

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level)
