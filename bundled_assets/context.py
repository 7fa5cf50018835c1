"""Composition root.

An application builds one :class:`AssetContext` at startup and passes it (or
the individual stores) to whatever needs assets. There are no module-level
singletons: one context per application is a convention of the caller and
the store types do not enforce it.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from bundled_assets.config import Config
from bundled_assets.configstore import ConfigStore
from bundled_assets.discovery import ResourceRoot
from bundled_assets.exceptions import ConfigError
from bundled_assets.fonts.cache import FontCache
from bundled_assets.i18n.bundles import LocaleBundleIndex
from bundled_assets.images.cache import ImageCache


@dataclass
class AssetContext:
    """The set of stores one application shares."""

    root: ResourceRoot
    fonts: FontCache
    images: ImageCache
    texts: LocaleBundleIndex
    configs: ConfigStore
    config: Config = field(default_factory=Config)

    @classmethod
    def from_config(cls, config: Config, root: ResourceRoot | None = None) -> AssetContext:
        """Build empty stores for ``config``.

        Args:
            config: Application settings.
            root: Resource root; defaults to ``config.resource_root``.

        Raises:
            ConfigError: If no root is given and the config has none.
        """
        if root is None:
            if config.resource_root is None:
                raise ConfigError("No resource root configured")
            root = ResourceRoot(config.resource_root)
        return cls(
            root=root,
            fonts=FontCache(config.font_suffixes),
            images=ImageCache(config.image_suffixes),
            texts=LocaleBundleIndex(root, config.default_locale),
            configs=ConfigStore(),
            config=config,
        )

    def load_fonts(self, scope: str = "") -> int:
        return self.fonts.load_all(self.root, scope)

    def load_images(self, scope: str = "") -> int:
        return self.images.load_all(self.root, scope)

    def load_image_from_url(self, key: str, url: str) -> bool:
        return self.images.load_image_from_url(key, url, timeout=self.config.url_timeout)

    def clear_all(self) -> None:
        """Empty every store."""
        self.fonts.clear()
        self.images.clear()
        self.texts.clear()
        self.configs.clear()
