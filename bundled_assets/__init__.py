"""bundled-assets: in-memory caches for an application's bundled resources.

This library provides:
- Font and image caches filled from a resource directory or package
- Derived variants (resized images, resized/restyled/transformed fonts)
  computed on demand without touching the cached original
- Localized labels, messages and errors with locale fallback
- Flat configuration values from ``.properties`` files

Example:
    >>> from bundled_assets import AssetContext, Config, ResourceRoot
    >>> ctx = AssetContext.from_config(Config(), ResourceRoot("resources"))
    >>> ctx.fonts.load_all_fonts(ctx.root, "font")
    >>> ctx.fonts.get_font("menomonia", size=26)
"""

from bundled_assets.exceptions import (
    AssetDecodeError,
    BundledAssetsError,
    BundleNotFoundError,
    ConfigError,
    InvalidScopeError,
    ResourceNotFoundError,
    UnknownConfigKeyError,
)
from bundled_assets.discovery import ResourceRoot
from bundled_assets.store import KeyedAssetStore, stem_extension_key, stem_key
from bundled_assets.fonts import Font, FontCache, FontStyle
from bundled_assets.images import ImageCache
from bundled_assets.variants import FontVariant, ImageVariant, resolve_font, resolve_image
from bundled_assets.i18n import Category, Locale, LocaleBundleIndex
from bundled_assets.configstore import ConfigStore
from bundled_assets.config import Config
from bundled_assets.context import AssetContext

__version__ = "0.1.0"

__all__ = [
    # Composition
    "AssetContext",
    "Config",
    "ResourceRoot",
    # Stores
    "KeyedAssetStore",
    "stem_key",
    "stem_extension_key",
    "FontCache",
    "ImageCache",
    "LocaleBundleIndex",
    "ConfigStore",
    # Assets and variants
    "Font",
    "FontStyle",
    "FontVariant",
    "ImageVariant",
    "resolve_font",
    "resolve_image",
    "Category",
    "Locale",
    # Exceptions
    "BundledAssetsError",
    "ResourceNotFoundError",
    "InvalidScopeError",
    "AssetDecodeError",
    "BundleNotFoundError",
    "UnknownConfigKeyError",
    "ConfigError",
    # Metadata
    "__version__",
]
